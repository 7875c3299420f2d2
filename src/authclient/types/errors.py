# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Structured error bodies returned by the server.

These models are decoded from the body of a non-2xx response and carried by
ServerReportedError as its ``domain_error``. Keys are decoded with the same
snake_case conversion as any other response, so ``errorCode`` arrives as
``error_code``.
"""

from pydantic import BaseModel, ConfigDict, Field


class APIErrorCause(BaseModel):
    """A single cause listed in an API error body."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    error_summary: str


class APIErrorBody(BaseModel):
    """Error body returned by the management API.

    Example body::

        {"errorCode": "E0000011", "errorSummary": "Invalid token provided",
         "errorLink": "E0000011", "errorId": "oaeXXXX", "errorCauses": []}
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    error_code: str
    error_summary: str
    error_link: str | None = None
    error_id: str | None = None
    error_causes: list[APIErrorCause] = Field(default_factory=list)

    def __str__(self) -> str:
        return f"{self.error_code}: {self.error_summary}"


class OAuth2ErrorBody(BaseModel):
    """Error body returned by OAuth2 endpoints (RFC 6749 section 5.2)."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    error: str
    error_description: str | None = None
    error_uri: str | None = None

    def __str__(self) -> str:
        if self.error_description:
            return f"{self.error}: {self.error_description}"
        return self.error


__all__ = [
    "APIErrorBody",
    "APIErrorCause",
    "OAuth2ErrorBody",
]
