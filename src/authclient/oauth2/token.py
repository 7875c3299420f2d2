# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Token endpoint response model.
"""

from datetime import datetime, timedelta, timezone

from pydantic import BaseModel, ConfigDict, Field


class Token(BaseModel):
    """
    Tokens issued by the OAuth2 token endpoint.

    ``issued_at`` is not part of the token response; OAuth2Client fills it
    from the response date so that ``expires_at`` follows the server clock.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    token_type: str
    expires_in: int
    access_token: str
    scope: str | None = None
    refresh_token: str | None = None
    id_token: str | None = None
    device_secret: str | None = None
    issued_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def expires_at(self) -> datetime:
        return self.issued_at + timedelta(seconds=self.expires_in)

    @property
    def is_expired(self) -> bool:
        return datetime.now(timezone.utc) >= self.expires_at

    @property
    def scopes(self) -> list[str]:
        return self.scope.split() if self.scope else []


__all__ = ["Token"]
