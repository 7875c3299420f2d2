# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
HTTP-level types shared by the client pipeline and transports.

This module defines the request method and content type enums, the concrete
request handed to a transport, and the transport-neutral view of HTTP
response metadata.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class HTTPMethod(Enum):
    """HTTP methods used by API requests."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"


class ContentType(Enum):
    """
    Body encodings supported by API requests.

    The value is the MIME type sent in the Content-Type (or Accept) header.
    """

    JSON = "application/json"
    FORM_ENCODED = "application/x-www-form-urlencoded; charset=UTF-8"
    OTHER = "application/octet-stream"


@dataclass
class TransportRequest:
    """
    A concrete HTTP request ready to be executed by a transport.

    Produced by resolving an APIRequest against a client. The pre-send hook
    may mutate ``headers`` in place (e.g. to attach an Authorization header);
    no other field is expected to change after resolution.

    Attributes:
        method: HTTP method
        url: Absolute request URL, including any query string
        headers: Request headers
        body: Encoded request body, if any
        timeout: Per-request timeout in seconds (None uses the transport default)
    """

    method: HTTPMethod
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes | None = None
    timeout: float | None = None

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        return _lookup(self.headers, name)


@dataclass(frozen=True)
class HTTPResponse:
    """
    Transport-neutral HTTP response metadata.

    Attributes:
        status_code: HTTP status code
        headers: Response headers (lookup through ``header()`` is case-insensitive)
        url: Final URL of the response, when the transport reports it
    """

    status_code: int
    headers: Mapping[str, str] = field(default_factory=dict)
    url: str | None = None

    def header(self, name: str) -> str | None:
        """Case-insensitive header lookup."""
        return _lookup(self.headers, name)

    @property
    def is_success(self) -> bool:
        """True for 2xx status codes."""
        return 200 <= self.status_code <= 299


def _lookup(headers: Mapping[str, str], name: str) -> str | None:
    value = headers.get(name)
    if value is not None:
        return value
    lowered = name.lower()
    for key, candidate in headers.items():
        if key.lower() == lowered:
            return candidate
    return None


__all__ = [
    "ContentType",
    "HTTPMethod",
    "HTTPResponse",
    "TransportRequest",
]
