# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Client configuration for authclient.

This module provides the read-only context shared by every request a client
sends: base URL, default headers, User-Agent, request ID header and decoding
policy.
"""

from dataclasses import dataclass, field
from urllib.parse import urlsplit

from .coding import DEFAULT_DECODER, DEFAULT_ENCODER, JSONDecoder, JSONEncoder
from .exceptions import ConfigurationError
from .user_agent import default_user_agent

DEFAULT_REQUEST_ID_HEADER = "x-okta-request-id"


@dataclass(frozen=True)
class ClientConfiguration:
    """
    Configuration shared by all requests sent through a client.

    Instances are immutable and may be shared across any number of
    concurrent requests.
    """

    # === Endpoint ===

    base_url: str
    """Base URL that relative request paths are resolved against."""

    # === Headers ===

    additional_headers: dict[str, str] = field(default_factory=dict)
    """Headers added to every request; request-level headers win on conflict."""

    user_agent: str = field(default_factory=default_user_agent)
    """User-Agent sent with every request."""

    request_id_header: str | None = DEFAULT_REQUEST_ID_HEADER
    """Response header holding the server request ID (None disables lookup)."""

    # === Coding ===

    decoder: JSONDecoder = DEFAULT_DECODER
    """Decoding policy for response bodies."""

    encoder: JSONEncoder = DEFAULT_ENCODER
    """Encoding policy for JSON request bodies."""

    # === Transport ===

    timeout: float | None = 60.0
    """Default request timeout in seconds (None leaves it to the transport)."""

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        parts = urlsplit(self.base_url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(
                f"base_url must be an absolute http(s) URL, got {self.base_url!r}"
            )
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")
        if self.request_id_header is not None and not self.request_id_header.strip():
            raise ConfigurationError("request_id_header must not be empty")
        if not self.user_agent:
            raise ConfigurationError("user_agent must not be empty")


__all__ = [
    "DEFAULT_REQUEST_ID_HEADER",
    "ClientConfiguration",
]
