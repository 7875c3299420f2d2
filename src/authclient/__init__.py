# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""authclient - Typed HTTP request pipeline for authentication SDKs.

This library dispatches typed request descriptors over a pluggable HTTP
transport, validates and decodes the responses, and normalizes every failure
into a single exception taxonomy. It also builds OAuth2 token requests.

Key Features:
    - One validation pipeline behind both async and callback entry points
    - Typed response envelopes with pagination links, rate limit counters,
      request IDs and server dates
    - pydantic-based decoding with snake_case key conversion
    - OAuth2 token requests for every common grant type, with PKCE
    - Transport-agnostic design with protocol-based interfaces

Quick Start:
    >>> from authclient import GrantType, OAuth2Client, PKCE, TokenRequest
    >>> from authclient.transports import HttpxTransport
    >>>
    >>> client = OAuth2Client.for_issuer("https://example.okta.com", HttpxTransport())
    >>> response = await client.exchange(
    ...     TokenRequest(
    ...         client_id="0oa...",
    ...         redirect_uri="com.example:/callback",
    ...         grant_type=GrantType.AUTHORIZATION_CODE,
    ...         grant_value=code,
    ...         pkce=pkce,
    ...     )
    ... )
    >>> response.result.access_token

Main Exports:
    - BaseAPIClient, OAuth2Client: API clients
    - APIRequest, Request, TokenRequest: Request descriptors
    - APIResponse, RateLimitInfo, LinkRelation: Response envelope types
    - APIClientError and its subclasses: Pipeline failures
    - TransportProtocol: Protocol for HTTP transports
    - HttpxTransport: httpx-based transport

Note: HttpxTransport requires the 'httpx' extra. Install with:
    pip install authclient[httpx]

Version: 1.0.0
"""

__version__ = "1.0.0"

from typing import TYPE_CHECKING

from .client import BaseAPIClient
from .coding import JSONDecodable, JSONDecoder, JSONEncoder
from .config import ClientConfiguration
from .exceptions import (
    APIClientError,
    AuthClientError,
    CannotParseResponseError,
    ConfigurationError,
    InvalidResponseError,
    MissingResponseError,
    RequestBuildError,
    ServerError,
    ServerReportedError,
    StatusCodeError,
    TransportCancelledError,
)
from .oauth2 import PKCE, GrantType, OAuth2Client, Token, TokenRequest
from .protocols import (
    APIClientDelegate,
    APIClientProtocol,
    DataTaskProtocol,
    IdentityObserverProtocol,
    SignInFlowProtocol,
    TransportProtocol,
)
from .request import APIRequest, Request
from .types import (
    APIErrorBody,
    APIResponse,
    ContentType,
    HTTPMethod,
    HTTPResponse,
    LinkRelation,
    OAuth2ErrorBody,
    RateLimitInfo,
    TransportRequest,
)

# Lazy import for optional httpx transport
if TYPE_CHECKING:
    from .transports import HttpxTransport

__all__ = [
    "PKCE",
    # Exceptions
    "APIClientError",
    "APIClientDelegate",
    # Protocols
    "APIClientProtocol",
    "APIErrorBody",
    # Requests
    "APIRequest",
    # Responses
    "APIResponse",
    "AuthClientError",
    # Clients
    "BaseAPIClient",
    "CannotParseResponseError",
    # Configuration
    "ClientConfiguration",
    "ConfigurationError",
    "ContentType",
    "DataTaskProtocol",
    # OAuth2
    "GrantType",
    "HTTPMethod",
    "HTTPResponse",
    "HttpxTransport",  # Lazy loaded - requires httpx extra
    "IdentityObserverProtocol",
    "InvalidResponseError",
    # Coding
    "JSONDecodable",
    "JSONDecoder",
    "JSONEncoder",
    "LinkRelation",
    "MissingResponseError",
    "OAuth2Client",
    "OAuth2ErrorBody",
    "RateLimitInfo",
    "Request",
    "RequestBuildError",
    "ServerError",
    "ServerReportedError",
    "SignInFlowProtocol",
    "StatusCodeError",
    "Token",
    "TokenRequest",
    "TransportCancelledError",
    "TransportProtocol",
    "TransportRequest",
]


def __getattr__(name: str) -> type:
    """Lazy import for optional httpx transport."""
    if name == "HttpxTransport":
        from .transports import HttpxTransport

        return HttpxTransport
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
