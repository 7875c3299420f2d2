# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Type definitions and constants."""

from .errors import APIErrorBody, APIErrorCause, OAuth2ErrorBody
from .http import ContentType, HTTPMethod, HTTPResponse, TransportRequest
from .rate_limit import RateLimitInfo, parse_rate_limit_headers
from .response import APIResponse, LinkRelation, parse_link_header

__all__ = [
    # Error bodies
    "APIErrorBody",
    "APIErrorCause",
    # Response envelope
    "APIResponse",
    "ContentType",
    # HTTP types
    "HTTPMethod",
    "HTTPResponse",
    "LinkRelation",
    "OAuth2ErrorBody",
    # Rate limit types
    "RateLimitInfo",
    "TransportRequest",
    "parse_link_header",
    "parse_rate_limit_headers",
]
