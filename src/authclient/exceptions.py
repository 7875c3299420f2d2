# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the authclient library.

This module defines the exception hierarchy used throughout the library.
All exceptions inherit from AuthClientError, making it easy to catch
all client-related exceptions with a single except clause.

Failures of a dispatched request are always reported as one of the
APIClientError subclasses:

    InvalidResponseError       the transport returned something that is not
                               an HTTP response
    MissingResponseError       the transport returned neither data nor error
    ServerError                the transport failed (connection, TLS, cancel)
    StatusCodeError            non-2xx status without a parseable error body
    ServerReportedError        non-2xx status with a structured error body
    CannotParseResponseError   2xx status but the body could not be decoded
"""

from typing import Any


class AuthClientError(Exception):
    """Base exception for all authclient errors.

    This is the root exception class for the authclient library.
    Catch this exception to handle any error originating from the library.

    Example:
        try:
            response = await client.send(request, Token)
        except AuthClientError as e:
            logger.error(f"Token exchange failed: {e}")
    """

    pass


class ConfigurationError(AuthClientError):
    """Raised when client configuration is invalid.

    Common causes include:
    - A base URL that is not an absolute http(s) URL
    - A non-positive timeout
    - An empty request ID header name

    Example:
        try:
            config = ClientConfiguration(base_url="example.com")
        except ConfigurationError as e:
            logger.error(f"Invalid configuration: {e}")
            raise SystemExit(1)
    """

    pass


class RequestBuildError(AuthClientError):
    """Raised when an APIRequest cannot be resolved into a concrete request.

    When resolution happens inside ``send``, this error is reported to the
    caller wrapped in a ServerError so that the pipeline only ever surfaces
    APIClientError instances.
    """

    pass


class TransportCancelledError(AuthClientError):
    """Raised (or delivered) by a transport when its data task is cancelled."""

    def __init__(self, message: str = "Request was cancelled"):
        super().__init__(message)


class APIClientError(AuthClientError):
    """Base class for every failure produced by the request pipeline.

    Exactly one subclass is produced per failed dispatch. Callers decide on
    retry, backoff or user messaging; the pipeline itself does neither.

    Example:
        try:
            response = await client.send(request, Profile)
        except StatusCodeError as e:
            if e.status_code == 429:
                await asyncio.sleep(1.0)
        except APIClientError:
            raise
    """

    pass


class InvalidResponseError(APIClientError):
    """Raised when the transport response is not an HTTP response."""

    def __init__(self, message: str = "Invalid response received"):
        super().__init__(message)


class MissingResponseError(APIClientError):
    """Raised when the transport reports neither a response nor an error."""

    def __init__(self, message: str = "No response received"):
        super().__init__(message)


class ServerError(APIClientError):
    """Raised when the transport itself failed.

    Attributes:
        underlying: The exception reported by the transport, for example a
            connection error or a TransportCancelledError.
    """

    def __init__(self, underlying: BaseException):
        super().__init__(f"Server error: {underlying}")
        self.underlying = underlying


class StatusCodeError(APIClientError):
    """Raised for a non-2xx response whose body is not a structured error.

    Attributes:
        status_code: The HTTP status code of the response.
    """

    def __init__(self, status_code: int):
        super().__init__(f"Unexpected HTTP status code: {status_code}")
        self.status_code = status_code


class ServerReportedError(APIClientError):
    """Raised for a non-2xx response carrying a structured error body.

    Attributes:
        domain_error: The decoded error body (for example an APIErrorBody or
            an OAuth2ErrorBody).
        status_code: The HTTP status code of the response.
    """

    def __init__(self, domain_error: Any, status_code: int | None = None):
        super().__init__(str(domain_error))
        self.domain_error = domain_error
        self.status_code = status_code


class CannotParseResponseError(APIClientError):
    """Raised when a successful response body cannot be decoded.

    Attributes:
        underlying: The decoding exception (JSON syntax or validation error).
    """

    def __init__(self, underlying: BaseException):
        super().__init__(f"Cannot parse response: {underlying}")
        self.underlying = underlying


__all__ = [
    "APIClientError",
    "AuthClientError",
    "CannotParseResponseError",
    "ConfigurationError",
    "InvalidResponseError",
    "MissingResponseError",
    "RequestBuildError",
    "ServerError",
    "ServerReportedError",
    "StatusCodeError",
    "TransportCancelledError",
]
