# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for API clients."""

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Protocol, TypeVar, runtime_checkable

from ..coding import JSONEncoder
from ..exceptions import APIClientError
from ..types.http import TransportRequest
from ..types.response import APIResponse
from .transport import DataTaskProtocol, TransportProtocol

if TYPE_CHECKING:
    from ..request import APIRequest

T = TypeVar("T")

SendCompletion = Callable[[APIResponse[Any] | APIClientError], None]
"""Callback receiving either the response envelope or the pipeline error."""


@runtime_checkable
class APIClientProtocol(Protocol):
    """
    Capability set of an API client.

    BaseAPIClient provides the default implementation of every member;
    concrete clients subclass it and override what they need, typically
    ``error_from`` or the send hooks.
    """

    @property
    def base_url(self) -> str:
        """Base URL relative request paths are resolved against."""
        ...

    @property
    def transport(self) -> TransportProtocol:
        """Transport requests are executed through."""
        ...

    @property
    def additional_headers(self) -> Mapping[str, str]:
        """Headers added to every request."""
        ...

    @property
    def user_agent(self) -> str:
        """User-Agent sent with every request."""
        ...

    @property
    def request_id_header(self) -> str | None:
        """Response header holding the server request ID."""
        ...

    @property
    def timeout(self) -> float | None:
        """Default request timeout in seconds."""
        ...

    @property
    def encoder(self) -> JSONEncoder:
        """Encoder for JSON request bodies."""
        ...

    def decode(
        self, result_type: type[T], data: bytes, context: Mapping[str, Any] | None = None
    ) -> T:
        """Decode a response body into ``result_type``."""
        ...

    def error_from(self, data: bytes) -> Any | None:
        """Parse a structured error from a failed response body, if there is one."""
        ...

    def will_send(self, request: TransportRequest) -> None:
        """Mutate the request immediately before it is sent."""
        ...

    def did_send(self, request: TransportRequest, response: APIResponse[Any]) -> None:
        """Observe a successful response."""
        ...

    def did_fail(self, request: TransportRequest, error: APIClientError) -> None:
        """Observe a failed request."""
        ...

    def resolve(self, request: "APIRequest") -> TransportRequest:
        """Resolve a request descriptor into a concrete request."""
        ...

    async def send(
        self, request: "TransportRequest | APIRequest", result_type: type[T]
    ) -> APIResponse[T]:
        """Send a request and return the decoded response envelope."""
        ...

    def send_with_callback(
        self,
        request: "TransportRequest | APIRequest",
        result_type: type[T],
        completion: SendCompletion,
    ) -> DataTaskProtocol | None:
        """Send a request and report the outcome to ``completion``."""
        ...
