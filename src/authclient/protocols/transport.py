# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for HTTP transports."""

from collections.abc import Callable
from typing import Protocol, runtime_checkable

from ..types.http import HTTPResponse, TransportRequest

TransportCompletion = Callable[
    [bytes | None, HTTPResponse | None, BaseException | None], None
]
"""Callback receiving ``(body, response, error)`` when a data task finishes."""


@runtime_checkable
class DataTaskProtocol(Protocol):
    """A pending callback-style request returned by ``data_task``."""

    def resume(self) -> None:
        """Start the request. Calling it more than once has no effect."""
        ...

    def cancel(self) -> None:
        """Cancel the request; the completion receives a TransportCancelledError."""
        ...


@runtime_checkable
class TransportProtocol(Protocol):
    """
    Minimal protocol any HTTP client library can satisfy.

    A transport executes one concrete request and reports the raw outcome.
    It never retries, and it never drops a failure silently:

    - ``data_task`` invokes its completion exactly once, with either a body
      and response or an error;
    - ``fetch`` either returns ``(body, response)`` or raises.
    """

    def data_task(
        self, request: TransportRequest, completion: TransportCompletion
    ) -> DataTaskProtocol:
        """Create a callback-style task for ``request`` (not started until resumed)."""
        ...

    async def fetch(self, request: TransportRequest) -> tuple[bytes, HTTPResponse]:
        """Execute ``request`` and return the body with its response metadata."""
        ...
