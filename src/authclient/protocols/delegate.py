# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Delegate hooks observing requests sent through an API client."""

from typing import TYPE_CHECKING, Any

from ..exceptions import APIClientError
from ..types.http import TransportRequest
from ..types.response import APIResponse

if TYPE_CHECKING:
    from .client import APIClientProtocol


class APIClientDelegate:
    """
    Base class for objects that observe an API client.

    Every hook defaults to a no-op, so delegates override only what they
    need. ``will_send`` may mutate the request (e.g. attach credentials);
    ``did_send`` and ``did_fail`` observe the outcome and cannot change it.
    """

    def will_send(self, client: "APIClientProtocol", request: TransportRequest) -> None:
        """Invoked immediately before the request is handed to the transport."""

    def did_send(
        self,
        client: "APIClientProtocol",
        request: TransportRequest,
        response: APIResponse[Any],
    ) -> None:
        """Invoked when a request produced a response envelope."""

    def did_fail(
        self,
        client: "APIClientProtocol",
        request: TransportRequest,
        error: APIClientError,
    ) -> None:
        """Invoked when a request failed."""
