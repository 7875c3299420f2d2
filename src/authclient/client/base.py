# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Base API client implementation.

BaseAPIClient is the default implementation of APIClientProtocol. It holds
only read-only configuration, the transport and an immutable tuple of
delegates, so one instance can serve any number of concurrent requests.

Subclasses customise behaviour by overriding the hooks:

- ``error_from`` to parse the service's error body format;
- ``will_send`` to mutate requests before they are sent;
- ``did_send`` / ``did_fail`` to observe outcomes.
"""

import dataclasses
import logging
import threading
from collections.abc import Mapping
from typing import Any, TypeVar

from ..coding import JSONEncoder, decoder_for
from ..config import ClientConfiguration
from ..exceptions import APIClientError, RequestBuildError, ServerError
from ..protocols.client import SendCompletion
from ..protocols.delegate import APIClientDelegate
from ..protocols.transport import DataTaskProtocol, TransportProtocol
from ..request import APIRequest
from ..types.errors import APIErrorBody
from ..types.http import HTTPResponse, TransportRequest
from ..types.response import APIResponse
from .pipeline import evaluate

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BaseAPIClient:
    """
    Default API client: resolves, sends, validates and decodes requests.

    Example:
        >>> config = ClientConfiguration(base_url="https://example.okta.com/api/v1/")
        >>> client = BaseAPIClient(config, HttpxTransport())
        >>> response = await client.send(Request(path="users/me"), User)
        >>> response.result.profile.login
    """

    def __init__(
        self,
        configuration: ClientConfiguration,
        transport: TransportProtocol,
    ) -> None:
        """
        Initialize the client.

        Args:
            configuration: Read-only settings shared by every request
            transport: Transport used to execute requests
        """
        self.configuration = configuration
        self._transport = transport
        self._delegates: tuple[APIClientDelegate, ...] = ()
        self._delegate_lock = threading.Lock()

    # ===== CONFIGURATION =====

    @property
    def base_url(self) -> str:
        return self.configuration.base_url

    @property
    def transport(self) -> TransportProtocol:
        return self._transport

    @property
    def additional_headers(self) -> Mapping[str, str]:
        return self.configuration.additional_headers

    @property
    def user_agent(self) -> str:
        return self.configuration.user_agent

    @property
    def request_id_header(self) -> str | None:
        return self.configuration.request_id_header

    @property
    def timeout(self) -> float | None:
        return self.configuration.timeout

    @property
    def encoder(self) -> JSONEncoder:
        return self.configuration.encoder

    # ===== DELEGATES =====

    @property
    def delegates(self) -> tuple[APIClientDelegate, ...]:
        return self._delegates

    def add_delegate(self, delegate: APIClientDelegate) -> None:
        """Register a delegate; in-flight requests keep the set they started with."""
        with self._delegate_lock:
            if delegate not in self._delegates:
                self._delegates = (*self._delegates, delegate)

    def remove_delegate(self, delegate: APIClientDelegate) -> None:
        with self._delegate_lock:
            self._delegates = tuple(d for d in self._delegates if d is not delegate)

    # ===== CODING =====

    def decode(
        self, result_type: type[T], data: bytes, context: Mapping[str, Any] | None = None
    ) -> T:
        """Decode a response body, honouring a type's own JSONDecodable decoder."""
        decoder = decoder_for(result_type, self.configuration.decoder)
        merged = {"base_url": self.base_url, **(context or {})}
        return decoder.decode(result_type, data, merged)

    def error_from(self, data: bytes) -> Any | None:
        """Parse a management API error body; None when the body is not one."""
        try:
            return self.configuration.decoder.decode(APIErrorBody, data)
        except ValueError:
            return None

    # ===== HOOKS =====

    def will_send(self, request: TransportRequest) -> None:
        for delegate in self._delegates:
            delegate.will_send(self, request)

    def did_send(self, request: TransportRequest, response: APIResponse[Any]) -> None:
        for delegate in self._delegates:
            self._observe(delegate.did_send, self, request, response)

    def did_fail(self, request: TransportRequest, error: APIClientError) -> None:
        for delegate in self._delegates:
            self._observe(delegate.did_fail, self, request, error)

    def _observe(self, hook: Any, *args: Any) -> None:
        try:
            hook(*args)
        except Exception:
            logger.exception(f"Request hook {hook!r} raised")

    # ===== SENDING =====

    def resolve(self, request: APIRequest) -> TransportRequest:
        """Resolve a request descriptor against this client.

        Raises:
            RequestBuildError: If the descriptor cannot be resolved.
        """
        return request.request_for(self)

    async def send(
        self, request: TransportRequest | APIRequest, result_type: type[T]
    ) -> APIResponse[T]:
        """
        Send a request and wait for the decoded response.

        Args:
            request: A resolved TransportRequest or an APIRequest descriptor
            result_type: Type the response body is decoded into

        Returns:
            The response envelope.

        Raises:
            APIClientError: Exactly one of its subclasses on failure.
        """
        prepared = self._prepare(request)
        if isinstance(prepared, APIClientError):
            raise prepared

        body: bytes | None = None
        response: HTTPResponse | None = None
        error: BaseException | None = None
        try:
            body, response = await self._transport.fetch(prepared)
        except Exception as e:
            error = e

        outcome = self._finish(prepared, result_type, body, response, error)
        if isinstance(outcome, APIClientError):
            raise outcome
        return outcome

    def send_with_callback(
        self,
        request: TransportRequest | APIRequest,
        result_type: type[T],
        completion: SendCompletion,
    ) -> DataTaskProtocol | None:
        """
        Send a request and report the outcome through ``completion``.

        ``completion`` is invoked at most once, with either an APIResponse or
        an APIClientError, on whatever thread the transport completes on.

        Returns:
            The data task, or None when the request could not be resolved
            or the task could not be created (the completion has then
            already been invoked).
        """
        prepared = self._prepare(request)
        if isinstance(prepared, APIClientError):
            completion(prepared)
            return None

        completed = threading.Event()
        completed_lock = threading.Lock()

        def on_complete(
            body: bytes | None,
            response: HTTPResponse | None,
            error: BaseException | None,
        ) -> None:
            with completed_lock:
                if completed.is_set():
                    logger.debug(f"Ignoring repeated completion for {prepared.url}")
                    return
                completed.set()
            completion(self._finish(prepared, result_type, body, response, error))

        task: DataTaskProtocol | None = None
        try:
            task = self._transport.data_task(prepared, on_complete)
            task.resume()
        except Exception as e:
            if completed.is_set():
                # Raised by the completion itself.
                raise
            logger.debug(f"Could not start data task for {prepared.url}: {e!r}")
            on_complete(None, None, e)
        return task

    def _prepare(
        self, request: TransportRequest | APIRequest
    ) -> TransportRequest | APIClientError:
        if isinstance(request, APIRequest):
            try:
                prepared = self.resolve(request)
            except RequestBuildError as e:
                error = ServerError(e)
                error.__cause__ = e
                return error
        else:
            prepared = dataclasses.replace(request, headers=dict(request.headers))

        try:
            self.will_send(prepared)
        except Exception as e:
            error = ServerError(e)
            error.__cause__ = e
            logger.debug(f"will_send failed for {prepared.url}: {e!r}")
            self._observe(self.did_fail, prepared, error)
            return error
        logger.debug(f"Sending {prepared.method.value} {prepared.url}")
        return prepared

    def _finish(
        self,
        request: TransportRequest,
        result_type: type[T],
        body: bytes | None,
        response: HTTPResponse | None,
        error: BaseException | None,
    ) -> APIResponse[T] | APIClientError:
        outcome = evaluate(self, result_type, body, response, error)
        if isinstance(outcome, APIClientError):
            logger.debug(f"{request.method.value} {request.url} failed: {outcome!r}")
            self._observe(self.did_fail, request, outcome)
        else:
            logger.debug(
                f"{request.method.value} {request.url} succeeded "
                f"(request_id={outcome.request_id})"
            )
            self._observe(self.did_send, request, outcome)
        return outcome


__all__ = ["BaseAPIClient"]
