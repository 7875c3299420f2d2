# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Transport implementation backed by httpx.

HttpxTransport satisfies TransportProtocol with an ``httpx.Client`` for the
callback form (run on a small thread pool) and an ``httpx.AsyncClient`` for
the async form. Either client may be injected, e.g. with an
``httpx.MockTransport`` in tests.

Requires the 'httpx' extra:
    pip install authclient[httpx]
"""

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any

import httpx
from typing_extensions import Self

from ..exceptions import TransportCancelledError
from ..protocols.transport import TransportCompletion
from ..types.http import HTTPResponse, TransportRequest

logger = logging.getLogger(__name__)


class HttpxDataTask:
    """Callback-style request executed on the transport's thread pool.

    The completion is invoked exactly once: with the transport outcome, or
    with a TransportCancelledError if ``cancel()`` wins the race.
    """

    def __init__(
        self,
        transport: "HttpxTransport",
        request: TransportRequest,
        completion: TransportCompletion,
    ) -> None:
        self._transport = transport
        self._request = request
        self._completion = completion
        self._lock = threading.Lock()
        self._started = False
        self._finished = False
        self._future: Future[None] | None = None

    @property
    def is_finished(self) -> bool:
        return self._finished

    def resume(self) -> None:
        with self._lock:
            if self._started or self._finished:
                return
            self._started = True
        self._future = self._transport.executor.submit(self._run)

    def cancel(self) -> None:
        with self._lock:
            if self._finished:
                return
        if self._future is not None:
            self._future.cancel()
        logger.debug(f"Cancelled {self._request.method.value} {self._request.url}")
        self._deliver(None, None, TransportCancelledError())

    def _run(self) -> None:
        try:
            body, response = self._transport.execute(self._request)
        except Exception as e:
            self._deliver(None, None, e)
            return
        self._deliver(body, response, None)

    def _deliver(
        self,
        body: bytes | None,
        response: HTTPResponse | None,
        error: BaseException | None,
    ) -> None:
        with self._lock:
            if self._finished:
                return
            self._finished = True
        self._completion(body, response, error)


class HttpxTransport:
    """
    TransportProtocol implementation using httpx.

    Example:
        >>> transport = HttpxTransport()
        >>> client = OAuth2Client.for_issuer("https://example.okta.com", transport)
        >>> ...
        >>> await transport.aclose()
    """

    def __init__(
        self,
        client: httpx.Client | None = None,
        async_client: httpx.AsyncClient | None = None,
        *,
        max_workers: int = 4,
        follow_redirects: bool = False,
    ) -> None:
        """
        Initialize the transport.

        Args:
            client: Client used by the callback form (created on first use if omitted).
                A client passed in stays open when the transport is closed.
            async_client: Client used by ``fetch`` (created on first use if omitted).
                A client passed in stays open when the transport is closed.
            max_workers: Size of the thread pool running callback-style requests
            follow_redirects: Redirect policy for clients created by the transport
        """
        if max_workers < 1:
            raise ValueError("max_workers must be at least 1")
        self._client = client
        self._async_client = async_client
        self._owns_client = client is None
        self._owns_async_client = async_client is None
        self._follow_redirects = follow_redirects
        self._max_workers = max_workers
        self._executor: ThreadPoolExecutor | None = None
        self._lock = threading.Lock()

    @property
    def executor(self) -> ThreadPoolExecutor:
        with self._lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self._max_workers,
                    thread_name_prefix="authclient-http",
                )
            return self._executor

    def _sync_client(self) -> httpx.Client:
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(follow_redirects=self._follow_redirects)
            return self._client

    def _get_async_client(self) -> httpx.AsyncClient:
        with self._lock:
            if self._async_client is None:
                self._async_client = httpx.AsyncClient(
                    follow_redirects=self._follow_redirects
                )
            return self._async_client

    # ===== TransportProtocol =====

    def data_task(
        self, request: TransportRequest, completion: TransportCompletion
    ) -> HttpxDataTask:
        return HttpxDataTask(self, request, completion)

    async def fetch(self, request: TransportRequest) -> tuple[bytes, HTTPResponse]:
        response = await self._get_async_client().request(**_request_kwargs(request))
        return response.content, _to_http_response(response)

    def execute(self, request: TransportRequest) -> tuple[bytes, HTTPResponse]:
        """Execute ``request`` synchronously on the calling thread."""
        response = self._sync_client().request(**_request_kwargs(request))
        return response.content, _to_http_response(response)

    # ===== Lifecycle =====

    def close(self) -> None:
        """Close the thread pool and the sync client the transport created.

        The transport stays usable: the pool and client are recreated on
        next use.
        """
        with self._lock:
            executor, self._executor = self._executor, None
            client: httpx.Client | None = None
            if self._owns_client:
                client, self._client = self._client, None
        if executor is not None:
            executor.shutdown(wait=False)
        if client is not None:
            client.close()

    async def aclose(self) -> None:
        """Close everything ``close`` does plus the async client the transport created."""
        self.close()
        with self._lock:
            async_client: httpx.AsyncClient | None = None
            if self._owns_async_client:
                async_client, self._async_client = self._async_client, None
        if async_client is not None:
            await async_client.aclose()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


def _request_kwargs(request: TransportRequest) -> dict[str, Any]:
    kwargs: dict[str, Any] = {
        "method": request.method.value,
        "url": request.url,
        "headers": request.headers,
        "content": request.body,
    }
    if request.timeout is not None:
        kwargs["timeout"] = request.timeout
    return kwargs


def _to_http_response(response: httpx.Response) -> HTTPResponse:
    return HTTPResponse(
        status_code=response.status_code,
        headers=dict(response.headers),
        url=str(response.url),
    )


__all__ = [
    "HttpxDataTask",
    "HttpxTransport",
]
