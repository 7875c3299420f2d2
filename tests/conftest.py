"""
Shared fixtures for the authclient test suite.

StubTransport is a scripted TransportProtocol implementation: each call pops
the next queued outcome (or asks ``handler`` for one) and records the
request it was given.
"""

import json
import threading
from collections import deque
from collections.abc import Callable
from typing import Any

import pytest

from authclient import BaseAPIClient, ClientConfiguration
from authclient.exceptions import TransportCancelledError
from authclient.types import HTTPResponse, TransportRequest

Outcome = tuple[bytes | None, Any, BaseException | None]


class StubDataTask:
    """Data task that completes synchronously on ``resume()``."""

    def __init__(self, transport: "StubTransport", request: TransportRequest, completion):
        self._transport = transport
        self._request = request
        self._completion = completion
        self.resumed = False
        self.finished = False

    def resume(self) -> None:
        if self.resumed or self.finished:
            return
        self.resumed = True
        body, response, error = self._transport.next_outcome(self._request)
        self._finish(body, response, error)

    def cancel(self) -> None:
        self._finish(None, None, TransportCancelledError())

    def _finish(self, body, response, error) -> None:
        if self.finished:
            return
        self.finished = True
        self._completion(body, response, error)


class StubTransport:
    """Scripted transport recording every request it executes."""

    def __init__(self, handler: Callable[[TransportRequest], Outcome] | None = None):
        self.handler = handler
        self.outcomes: deque[Outcome] = deque()
        self.requests: list[TransportRequest] = []
        self.defer_tasks = False
        self.tasks: list[StubDataTask] = []
        self._lock = threading.Lock()

    def enqueue(
        self,
        body: bytes | None = None,
        response: Any = None,
        error: BaseException | None = None,
    ) -> None:
        self.outcomes.append((body, response, error))

    def enqueue_json(
        self,
        payload: Any,
        status_code: int = 200,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.enqueue(
            json.dumps(payload).encode("utf-8"),
            HTTPResponse(status_code=status_code, headers=headers or {}),
        )

    def next_outcome(self, request: TransportRequest) -> Outcome:
        with self._lock:
            self.requests.append(request)
            if self.handler is not None:
                return self.handler(request)
            return self.outcomes.popleft()

    def data_task(self, request: TransportRequest, completion) -> StubDataTask:
        task = StubDataTask(self, request, completion)
        self.tasks.append(task)
        if self.defer_tasks:
            task.resumed = True
            return _DeferredTask(task)
        return task

    async def fetch(self, request: TransportRequest):
        body, response, error = self.next_outcome(request)
        if error is not None:
            raise error
        return body, response


class _DeferredTask:
    """Wrapper whose ``resume()`` does nothing, leaving the task pending."""

    def __init__(self, task: StubDataTask):
        self.task = task

    def resume(self) -> None:
        pass

    def cancel(self) -> None:
        self.task.cancel()


@pytest.fixture
def transport():
    """Create an empty scripted transport."""
    return StubTransport()


@pytest.fixture
def configuration():
    """Create a client configuration pointing at a test org."""
    return ClientConfiguration(
        base_url="https://example.okta.com/api/v1/",
        additional_headers={"X-Client": "tests"},
        user_agent="authclient-tests/1.0",
    )


@pytest.fixture
def client(configuration, transport):
    """Create a BaseAPIClient over the scripted transport."""
    return BaseAPIClient(configuration, transport)


@pytest.fixture
def collect():
    """Create a completion callback that stores every outcome it receives."""

    class Collector:
        def __init__(self):
            self.outcomes: list[Any] = []

        def __call__(self, outcome: Any) -> None:
            self.outcomes.append(outcome)

    return Collector()
