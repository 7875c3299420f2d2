"""
Tests for BaseAPIClient.send_with_callback.

The callback form shares the validation pipeline with ``send``; these tests
check that both forms agree and that the completion fires at most once.
"""

import threading

import pytest
from pydantic import BaseModel

from authclient import (
    APIClientError,
    APIResponse,
    HTTPResponse,
    Request,
    ServerError,
    StatusCodeError,
    TransportCancelledError,
)


class Group(BaseModel):
    id: str
    name: str


GROUP = {"id": "00g1", "name": "Everyone"}


class TestCallbackOutcomes:
    """The completion receives an APIResponse or an APIClientError."""

    def test_success(self, client, transport, collect):
        """A 2xx delivers a decoded envelope."""
        transport.enqueue_json(GROUP, headers={"X-Okta-Request-Id": "req-9"})
        task = client.send_with_callback(Request(path="groups/00g1"), Group, collect)
        assert task is not None
        assert len(collect.outcomes) == 1
        outcome = collect.outcomes[0]
        assert isinstance(outcome, APIResponse)
        assert outcome.result == Group(id="00g1", name="Everyone")
        assert outcome.request_id == "req-9"

    def test_failure(self, client, transport, collect):
        """A non-2xx delivers the typed error instead of raising."""
        transport.enqueue(b"", HTTPResponse(status_code=500))
        client.send_with_callback(Request(path="groups"), Group, collect)
        assert len(collect.outcomes) == 1
        assert isinstance(collect.outcomes[0], StatusCodeError)
        assert collect.outcomes[0].status_code == 500

    def test_unbuildable_request(self, client, transport, collect):
        """Resolution failures are delivered without creating a task."""
        task = client.send_with_callback(
            Request(path="mailto:nobody@example.com"), Group, collect
        )
        assert task is None
        assert len(collect.outcomes) == 1
        assert isinstance(collect.outcomes[0], ServerError)
        assert transport.tasks == []


class TestEquivalence:
    """Both forms produce the same outcome for the same transport result."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "outcome",
        [
            (b'{"id": "00g1", "name": "Everyone"}', HTTPResponse(status_code=200), None),
            (b'{"errorCode": "E1", "errorSummary": "nope"}', HTTPResponse(status_code=403), None),
            (b"<html/>", HTTPResponse(status_code=503), None),
            (b"[]", HTTPResponse(status_code=200), None),
            (None, None, OSError("network down")),
            (None, None, None),
        ],
    )
    async def test_same_outcome(self, client, transport, collect, outcome):
        """The async result (or error type) equals the callback outcome."""
        transport.enqueue(*outcome)
        transport.enqueue(*outcome)

        try:
            async_outcome = await client.send(Request(path="groups/00g1"), Group)
        except APIClientError as e:
            async_outcome = e

        client.send_with_callback(Request(path="groups/00g1"), Group, collect)
        callback_outcome = collect.outcomes[0]

        assert type(async_outcome) is type(callback_outcome)
        if isinstance(async_outcome, APIResponse):
            assert async_outcome.result == callback_outcome.result
            assert async_outcome.links == callback_outcome.links
        else:
            assert str(async_outcome) == str(callback_outcome)


class TestAtMostOnce:
    """The completion is invoked at most once per request."""

    def test_cancel_before_completion(self, client, transport, collect):
        """Cancelling a pending task delivers ServerError(cancelled)."""
        transport.defer_tasks = True
        task = client.send_with_callback(Request(path="groups"), Group, collect)
        assert collect.outcomes == []

        task.cancel()
        assert len(collect.outcomes) == 1
        error = collect.outcomes[0]
        assert isinstance(error, ServerError)
        assert isinstance(error.underlying, TransportCancelledError)

    def test_cancel_after_completion_is_ignored(self, client, transport, collect):
        """Cancelling a finished task does not deliver a second outcome."""
        transport.enqueue_json(GROUP)
        task = client.send_with_callback(Request(path="groups/00g1"), Group, collect)
        task.cancel()
        assert len(collect.outcomes) == 1
        assert isinstance(collect.outcomes[0], APIResponse)

    def test_repeated_transport_completion_is_ignored(self, client, collect):
        """A transport calling back twice still yields one outcome."""

        class ChattyTask:
            def __init__(self, completion):
                self.completion = completion

            def resume(self):
                self.completion(b'{"id": "1", "name": "a"}', HTTPResponse(status_code=200), None)
                self.completion(None, None, OSError("late error"))

            def cancel(self):
                pass

        class ChattyTransport:
            def data_task(self, request, completion):
                return ChattyTask(completion)

            async def fetch(self, request):
                raise NotImplementedError

        chatty = type(client)(client.configuration, ChattyTransport())
        chatty.send_with_callback(Request(path="groups/1"), Group, collect)
        assert len(collect.outcomes) == 1
        assert isinstance(collect.outcomes[0], APIResponse)

    def test_concurrent_completions_deliver_once(self, client, collect):
        """Racing completions from several threads deliver one outcome."""
        barrier = threading.Barrier(8)

        class RacingTask:
            def __init__(self, completion):
                self.completion = completion

            def resume(self):
                def fire():
                    barrier.wait()
                    self.completion(None, None, OSError("race"))

                threads = [threading.Thread(target=fire) for _ in range(8)]
                for thread in threads:
                    thread.start()
                for thread in threads:
                    thread.join()

            def cancel(self):
                pass

        class RacingTransport:
            def data_task(self, request, completion):
                return RacingTask(completion)

            async def fetch(self, request):
                raise NotImplementedError

        racing = type(client)(client.configuration, RacingTransport())
        racing.send_with_callback(Request(path="groups"), Group, collect)
        assert len(collect.outcomes) == 1
        assert isinstance(collect.outcomes[0], ServerError)


class TestTaskStartFailures:
    """Transport failures while creating or starting a task still complete once."""

    def test_data_task_raises(self, client, collect):
        """An exception from data_task is delivered as ServerError."""

        class BrokenTransport:
            def data_task(self, request, completion):
                raise RuntimeError("pool shut down")

            async def fetch(self, request):
                raise NotImplementedError

        broken = type(client)(client.configuration, BrokenTransport())
        task = broken.send_with_callback(Request(path="groups"), Group, collect)

        assert task is None
        assert len(collect.outcomes) == 1
        assert isinstance(collect.outcomes[0], ServerError)
        assert isinstance(collect.outcomes[0].underlying, RuntimeError)

    def test_resume_raises(self, client, collect):
        """An exception from resume is delivered as ServerError and the task returned."""

        class UnstartableTask:
            def resume(self):
                raise RuntimeError("cannot schedule new futures after shutdown")

            def cancel(self):
                pass

        class UnstartableTransport:
            def data_task(self, request, completion):
                return UnstartableTask()

            async def fetch(self, request):
                raise NotImplementedError

        unstartable = type(client)(client.configuration, UnstartableTransport())
        task = unstartable.send_with_callback(Request(path="groups"), Group, collect)

        assert isinstance(task, UnstartableTask)
        assert len(collect.outcomes) == 1
        assert isinstance(collect.outcomes[0], ServerError)

    def test_completion_error_propagates(self, client, transport):
        """An exception raised by the completion itself is not swallowed."""
        transport.enqueue_json(GROUP)
        calls = []

        def completion(outcome):
            calls.append(outcome)
            raise KeyError("caller bug")

        with pytest.raises(KeyError):
            client.send_with_callback(Request(path="groups/00g1"), Group, completion)
        assert len(calls) == 1
