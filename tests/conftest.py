from __future__ import annotations

from collections import deque
from typing import Any, Sequence

import pytest


class FakeRpcChannel:
    """In-memory RPC channel that records calls and replays scripted replies.

    A reply registered for a method is either a single value returned on every
    call, or a list consumed one entry per call. Exceptions are raised.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[Any]]] = []
        self._replies: dict[str, Any] = {}

    def reply(self, method: str, value: Any) -> None:
        self._replies[method] = value

    def reply_sequence(self, method: str, values: Sequence[Any]) -> None:
        self._replies[method] = deque(values)

    def calls_to(self, method: str) -> list[list[Any]]:
        return [params for name, params in self.calls if name == method]

    async def call(self, method: str, params: Sequence[Any] = ()) -> Any:
        self.calls.append((method, list(params)))
        if method not in self._replies:
            raise AssertionError(f"unexpected RPC call: {method}")
        reply = self._replies[method]
        if isinstance(reply, deque):
            reply = reply.popleft()
        if isinstance(reply, BaseException):
            raise reply
        return reply


class SleepRecorder:
    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


@pytest.fixture
def rpc() -> FakeRpcChannel:
    return FakeRpcChannel()


@pytest.fixture
def sleep() -> SleepRecorder:
    return SleepRecorder()


def _status_entry(operation_id: str, status: str, **extra: Any) -> dict[str, Any]:
    entry = {
        "id": operation_id,
        "status": status,
        "creation_time": 1700000000,
        "method": "z_sendmany",
        "params": {"fromaddress": "zs1sender", "amounts": [], "minconf": 1, "fee": None},
    }
    entry.update(extra)
    return entry


@pytest.fixture
def status_entry():
    return _status_entry

