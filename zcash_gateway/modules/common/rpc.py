"""Protocol for the node's request/response RPC channel."""

from __future__ import annotations

from typing import Any, Protocol, Sequence


class RpcChannel(Protocol):
    """Abstract JSON-RPC channel used by the domain services."""

    async def call(self, method: str, params: Sequence[Any] = ()) -> Any:
        ...
