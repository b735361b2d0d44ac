"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from zcash_gateway.core.config import Settings, get_settings
from zcash_gateway.infrastructure.rpc import HttpRpcChannel
from zcash_gateway.modules.balances import BalanceAggregator
from zcash_gateway.modules.common import RpcChannel
from zcash_gateway.modules.node import NodeService
from zcash_gateway.modules.operations import OperationService


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    rpc: RpcChannel
    operations: OperationService = field(init=False)
    balances: BalanceAggregator = field(init=False)
    node: NodeService = field(init=False)

    def __post_init__(self) -> None:
        self.operations = OperationService.with_channel(self.rpc, self.settings.operations)
        self.balances = BalanceAggregator(self.rpc)
        self.node = NodeService(self.rpc)

    async def shutdown(self) -> None:
        """Release the RPC transport if it holds network resources."""
        close = getattr(self.rpc, "aclose", None)
        if close is not None:
            await close()


@lru_cache()
def get_container() -> ApplicationContainer:
    settings = get_settings()
    return ApplicationContainer(settings=settings, rpc=HttpRpcChannel.from_settings(settings.rpc))


__all__ = ["ApplicationContainer", "get_container"]
