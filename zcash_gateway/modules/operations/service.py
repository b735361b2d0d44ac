"""Domain service tying submission and polling of send operations together."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from zcash_gateway.core.config import OperationSettings
from zcash_gateway.modules.common.rpc import RpcChannel

from .models import Operation, SendRequest
from .poller import OperationPoller
from .submitter import OperationSubmitter


@dataclass(slots=True)
class OperationService:
    submitter: OperationSubmitter
    poller: OperationPoller
    settings: OperationSettings

    @classmethod
    def with_channel(cls, rpc: RpcChannel, settings: Optional[OperationSettings] = None) -> "OperationService":
        return cls(OperationSubmitter(rpc), OperationPoller(rpc), settings or OperationSettings())

    async def submit(self, request: SendRequest) -> str:
        return await self.submitter.submit(request)

    async def await_completion(
        self,
        operation_id: str,
        poll_interval_ms: Optional[int] = None,
        max_attempts: Optional[int] = None,
    ) -> Operation:
        return await self.poller.await_completion(
            operation_id,
            poll_interval_ms=self.settings.poll_interval_ms if poll_interval_ms is None else poll_interval_ms,
            max_attempts=self.settings.max_attempts if max_attempts is None else max_attempts,
        )

    async def get_status(self, operation_ids: Optional[Sequence[str]] = None) -> list[dict[str, Any]]:
        return await self.poller.get_status(operation_ids)

    async def get_result(self, operation_ids: Optional[Sequence[str]] = None) -> list[dict[str, Any]]:
        return await self.poller.get_result(operation_ids)
