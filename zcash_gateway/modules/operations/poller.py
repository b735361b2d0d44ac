"""Polling of asynchronous operations until they reach a terminal state."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Optional, Sequence

from zcash_gateway.modules.common.exceptions import (
    GatewayError,
    NotFoundError,
    OperationFailedError,
    OperationTimeoutError,
    PollError,
)
from zcash_gateway.modules.common.rpc import RpcChannel

from .models import Operation, OperationStatus

logger = logging.getLogger(__name__)

STATUS_METHOD = "z_getoperationstatus"
RESULT_METHOD = "z_getoperationresult"

DEFAULT_POLL_INTERVAL_MS = 2000
DEFAULT_MAX_ATTEMPTS = 150


def _id_params(operation_ids: Optional[Sequence[str]]) -> list[Any]:
    return [list(operation_ids)] if operation_ids is not None else []


@dataclass(slots=True)
class OperationPoller:
    rpc: RpcChannel
    sleep: Callable[[float], Awaitable[Any]] = field(default=asyncio.sleep)

    async def get_status(self, operation_ids: Optional[Sequence[str]] = None) -> list[dict[str, Any]]:
        """Raw status entries; all known operations when ``operation_ids`` is None."""
        return await self.rpc.call(STATUS_METHOD, _id_params(operation_ids))

    async def get_result(self, operation_ids: Optional[Sequence[str]] = None) -> list[dict[str, Any]]:
        """Raw entries of finished operations; the node forgets them afterwards."""
        return await self.rpc.call(RESULT_METHOD, _id_params(operation_ids))

    async def await_completion(
        self,
        operation_id: str,
        poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> Operation:
        previous: Optional[OperationStatus] = None
        for attempt in range(1, max_attempts + 1):
            await self.sleep(poll_interval_ms / 1000)
            operation = await self._fetch(operation_id)

            if operation.status is not previous:
                logger.info(
                    "Operation %s is %s (attempt %d/%d)",
                    operation_id,
                    operation.status.value,
                    attempt,
                    max_attempts,
                )
                previous = operation.status

            if operation.status is OperationStatus.SUCCESS:
                return operation
            if operation.status is OperationStatus.FAILED:
                error = operation.error
                raise OperationFailedError(
                    operation_id,
                    error.message if error else "Operation failed",
                    code=error.code if error else None,
                )
            if operation.status is OperationStatus.CANCELLED:
                raise OperationFailedError(operation_id, "Operation was cancelled")

        logger.warning("Gave up waiting for operation %s after %d attempts", operation_id, max_attempts)
        raise OperationTimeoutError(operation_id, max_attempts)

    async def _fetch(self, operation_id: str) -> Operation:
        try:
            entries = await self.get_status([operation_id])
        except GatewayError as exc:
            raise PollError(f"Status query for {operation_id} failed: {exc}") from exc

        if not isinstance(entries, list):
            raise PollError(f"Malformed status response for {operation_id}")

        for entry in entries:
            if isinstance(entry, dict) and entry.get("id") == operation_id:
                try:
                    return Operation.from_rpc(entry)
                except (KeyError, TypeError, ValueError, OverflowError, OSError) as exc:
                    raise PollError(f"Malformed status entry for {operation_id}") from exc
        raise NotFoundError(operation_id)


__all__ = ["OperationPoller", "DEFAULT_MAX_ATTEMPTS", "DEFAULT_POLL_INTERVAL_MS"]
