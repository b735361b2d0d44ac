"""Account balance lookups across value pools."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from zcash_gateway.modules.common.exceptions import RPCError, ValidationError
from zcash_gateway.modules.common.rpc import RpcChannel

from .models import AccountBalance, Pool

logger = logging.getLogger(__name__)

BALANCE_METHOD = "z_getbalanceforaccount"


@dataclass(slots=True)
class BalanceAggregator:
    rpc: RpcChannel

    async def get_total(
        self,
        account: Optional[int],
        minconf: Optional[int] = None,
        as_of_height: Optional[int] = None,
    ) -> AccountBalance:
        if account is None:
            raise ValidationError("Account number is required")

        params: list[Any] = [account]
        if minconf is not None:
            params.append(minconf)
        if as_of_height is not None:
            params.append(as_of_height)

        response = await self.rpc.call(BALANCE_METHOD, params)
        balance = self._to_balance(response, minconf)
        logger.info(
            "Balance for account %s: %s (minconf %d)",
            account,
            {pool.value: value for pool, value in balance.pools.items()},
            balance.minimum_confirmations,
        )
        return balance

    @staticmethod
    def _to_balance(response: Any, minconf: Optional[int]) -> AccountBalance:
        if not isinstance(response, dict):
            raise RPCError(f"Malformed {BALANCE_METHOD} response")

        raw_pools = response.get("pools") or {}
        if not isinstance(raw_pools, dict):
            raise RPCError(f"Malformed {BALANCE_METHOD} pools: {raw_pools!r}")

        pools: dict[Pool, int] = {}
        for name, entry in raw_pools.items():
            try:
                pool = Pool(name)
            except ValueError:
                logger.debug("Ignoring unknown pool %s", name)
                continue
            value = entry.get("valueZat") if isinstance(entry, dict) else None
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise RPCError(f"Malformed {BALANCE_METHOD} value for pool {name}: {value!r}")
            if value:
                pools[pool] = value

        minimum_confirmations = response.get("minimum_confirmations")
        if minimum_confirmations is None:
            minimum_confirmations = minconf if minconf is not None else 1
        return AccountBalance(minimum_confirmations=minimum_confirmations, pools=pools)


__all__ = ["BalanceAggregator", "BALANCE_METHOD"]
