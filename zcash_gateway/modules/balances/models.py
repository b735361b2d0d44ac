"""Domain models for per-pool account balances."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any

ZATOSHI_PER_ZEC = 100_000_000


class Pool(str, Enum):
    TRANSPARENT = "transparent"
    SAPLING = "sapling"
    ORCHARD = "orchard"


@dataclass(slots=True)
class AccountBalance:
    """Zatoshi value held per pool; a missing pool holds nothing."""

    minimum_confirmations: int
    pools: dict[Pool, int] = field(default_factory=dict)

    def value_of(self, pool: Pool) -> int:
        return self.pools.get(pool, 0)

    @property
    def total_zatoshi(self) -> int:
        return sum(self.pools.values())

    @property
    def total(self) -> Decimal:
        return Decimal(self.total_zatoshi) / ZATOSHI_PER_ZEC

    def to_dict(self) -> dict[str, Any]:
        return {
            "pools": {pool.value: {"valueZat": value} for pool, value in self.pools.items()},
            "minimum_confirmations": self.minimum_confirmations,
            "total": float(self.total),
        }
