"""Gateway modules and their public exports."""

from . import balances, common, node, operations

__all__ = [
    "balances",
    "common",
    "node",
    "operations",
]
