"""Reusable FastAPI dependencies."""

from fastapi import Depends

from zcash_gateway.core.container import ApplicationContainer, get_container
from zcash_gateway.modules.balances import BalanceAggregator
from zcash_gateway.modules.node import NodeService
from zcash_gateway.modules.operations import OperationService


def get_operation_service(container: ApplicationContainer = Depends(get_container)) -> OperationService:
    return container.operations


def get_balance_aggregator(container: ApplicationContainer = Depends(get_container)) -> BalanceAggregator:
    return container.balances


def get_node_service(container: ApplicationContainer = Depends(get_container)) -> NodeService:
    return container.node


__all__ = [
    "get_balance_aggregator",
    "get_node_service",
    "get_operation_service",
]
