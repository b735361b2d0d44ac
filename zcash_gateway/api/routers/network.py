"""Address validation, network, mining and fee endpoints."""
from typing import Any

from fastapi import APIRouter, Depends, Query

from zcash_gateway.api.deps import get_node_service
from zcash_gateway.modules.node import NodeService
from zcash_gateway.schemas import SuccessResponse

router = APIRouter()


@router.get("/address/validate/{address}", response_model=SuccessResponse[Any], summary="Validate an address")
async def validate_address(address: str, node: NodeService = Depends(get_node_service)):
    return SuccessResponse(data=await node.validate_address(address))


@router.get("/network/info", response_model=SuccessResponse[Any], summary="P2P network state")
async def network_info(node: NodeService = Depends(get_node_service)):
    return SuccessResponse(data=await node.get_network_info())


@router.get("/network/connections", response_model=SuccessResponse[dict[str, int]], summary="Peer count")
async def connection_count(node: NodeService = Depends(get_node_service)):
    return SuccessResponse(data={"connections": await node.get_connection_count()})


@router.get("/mining/info", response_model=SuccessResponse[Any], summary="Mining state")
async def mining_info(node: NodeService = Depends(get_node_service)):
    return SuccessResponse(data=await node.get_mining_info())


@router.get("/fee/estimate", response_model=SuccessResponse[dict[str, Any]], summary="Fee estimate")
async def estimate_fee(
    nblocks: int = Query(6, ge=1),
    node: NodeService = Depends(get_node_service),
):
    fee = await node.estimate_fee(nblocks)
    return SuccessResponse(data={"fee": fee, "nblocks": nblocks})
