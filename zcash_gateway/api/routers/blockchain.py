"""Blockchain information endpoints."""
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Query, status

from zcash_gateway.api.deps import get_node_service
from zcash_gateway.modules.node import NodeService
from zcash_gateway.schemas import SuccessResponse

router = APIRouter()


@router.get("/info", response_model=SuccessResponse[Any], summary="Blockchain state")
async def blockchain_info(node: NodeService = Depends(get_node_service)):
    return SuccessResponse(data=await node.get_blockchain_info())


@router.get("/blockcount", response_model=SuccessResponse[dict[str, int]], summary="Current block height")
async def block_count(node: NodeService = Depends(get_node_service)):
    return SuccessResponse(data={"blockCount": await node.get_block_count()})


@router.get("/blockhash/{height}", response_model=SuccessResponse[dict[str, Any]], summary="Block hash at height")
async def block_hash(height: str, node: NodeService = Depends(get_node_service)):
    try:
        parsed = int(height)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Valid block height is required") from exc
    blockhash = await node.get_block_hash(parsed)
    return SuccessResponse(data={"height": parsed, "blockhash": blockhash})


@router.get("/block/{blockhash}", response_model=SuccessResponse[Any], summary="Block by hash")
async def block(
    blockhash: str,
    verbosity: int = Query(1, ge=0, le=2),
    node: NodeService = Depends(get_node_service),
):
    return SuccessResponse(data=await node.get_block(blockhash, verbosity))
