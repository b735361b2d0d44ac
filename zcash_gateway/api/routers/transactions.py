"""Transaction endpoints, including asynchronous shielded sends."""
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query

from zcash_gateway.api.deps import get_node_service, get_operation_service
from zcash_gateway.modules.node import NodeService
from zcash_gateway.modules.operations import OperationService
from zcash_gateway.schemas import (
    AwaitOperationRequest,
    OperationIdResponse,
    OperationIdsRequest,
    SendManyRequest,
    SendToAddressRequest,
    SuccessResponse,
)

router = APIRouter()


@router.get("/transactions", response_model=SuccessResponse[Any], summary="Recent wallet transactions")
async def list_transactions(
    count: int = Query(10, ge=1),
    skip: int = Query(0, ge=0),
    node: NodeService = Depends(get_node_service),
):
    return SuccessResponse(data=await node.list_transactions(count, skip))


@router.post("/transaction/send", response_model=SuccessResponse[dict[str, str]], summary="Transparent send")
async def send_to_address(
    payload: SendToAddressRequest,
    node: NodeService = Depends(get_node_service),
):
    txid = await node.send_to_address(payload.address, payload.amount, payload.comment)
    return SuccessResponse(data={"txid": txid})


@router.post(
    "/transaction/z_sendmany",
    response_model=SuccessResponse[OperationIdResponse],
    summary="Submit a multi-recipient send",
)
async def z_sendmany(
    payload: SendManyRequest,
    operations: OperationService = Depends(get_operation_service),
):
    operation_id = await operations.submit(payload.to_domain())
    return SuccessResponse(data=OperationIdResponse(operation_id=operation_id))


@router.post(
    "/transaction/z_getoperationstatus",
    response_model=SuccessResponse[list[Any]],
    summary="Status of asynchronous operations",
)
async def z_getoperationstatus(
    payload: Optional[OperationIdsRequest] = Body(default=None),
    operations: OperationService = Depends(get_operation_service),
):
    operation_ids = payload.operation_ids if payload else None
    return SuccessResponse(data=await operations.get_status(operation_ids))


@router.post(
    "/transaction/z_getoperationresult",
    response_model=SuccessResponse[list[Any]],
    summary="Results of finished operations",
)
async def z_getoperationresult(
    payload: Optional[OperationIdsRequest] = Body(default=None),
    operations: OperationService = Depends(get_operation_service),
):
    operation_ids = payload.operation_ids if payload else None
    return SuccessResponse(data=await operations.get_result(operation_ids))


@router.post(
    "/transaction/operations/{operation_id}/wait",
    response_model=SuccessResponse[dict[str, Any]],
    summary="Wait for an operation to finish",
)
async def await_operation(
    operation_id: str,
    payload: Optional[AwaitOperationRequest] = Body(default=None),
    operations: OperationService = Depends(get_operation_service),
):
    payload = payload or AwaitOperationRequest()
    operation = await operations.await_completion(
        operation_id,
        poll_interval_ms=payload.poll_interval_ms,
        max_attempts=payload.max_attempts,
    )
    return SuccessResponse(data=operation.to_dict())


@router.get("/transaction/{txid}", response_model=SuccessResponse[Any], summary="Wallet transaction")
async def get_transaction(txid: str, node: NodeService = Depends(get_node_service)):
    return SuccessResponse(data=await node.get_transaction(txid))


@router.get("/transaction/{txid}/raw", response_model=SuccessResponse[Any], summary="Raw transaction")
async def get_raw_transaction(
    txid: str,
    verbose: bool = Query(False),
    node: NodeService = Depends(get_node_service),
):
    return SuccessResponse(data=await node.get_raw_transaction(txid, verbose))
