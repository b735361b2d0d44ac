"""Wallet endpoints: balances, accounts and addresses."""
import logging
from typing import Any

from fastapi import APIRouter, Depends, Query

from zcash_gateway.api.deps import get_balance_aggregator, get_node_service
from zcash_gateway.modules.balances import BalanceAggregator
from zcash_gateway.modules.node import NodeService
from zcash_gateway.schemas import (
    AccountAddressResponse,
    AddressForAccountRequest,
    BalanceForAccountRequest,
    SuccessResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/info", response_model=SuccessResponse[Any], summary="Wallet state")
async def wallet_info(node: NodeService = Depends(get_node_service)):
    return SuccessResponse(data=await node.get_wallet_info())


@router.get("/balance", response_model=SuccessResponse[dict[str, Any]], summary="Transparent wallet balance")
async def wallet_balance(
    min_confirmations: int = Query(1, alias="minConfirmations", ge=0),
    node: NodeService = Depends(get_node_service),
):
    balance = await node.get_balance(min_confirmations)
    return SuccessResponse(data={"balance": balance, "minConfirmations": min_confirmations})


@router.post("/newaccount", response_model=SuccessResponse[AccountAddressResponse], summary="Create wallet account")
async def new_account(node: NodeService = Depends(get_node_service)):
    created = await node.create_account()
    return SuccessResponse(data=AccountAddressResponse.model_validate(created))


@router.post(
    "/getaddressforaccount",
    response_model=SuccessResponse[AccountAddressResponse],
    summary="Unified address for an account",
)
async def address_for_account(
    payload: AddressForAccountRequest,
    node: NodeService = Depends(get_node_service),
):
    result = await node.get_address_for_account(payload.account, payload.diversifier_index)
    logger.info("Address for account %s: %s", payload.account, result.get("address"))
    return SuccessResponse(
        data=AccountAddressResponse(
            account=payload.account,
            address=result.get("address"),
            receiver_types=result.get("receiver_types"),
        )
    )


@router.post(
    "/getbalanceforaccount",
    response_model=SuccessResponse[dict[str, Any]],
    summary="Per-pool balance of an account",
)
async def balance_for_account(
    payload: BalanceForAccountRequest,
    balances: BalanceAggregator = Depends(get_balance_aggregator),
):
    balance = await balances.get_total(payload.account, payload.minconf, payload.as_of_height)
    return SuccessResponse(data=balance.to_dict())


@router.get("/unspent", response_model=SuccessResponse[Any], summary="Unspent transparent outputs")
async def unspent(
    min_confirmations: int = Query(1, alias="minConfirmations", ge=0),
    max_confirmations: int = Query(9999999, alias="maxConfirmations", ge=0),
    node: NodeService = Depends(get_node_service),
):
    return SuccessResponse(data=await node.list_unspent(min_confirmations, max_confirmations))


@router.get("/listaccounts", response_model=SuccessResponse[Any], summary="Wallet accounts")
async def list_accounts(node: NodeService = Depends(get_node_service)):
    return SuccessResponse(data=await node.list_accounts())


@router.get("/listaddresses", response_model=SuccessResponse[Any], summary="Wallet addresses")
async def list_addresses(node: NodeService = Depends(get_node_service)):
    return SuccessResponse(data=await node.list_addresses())
