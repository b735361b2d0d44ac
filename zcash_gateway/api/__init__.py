from fastapi import APIRouter, Depends

from zcash_gateway.api.routers import blockchain, network, transactions, wallet
from zcash_gateway.core.security import require_api_key
from zcash_gateway.schemas import ErrorResponse

ERROR_RESPONSES = {
    status_code: {"model": ErrorResponse}
    for status_code in (400, 401, 404, 422, 502, 503, 504)
}


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(
        prefix=prefix,
        dependencies=[Depends(require_api_key)],
        responses=ERROR_RESPONSES,
    )
    router.include_router(blockchain.router, prefix="/blockchain", tags=["blockchain"])
    router.include_router(wallet.router, prefix="/wallet", tags=["wallet"])
    router.include_router(transactions.router, tags=["transactions"])
    router.include_router(network.router, tags=["network"])
    return router


__all__ = [
    "create_api_router",
]
