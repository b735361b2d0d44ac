import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from zcash_gateway import __version__
from zcash_gateway.api import create_api_router
from zcash_gateway.core.config import get_settings
from zcash_gateway.core.container import get_container
from zcash_gateway.core.logging import configure_logging
from zcash_gateway.modules.common import (
    GatewayError,
    NetworkError,
    NotFoundError,
    OperationFailedError,
    OperationTimeoutError,
    PollError,
    RPCError,
    ValidationError,
)
from zcash_gateway.schemas import HealthResponse

logger = logging.getLogger(__name__)

ERROR_STATUS = {
    ValidationError: status.HTTP_400_BAD_REQUEST,
    NotFoundError: status.HTTP_404_NOT_FOUND,
    OperationFailedError: 422,
    RPCError: status.HTTP_502_BAD_GATEWAY,
    PollError: status.HTTP_502_BAD_GATEWAY,
    NetworkError: status.HTTP_503_SERVICE_UNAVAILABLE,
    OperationTimeoutError: status.HTTP_504_GATEWAY_TIMEOUT,
}


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


async def gateway_error_handler(request: Request, exc: GatewayError) -> JSONResponse:
    status_code = next(
        (code for error_type, code in ERROR_STATUS.items() if isinstance(exc, error_type)),
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )
    if status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc)
    return _error_response(status_code, str(exc))


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return _error_response(exc.status_code, f"Route {request.method} {request.url.path} not found")
    return _error_response(exc.status_code, str(exc.detail))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    messages = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        messages.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return _error_response(status.HTTP_400_BAD_REQUEST, "; ".join(messages) or "Invalid request")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = get_settings()
    logger.info("Zcash gateway starting (%s), node at %s", settings.environment, settings.rpc_url)
    yield
    await get_container().shutdown()


def create_app() -> FastAPI:
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        description="HTTP gateway over a Zcash node's JSON-RPC interface",
        version=__version__,
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(GatewayError, gateway_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)

    app.include_router(create_api_router(settings.api_prefix))

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(
            message="ZCash API Server is running",
            timestamp=datetime.now(timezone.utc).isoformat(),
        )

    return app


app = create_app()


def run() -> None:
    settings = get_settings()
    uvicorn.run(
        "zcash_gateway.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
    )


if __name__ == "__main__":
    run()
