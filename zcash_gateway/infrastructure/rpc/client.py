"""Async JSON-RPC client for the Zcash node."""

from __future__ import annotations

import logging
from typing import Any, Optional, Sequence

import httpx

from zcash_gateway.core.config import RpcSettings
from zcash_gateway.modules.common.exceptions import NetworkError, RPCError

logger = logging.getLogger(__name__)

REQUEST_ID = "zcash-gateway"


class HttpRpcChannel:
    """JSON-RPC 1.0 channel over HTTP POST with basic authentication."""

    def __init__(
        self,
        url: str,
        username: str = "",
        password: str = "",
        timeout: float = 30.0,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.url = url
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            auth=(username, password) if username else None,
            headers={"Content-Type": "text/plain"},
            timeout=timeout,
        )

    @classmethod
    def from_settings(cls, settings: RpcSettings) -> "HttpRpcChannel":
        return cls(
            settings.url,
            username=settings.username,
            password=settings.password,
            timeout=settings.timeout,
        )

    async def call(self, method: str, params: Sequence[Any] = ()) -> Any:
        payload = {
            "jsonrpc": "1.0",
            "id": REQUEST_ID,
            "method": method,
            "params": list(params),
        }
        try:
            response = await self._client.post(self.url, json=payload)
        except httpx.TimeoutException as exc:
            logger.error("RPC call %s timed out: %s", method, exc)
            raise NetworkError(f"Network Error: request to node timed out ({method})") from exc
        except httpx.HTTPError as exc:
            logger.error("RPC call %s failed: %s", method, exc)
            raise NetworkError(f"Network Error: {exc}") from exc

        # zcashd answers RPC errors with a non-2xx status and a JSON error body
        try:
            data = response.json()
        except ValueError as exc:
            if response.is_error:
                raise RPCError(
                    f"ZCash RPC Error: HTTP {response.status_code} {response.reason_phrase}"
                ) from exc
            raise RPCError(f"Malformed RPC response for {method}") from exc

        if not isinstance(data, dict):
            raise RPCError(f"Malformed RPC response for {method}")

        error = data.get("error")
        if error:
            code = error.get("code") if isinstance(error, dict) else None
            message = error.get("message", str(error)) if isinstance(error, dict) else str(error)
            logger.warning("RPC %s returned error %s: %s", method, code, message)
            raise RPCError(f"RPC Error: {message}", code=code)

        if response.is_error:
            raise RPCError(f"ZCash RPC Error: HTTP {response.status_code} {response.reason_phrase}")

        return data.get("result")

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()


__all__ = ["HttpRpcChannel"]
