"""Shared building blocks for gateway modules."""

from .exceptions import (
    GatewayError,
    NetworkError,
    NotFoundError,
    OperationFailedError,
    OperationTimeoutError,
    PollError,
    RPCError,
    ValidationError,
)
from .rpc import RpcChannel

__all__ = [
    "GatewayError",
    "NetworkError",
    "NotFoundError",
    "OperationFailedError",
    "OperationTimeoutError",
    "PollError",
    "RPCError",
    "RpcChannel",
    "ValidationError",
]
