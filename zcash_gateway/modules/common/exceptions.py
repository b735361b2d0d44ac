"""Gateway error taxonomy shared by all modules."""

from __future__ import annotations

from typing import Optional


class GatewayError(Exception):
    """Base class for errors surfaced by gateway services."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(GatewayError):
    """Raised for malformed caller input, before any network call is made."""


class RPCError(GatewayError):
    """Raised when the node answers with a structured error."""

    def __init__(self, message: str, code: Optional[int] = None) -> None:
        super().__init__(message)
        self.code = code

    def __str__(self) -> str:
        if self.code is None:
            return self.message
        return f"{self.message} (Code: {self.code})"


class NetworkError(GatewayError):
    """Raised when the node cannot be reached at the transport level."""


class PollError(GatewayError):
    """Raised when an operation status query itself fails."""


class NotFoundError(GatewayError):
    """Raised when a polled operation id is absent from the status response."""

    def __init__(self, operation_id: str) -> None:
        super().__init__(f"Operation not found: {operation_id}")
        self.operation_id = operation_id


class OperationFailedError(GatewayError):
    """Raised when the node reports a terminal failure for an operation."""

    def __init__(self, operation_id: str, message: str, code: Optional[int] = None) -> None:
        super().__init__(message)
        self.operation_id = operation_id
        self.code = code


class OperationTimeoutError(GatewayError, TimeoutError):
    """Raised when polling exhausts its attempts without a terminal status."""

    def __init__(self, operation_id: str, attempts: int) -> None:
        super().__init__(f"Operation {operation_id} did not complete after {attempts} attempts")
        self.operation_id = operation_id
        self.attempts = attempts


__all__ = [
    "GatewayError",
    "ValidationError",
    "RPCError",
    "NetworkError",
    "PollError",
    "NotFoundError",
    "OperationFailedError",
    "OperationTimeoutError",
]
