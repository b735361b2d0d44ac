"""Domain models for asynchronous shielded send operations."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Optional


class PrivacyPolicy(str, Enum):
    FULL_PRIVACY = "FullPrivacy"
    LEGACY_COMPAT = "LegacyCompat"
    ALLOW_REVEALED_AMOUNTS = "AllowRevealedAmounts"
    ALLOW_REVEALED_RECIPIENTS = "AllowRevealedRecipients"
    ALLOW_REVEALED_SENDERS = "AllowRevealedSenders"
    ALLOW_FULLY_TRANSPARENT = "AllowFullyTransparent"
    ALLOW_LINKING_ACCOUNT_ADDRESSES = "AllowLinkingAccountAddresses"
    NO_PRIVACY = "NoPrivacy"


class OperationStatus(str, Enum):
    QUEUED = "queued"
    EXECUTING = "executing"
    SUCCESS = "success"
    FAILED = "failed"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in {OperationStatus.SUCCESS, OperationStatus.FAILED, OperationStatus.CANCELLED}


@dataclass(slots=True)
class Recipient:
    address: Optional[str]
    amount: Optional[float]
    memo: Optional[str] = None

    def to_param(self) -> dict[str, Any]:
        param: dict[str, Any] = {"address": self.address, "amount": self.amount}
        if self.memo is not None:
            param["memo"] = self.memo
        return param


@dataclass(slots=True)
class SendRequest:
    from_address: str
    recipients: list[Recipient] = field(default_factory=list)
    minconf: Optional[int] = None
    fee: Optional[float] = None
    privacy_policy: Optional[PrivacyPolicy] = None


@dataclass(slots=True)
class OperationResult:
    txid: str


@dataclass(slots=True)
class OperationErrorInfo:
    code: Optional[int]
    message: str


@dataclass(slots=True)
class Operation:
    id: str
    status: OperationStatus
    creation_time: Optional[datetime] = None
    method: Optional[str] = None
    params: Any = None
    result: Optional[OperationResult] = None
    error: Optional[OperationErrorInfo] = None

    @property
    def txid(self) -> Optional[str]:
        return self.result.txid if self.result else None

    @classmethod
    def from_rpc(cls, entry: dict[str, Any]) -> "Operation":
        """Build an operation from one entry of ``z_getoperationstatus``.

        Raises ``KeyError``/``ValueError``/``TypeError`` on malformed entries;
        callers decide how to surface those.
        """
        status = OperationStatus(entry["status"])
        created = entry.get("creation_time")
        result = entry.get("result")
        error = entry.get("error")
        return cls(
            id=str(entry["id"]),
            status=status,
            creation_time=datetime.fromtimestamp(created, tz=timezone.utc) if created is not None else None,
            method=entry.get("method"),
            params=entry.get("params"),
            result=OperationResult(txid=result["txid"]) if isinstance(result, dict) and "txid" in result else None,
            error=(
                OperationErrorInfo(code=error.get("code"), message=error.get("message", ""))
                if isinstance(error, dict)
                else None
            ),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "status": self.status.value,
            "creation_time": int(self.creation_time.timestamp()) if self.creation_time else None,
            "method": self.method,
            "params": self.params,
        }
        if self.result is not None:
            data["result"] = {"txid": self.result.txid}
        if self.error is not None:
            data["error"] = {"code": self.error.code, "message": self.error.message}
        return data
