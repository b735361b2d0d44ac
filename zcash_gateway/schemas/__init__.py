"""Pydantic schemas used by the REST routes."""
from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from zcash_gateway.modules.operations import PrivacyPolicy, Recipient, SendRequest
from zcash_gateway.modules.operations.poller import DEFAULT_MAX_ATTEMPTS, DEFAULT_POLL_INTERVAL_MS

T = TypeVar("T")


class CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class SuccessResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T


class ErrorResponse(BaseModel):
    success: bool = False
    error: str


class HealthResponse(BaseModel):
    success: bool = True
    message: str
    timestamp: str


class RecipientPayload(CamelModel):
    address: Optional[str] = None
    amount: Optional[float] = Field(default=None, allow_inf_nan=False)
    memo: Optional[str] = None


class SendManyRequest(CamelModel):
    from_address: Optional[str] = Field(default=None, alias="fromAddress")
    recipients: Optional[list[RecipientPayload]] = None
    minconf: Optional[int] = None
    fee: Optional[float] = Field(default=None, allow_inf_nan=False)
    privacy_policy: Optional[PrivacyPolicy] = Field(default=None, alias="privacyPolicy")

    def to_domain(self) -> SendRequest:
        return SendRequest(
            from_address=self.from_address or "",
            recipients=[
                Recipient(address=r.address, amount=r.amount, memo=r.memo)
                for r in self.recipients or []
            ],
            minconf=self.minconf,
            fee=self.fee,
            privacy_policy=self.privacy_policy,
        )


class OperationIdResponse(CamelModel):
    operation_id: str = Field(alias="operationId")


class OperationIdsRequest(CamelModel):
    operation_ids: Optional[list[str]] = Field(default=None, alias="operationIds")


class AwaitOperationRequest(CamelModel):
    poll_interval_ms: Optional[int] = Field(
        default=None, ge=0, le=DEFAULT_POLL_INTERVAL_MS, alias="pollIntervalMs"
    )
    max_attempts: Optional[int] = Field(default=None, ge=1, le=DEFAULT_MAX_ATTEMPTS, alias="maxAttempts")


class BalanceForAccountRequest(CamelModel):
    account: Optional[int] = None
    minconf: Optional[int] = None
    as_of_height: Optional[int] = Field(default=None, alias="asOfHeight")


class AddressForAccountRequest(CamelModel):
    account: Optional[int] = None
    diversifier_index: Optional[int] = Field(default=None, alias="diversifierIndex")


class SendToAddressRequest(CamelModel):
    address: Optional[str] = None
    amount: Optional[float] = Field(default=None, allow_inf_nan=False)
    comment: str = ""


class AccountAddressResponse(CamelModel):
    account: int
    address: Optional[str] = None
    receiver_types: Optional[list[str]] = Field(default=None, alias="receiverTypes")


__all__ = [
    "AccountAddressResponse",
    "AddressForAccountRequest",
    "AwaitOperationRequest",
    "BalanceForAccountRequest",
    "ErrorResponse",
    "HealthResponse",
    "OperationIdResponse",
    "OperationIdsRequest",
    "RecipientPayload",
    "SendManyRequest",
    "SendToAddressRequest",
    "SuccessResponse",
]
