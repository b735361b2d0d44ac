"""Submission of multi-recipient sends through ``z_sendmany``."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any

from zcash_gateway.modules.common.exceptions import ValidationError
from zcash_gateway.modules.common.rpc import RpcChannel

from .models import SendRequest

logger = logging.getLogger(__name__)

SEND_MANY_METHOD = "z_sendmany"

# Placeholders for skipped optional slots of z_sendmany(from, amounts, minconf, fee, privacyPolicy).
DEFAULT_MINCONF_PLACEHOLDER = 10
DEFAULT_FEE_PLACEHOLDER = None


def validate_send_request(request: SendRequest) -> None:
    if not request.from_address or not request.recipients:
        raise ValidationError("fromAddress and recipients array are required")
    for recipient in request.recipients:
        if not recipient.address or recipient.amount is None:
            raise ValidationError("Each recipient must have address and amount")
        if not math.isfinite(recipient.amount):
            raise ValidationError("Recipient amount must be a finite number")
        if recipient.amount < 0:
            raise ValidationError("Recipient amount must not be negative")


def build_send_many_params(request: SendRequest) -> list[Any]:
    """Lay out the positional parameter list for ``z_sendmany``.

    The node takes its optional arguments positionally, so an optional slot
    may only be left off when every slot after it is absent too. Skipped
    slots before a supplied one are filled with the placeholders above.
    """
    optional = [
        (request.minconf, DEFAULT_MINCONF_PLACEHOLDER),
        (request.fee, DEFAULT_FEE_PLACEHOLDER),
        (
            request.privacy_policy.value if request.privacy_policy is not None else None,
            None,
        ),
    ]
    last_supplied = max(
        (index for index, (value, _) in enumerate(optional) if value is not None),
        default=-1,
    )

    params: list[Any] = [request.from_address, [r.to_param() for r in request.recipients]]
    for value, placeholder in optional[: last_supplied + 1]:
        params.append(value if value is not None else placeholder)
    return params


@dataclass(slots=True)
class OperationSubmitter:
    rpc: RpcChannel

    async def submit(self, request: SendRequest) -> str:
        validate_send_request(request)
        params = build_send_many_params(request)
        operation_id = await self.rpc.call(SEND_MANY_METHOD, params)
        logger.info(
            "Submitted z_sendmany from %s to %d recipient(s): %s",
            request.from_address,
            len(request.recipients),
            operation_id,
        )
        return operation_id


__all__ = [
    "OperationSubmitter",
    "build_send_many_params",
    "validate_send_request",
]
