"""Shielded send operations: submission, polling and result lookup."""

from .models import (
    Operation,
    OperationErrorInfo,
    OperationResult,
    OperationStatus,
    PrivacyPolicy,
    Recipient,
    SendRequest,
)
from .poller import OperationPoller
from .service import OperationService
from .submitter import OperationSubmitter, build_send_many_params

__all__ = [
    "Operation",
    "OperationErrorInfo",
    "OperationPoller",
    "OperationResult",
    "OperationService",
    "OperationStatus",
    "OperationSubmitter",
    "PrivacyPolicy",
    "Recipient",
    "SendRequest",
    "build_send_many_params",
]
