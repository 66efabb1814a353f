"""
Services.

Business logic layer.
"""

from gateway.services.accesskey_service import AccesskeyService
from gateway.services.auth_client import AuthClient
from gateway.services.base_service import (
    BaseService,
    ServiceResult,
    log_operation,
)
from gateway.services.withdrawal import (
    WithdrawalProcessor,
    WithdrawalStatusService,
)


__all__ = [
    "AccesskeyService",
    "AuthClient",
    "BaseService",
    "ServiceResult",
    "log_operation",
    "WithdrawalProcessor",
    "WithdrawalStatusService",
]
