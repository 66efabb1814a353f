"""
Models.

Wire types for the gateway API and the authorization service.
"""

from gateway.models.api import (
    Accesskey,
    AccesskeyRequest,
    BuyParams,
    Status,
    Withdrawal,
    WithdrawalRequest,
    WithdrawalState,
    WithdrawalStateData,
)


__all__ = [
    "Accesskey",
    "AccesskeyRequest",
    "BuyParams",
    "Status",
    "Withdrawal",
    "WithdrawalRequest",
    "WithdrawalState",
    "WithdrawalStateData",
]
