"""
Withdrawal services package.

This package provides withdrawal handling:
- withdrawal_processor: Verification, state decision and record creation
- withdrawal_status_service: State queries
- conformance_hooks: Destination values that force an outcome

All components are re-exported for easy importing.
"""

from gateway.services.withdrawal.conformance_hooks import (
    WANT_ERROR,
    WANT_ERROR_MESSAGE,
    WANT_PENDING,
    DestinationOutcome,
    outcome_for,
)
from gateway.services.withdrawal.withdrawal_processor import WithdrawalProcessor
from gateway.services.withdrawal.withdrawal_status_service import (
    WithdrawalStatusService,
)


__all__ = [
    "WANT_ERROR",
    "WANT_ERROR_MESSAGE",
    "WANT_PENDING",
    "DestinationOutcome",
    "outcome_for",
    "WithdrawalProcessor",
    "WithdrawalStatusService",
]
