"""
Withdrawal status module.

Answers point-in-time state queries for withdrawal identifiers.
"""

from gateway.models.api import WithdrawalState, WithdrawalStateData
from gateway.services.base_service import BaseService
from gateway.utils.datetime_utils import unix_time


class WithdrawalStatusService(BaseService):
    """Reports withdrawal state.

    No withdrawal records are kept, so every identifier is reported as
    Complete as of now. Real tracking would need a store owned by
    WithdrawalProcessor.
    """

    def get_status(self, withdrawal_id: str) -> WithdrawalStateData:
        """
        Get current state of a withdrawal.

        Args:
            withdrawal_id: Withdrawal identifier (not looked up)

        Returns:
            WithdrawalStateData, always Complete as of now
        """
        self.logger.debug(f"Status query for {withdrawal_id[:8]}")
        return WithdrawalStateData(
            state=WithdrawalState.COMPLETE,
            state_changed=unix_time(),
        )
