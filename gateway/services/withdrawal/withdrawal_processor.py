"""
Withdrawal processing module.

Verifies withdrawal requests with the authorization service, decides
the resulting state and builds the withdrawal record.
"""

import asyncio

from gateway.config.constants import (
    DEFAULT_PROCESSING_DELAY_SECONDS,
    STATUS_BAD_REQUEST,
    STATUS_INTERNAL_ERROR,
    WITHDRAWAL_ID_BYTES,
    WITHDRAWAL_RECEIPT_PLACEHOLDER,
)
from gateway.models.api import (
    Withdrawal,
    WithdrawalRequest,
    WithdrawalState,
    WithdrawalStateData,
)
from gateway.services.auth_client import AuthClient
from gateway.services.base_service import BaseService, ServiceResult, log_operation
from gateway.services.withdrawal.conformance_hooks import (
    WANT_ERROR_MESSAGE,
    DestinationOutcome,
    outcome_for,
)
from gateway.utils.datetime_utils import unix_time
from gateway.utils.exceptions import AuthSerializationError, AuthServiceError
from gateway.utils.nonce import make_nonce
from gateway.utils.security import mask_destination


class WithdrawalProcessor(BaseService):
    """Processes withdrawal requests.

    Holds no per-withdrawal state: every call builds and returns a new
    record, so concurrent calls never interact.
    """

    def __init__(
        self,
        auth_client: AuthClient,
        processing_delay: float = DEFAULT_PROCESSING_DELAY_SECONDS,
    ) -> None:
        """
        Initialize withdrawal processor.

        Args:
            auth_client: Authorization service client
            processing_delay: Simulated work time in seconds for
                withdrawals that complete
        """
        super().__init__()
        self.auth_client = auth_client
        self.processing_delay = processing_delay

    @log_operation
    async def process(self, request: WithdrawalRequest) -> ServiceResult[Withdrawal]:
        """
        Process a withdrawal request.

        Args:
            request: Withdrawal request

        Returns:
            ServiceResult with the Withdrawal, or a status envelope:
            500 if verification failed, 400 if an error was requested
        """
        destination = mask_destination(request.destination)

        # 1. Verify with authorization service
        try:
            await self.auth_client.verify_withdrawal(request)
        except AuthSerializationError as e:
            return ServiceResult.failure(STATUS_INTERNAL_ERROR, str(e))
        except AuthServiceError as e:
            self.logger.warning(f"Withdrawal verification failed for {destination}: {e}")
            return ServiceResult.failure(
                STATUS_INTERNAL_ERROR,
                f"could not perform auth request to verify withdrawal: {e}",
            )

        # 2. Decide state
        outcome = outcome_for(request.destination)
        if outcome is DestinationOutcome.ERROR:
            self.logger.info("Withdrawal failed on request")
            return ServiceResult.failure(STATUS_BAD_REQUEST, WANT_ERROR_MESSAGE)

        if outcome is DestinationOutcome.PENDING:
            state = WithdrawalState.PENDING
        else:
            # Simulated work
            await asyncio.sleep(self.processing_delay)
            state = WithdrawalState.COMPLETE

        # 3. Build record
        withdrawal = Withdrawal(
            id=make_nonce(WITHDRAWAL_ID_BYTES),
            state_data=WithdrawalStateData(state=state, state_changed=unix_time()),
            withdrawal_request=request,
            receipt=WITHDRAWAL_RECEIPT_PLACEHOLDER,
        )

        self.logger.info(
            f"Withdrawal processed: id={withdrawal.id[:8]}, "
            f"destination={destination}, amount={request.amount}, state={state}"
        )
        return ServiceResult.ok(withdrawal)
