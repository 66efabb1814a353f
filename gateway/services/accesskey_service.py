"""
Access key service.

Buys access keys from the authorization service on behalf of callers.
"""

from pydantic import ValidationError

from gateway.config.constants import (
    ACCESSKEY_DURATION_SECONDS,
    ACCESSKEY_POF_TYPE,
    STATUS_INTERNAL_ERROR,
)
from gateway.models.api import Accesskey, AccesskeyRequest
from gateway.services.auth_client import AuthClient
from gateway.services.base_service import BaseService, ServiceResult, log_operation
from gateway.utils.exceptions import (
    AuthRequestError,
    AuthResponseError,
    AuthSerializationError,
)
from gateway.utils.security import mask_sensitive


class AccesskeyService(BaseService):
    """Issues access keys through the authorization service."""

    def __init__(self, auth_client: AuthClient) -> None:
        """
        Initialize access key service.

        Args:
            auth_client: Authorization service client
        """
        super().__init__()
        self.auth_client = auth_client

    @log_operation
    async def buy(self, quantity: int) -> ServiceResult[Accesskey]:
        """
        Buy an access key for ``quantity`` operations.

        The quantity is passed to the authorization service unchanged,
        zero included.

        Args:
            quantity: Number of operations the key should permit

        Returns:
            ServiceResult with the issued Accesskey, or a 500 status
        """
        try:
            request = AccesskeyRequest(
                quantity=quantity,
                pof_type=ACCESSKEY_POF_TYPE,
                duration=ACCESSKEY_DURATION_SECONDS,
            )
        except ValidationError as e:
            return ServiceResult.failure(STATUS_INTERNAL_ERROR, str(e))

        try:
            accesskey = await self.auth_client.issue_accesskey(request)
        except AuthSerializationError as e:
            return ServiceResult.failure(STATUS_INTERNAL_ERROR, str(e))
        except AuthRequestError as e:
            self.logger.warning(f"Access key request failed: {e}")
            return ServiceResult.failure(
                STATUS_INTERNAL_ERROR,
                f"could not perform auth request to issue accesskeys: {e}",
            )
        except AuthResponseError as e:
            self.logger.warning(f"Access key response unusable: {e}")
            return ServiceResult.failure(STATUS_INTERNAL_ERROR, str(e))

        key_text = getattr(accesskey, "key", None)
        self.logger.info(
            f"Access key issued: quantity={quantity}, "
            f"key={mask_sensitive(key_text if isinstance(key_text, str) else None)}"
        )
        return ServiceResult.ok(accesskey)
