"""
Authorization service client.

Sends access key issuance and withdrawal verification requests to the
external authorization service. Every call is single-shot: failures are
raised as AuthServiceError subclasses and never retried.
"""

import aiohttp
from loguru import logger
from pydantic import BaseModel, ValidationError
from pydantic_core import PydanticSerializationError

from gateway.config.constants import ISSUE_ACCESSKEYS_PATH, VERIFY_WITHDRAWAL_PATH
from gateway.config.settings import Settings
from gateway.models.api import Accesskey, AccesskeyRequest, WithdrawalRequest
from gateway.utils.exceptions import (
    AuthRequestError,
    AuthResponseError,
    AuthSerializationError,
)


JSON_HEADERS = {"Content-Type": "application/json"}


def _describe(exc: BaseException) -> str:
    """Exception text, falling back to the type name for empty messages."""
    return str(exc) or type(exc).__name__


class AuthClient:
    """HTTP client for the authorization service."""

    def __init__(self, settings: Settings) -> None:
        """
        Initialize authorization client.

        Args:
            settings: Gateway settings (auth endpoint and timeout)
        """
        self.settings = settings
        self._timeout = aiohttp.ClientTimeout(total=settings.auth_timeout_seconds)
        self._session: aiohttp.ClientSession | None = None

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        if self._session is not None and not self._session.closed:
            await self._session.close()
        self._session = None

    async def _post(self, path: str, payload: BaseModel) -> tuple[int, bytes]:
        """
        POST a JSON payload to the authorization service.

        Args:
            path: Fixed endpoint path
            payload: Model serialized as the request body

        Returns:
            Tuple of (HTTP status, raw response body)

        Raises:
            AuthSerializationError: If payload cannot be serialized
            AuthRequestError: On transport failure
        """
        try:
            body = payload.model_dump_json()
        except PydanticSerializationError as e:
            raise AuthSerializationError(_describe(e)) from e

        url = self.settings.auth_url(path)
        try:
            session = await self._get_session()
            async with session.post(url, data=body, headers=JSON_HEADERS) as response:
                raw = await response.read()
                logger.debug(f"Auth POST {path} -> HTTP {response.status}")
                return response.status, raw
        except (aiohttp.ClientError, TimeoutError) as e:
            logger.warning(f"Auth POST {path} failed: {_describe(e)}")
            raise AuthRequestError(_describe(e)) from e

    async def issue_accesskey(self, request: AccesskeyRequest) -> Accesskey:
        """
        Ask the authorization service to issue an access key.

        Args:
            request: Access key request

        Returns:
            Issued access key

        Raises:
            AuthSerializationError: If the request cannot be serialized
            AuthRequestError: On transport failure or non-success status
            AuthResponseError: If the response body is not an access key
        """
        status, raw = await self._post(ISSUE_ACCESSKEYS_PATH, request)
        text = raw.decode("utf-8", errors="replace")

        if not 200 <= status < 300:
            raise AuthRequestError(
                f"authorization service returned HTTP {status}: {text}"
            )

        try:
            return Accesskey.model_validate_json(raw)
        except ValidationError as e:
            raise AuthResponseError(
                f"could not deserialize auth-provided accesskey body ({text}): {e}",
                body=text,
            ) from e

    async def verify_withdrawal(self, request: WithdrawalRequest) -> None:
        """
        Ask the authorization service to verify a withdrawal request.

        Only the response status is inspected; the body is discarded.

        Args:
            request: Withdrawal request to verify

        Raises:
            AuthSerializationError: If the request cannot be serialized
            AuthRequestError: On transport failure or non-success status
        """
        status, _ = await self._post(VERIFY_WITHDRAWAL_PATH, request)

        if not 200 <= status < 300:
            raise AuthRequestError(
                f"authorization service rejected withdrawal request with HTTP {status}"
            )
