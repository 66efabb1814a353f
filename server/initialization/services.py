"""
Server Initialization - Services Module.

Module: services.py
Builds the gateway services from settings and attaches them to the
application.
"""

from aiohttp import web
from loguru import logger

from gateway.config.settings import Settings
from gateway.services.accesskey_service import AccesskeyService
from gateway.services.auth_client import AuthClient
from gateway.services.withdrawal import WithdrawalProcessor, WithdrawalStatusService
from server.keys import (
    ACCESSKEY_SERVICE_KEY,
    AUTH_CLIENT_KEY,
    WITHDRAWAL_PROCESSOR_KEY,
    WITHDRAWAL_STATUS_SERVICE_KEY,
)


def initialize_all_services(
    app: web.Application,
    settings: Settings,
    auth_client: AuthClient | None = None,
) -> None:
    """
    Create all services and store them on the application.

    Args:
        app: aiohttp application
        settings: Gateway settings
        auth_client: Prebuilt client, mainly for tests
    """
    if auth_client is None:
        auth_client = AuthClient(settings)

    app[AUTH_CLIENT_KEY] = auth_client
    app[ACCESSKEY_SERVICE_KEY] = AccesskeyService(auth_client)
    app[WITHDRAWAL_PROCESSOR_KEY] = WithdrawalProcessor(
        auth_client,
        processing_delay=settings.processing_delay_seconds,
    )
    app[WITHDRAWAL_STATUS_SERVICE_KEY] = WithdrawalStatusService()

    logger.info(f"Services initialized (auth endpoint: {settings.auth_endpoint})")
