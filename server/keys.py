"""
Application keys.

Typed keys under which the services are stored on the aiohttp
application.
"""

from aiohttp import web

from gateway.services.accesskey_service import AccesskeyService
from gateway.services.auth_client import AuthClient
from gateway.services.withdrawal import WithdrawalProcessor, WithdrawalStatusService


AUTH_CLIENT_KEY = web.AppKey("auth_client", AuthClient)
ACCESSKEY_SERVICE_KEY = web.AppKey("accesskey_service", AccesskeyService)
WITHDRAWAL_PROCESSOR_KEY = web.AppKey("withdrawal_processor", WithdrawalProcessor)
WITHDRAWAL_STATUS_SERVICE_KEY = web.AppKey(
    "withdrawal_status_service", WithdrawalStatusService
)
