"""
Server initialization.

Builds the aiohttp application: middlewares, services, routes and
shutdown hooks.
"""

from aiohttp import web

from gateway.config.settings import Settings
from gateway.services.auth_client import AuthClient
from server.initialization.handlers import register_all_handlers
from server.initialization.services import initialize_all_services
from server.initialization.shutdown import shutdown_handler
from server.middlewares import error_middleware


def create_app(settings: Settings, auth_client: AuthClient | None = None) -> web.Application:
    """
    Create the gateway application.

    Args:
        settings: Gateway settings
        auth_client: Prebuilt authorization client, mainly for tests

    Returns:
        Configured aiohttp application
    """
    app = web.Application(middlewares=[error_middleware])
    initialize_all_services(app, settings, auth_client)
    register_all_handlers(app)
    app.on_cleanup.append(shutdown_handler)
    return app


__all__ = ["create_app"]
