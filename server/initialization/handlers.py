"""
Server Initialization - Handlers Module.

Module: handlers.py
Registers HTTP routes.
"""

from aiohttp import web

from server.handlers.accesskeys import buy_get_handler
from server.handlers.withdrawals import withdrawals_get_handler, withdrawals_post_handler


# Some clients send paths with a doubled leading slash; serve them the same.
ROUTE_PREFIXES = ("", "/")


def register_all_handlers(app: web.Application) -> None:
    """Register all routes on the application."""
    for prefix in ROUTE_PREFIXES:
        app.router.add_get(f"{prefix}/buy", buy_get_handler)
        app.router.add_post(f"{prefix}/withdrawals", withdrawals_post_handler)
        app.router.add_get(f"{prefix}/withdrawals/{{id}}", withdrawals_get_handler)
