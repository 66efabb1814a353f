"""
Server Initialization - Shutdown Module.

Module: shutdown.py
Handles graceful shutdown of the gateway.
Closes the authorization service client.
"""

from aiohttp import web
from loguru import logger

from server.keys import AUTH_CLIENT_KEY


async def shutdown_handler(app: web.Application) -> None:
    """Handle graceful shutdown."""
    logger.info("Graceful shutdown initiated...")

    try:
        await app[AUTH_CLIENT_KEY].close()
        logger.info("Authorization client closed")
    except Exception as e:
        logger.warning(f"Error closing authorization client: {e}")

    logger.info("Graceful shutdown complete")
