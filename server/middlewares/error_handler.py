"""
Global Error Handler Middleware.

Catches unhandled exceptions raised by handlers and answers with a 500
status envelope, so one failing request never takes the server down.
"""

from collections.abc import Awaitable, Callable

from aiohttp import web
from loguru import logger

from gateway.config.constants import STATUS_INTERNAL_ERROR
from server.handlers.responses import status_response


Handler = Callable[[web.Request], Awaitable[web.StreamResponse]]


@web.middleware
async def error_middleware(request: web.Request, handler: Handler) -> web.StreamResponse:
    """
    Global error handler middleware.

    - Lets aiohttp HTTP exceptions (404, 405, ...) through
    - Logs everything else with traceback
    - Returns a 500 status envelope without technical details
    """
    try:
        return await handler(request)
    except web.HTTPException:
        raise
    except Exception as e:
        logger.exception(
            f"Unhandled exception in {request.method} {request.path}: "
            f"{e.__class__.__name__}: {e}"
        )
        return status_response(STATUS_INTERNAL_ERROR, "internal server error")
