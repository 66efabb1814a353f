"""HTTP middlewares."""

from server.middlewares.error_handler import error_middleware


__all__ = ["error_middleware"]
