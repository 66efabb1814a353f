"""
Base service class.

Provides common functionality for all service classes including the
typed result container, bound logging and helper decorators.
"""

import functools
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from loguru import logger

from gateway.models.api import Status


# Type variable for generic result payloads and decorator return types
T = TypeVar("T")


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """
    Standard service result container.

    Either ``data`` is set (success) or ``error`` carries the status
    envelope to hand back to the caller.
    """
    success: bool
    data: T | None = None
    error: Status | None = None

    @classmethod
    def ok(cls, data: T) -> "ServiceResult[T]":
        """Create a successful result."""
        return cls(success=True, data=data)

    @classmethod
    def failure(cls, code: int, desc: str) -> "ServiceResult[T]":
        """Create a failed result with a status envelope."""
        return cls(success=False, error=Status(code=code, desc=desc))


class BaseService:
    """
    Base service class.

    Provides logging with bound service context.
    """

    def __init__(self) -> None:
        """Initialize base service."""
        self.logger = logger.bind(service=self.__class__.__name__)


def log_operation(
    func: Callable[..., Awaitable[T]],
) -> Callable[..., Awaitable[T]]:
    """
    Decorator to log method entry/exit with timing.

    Logs:
    - Method entry
    - Method exit with duration and outcome
    - Exceptions if any

    Usage:
        @log_operation
        async def process(self, request):
            ...

    Args:
        func: Async method to wrap

    Returns:
        Wrapped async method
    """
    @functools.wraps(func)
    async def wrapper(self: BaseService, *args: Any, **kwargs: Any) -> T:
        start_time = time.monotonic()

        self.logger.debug(f"Starting {func.__name__}")

        try:
            result = await func(self, *args, **kwargs)
        except Exception as e:
            duration = time.monotonic() - start_time
            self.logger.error(
                f"Failed {func.__name__} after {duration:.3f}s: {e}"
            )
            raise

        duration = time.monotonic() - start_time
        success = getattr(result, "success", True)
        self.logger.debug(
            f"Completed {func.__name__} in {duration:.3f}s (success={success})"
        )
        return result

    return wrapper
