"""Unit tests for service base helpers."""

import pytest

from gateway.models.api import Status
from gateway.services.base_service import BaseService, ServiceResult, log_operation


class _EchoService(BaseService):
    @log_operation
    async def echo(self, value):
        return ServiceResult.ok(value)

    @log_operation
    async def explode(self):
        raise RuntimeError("boom")


def test_ok_result():
    """ok() carries data and no error."""
    result = ServiceResult.ok(7)

    assert result.success is True
    assert result.data == 7
    assert result.error is None


def test_failure_result():
    """failure() carries a status envelope."""
    result = ServiceResult.failure(400, "bad request")

    assert result.success is False
    assert result.data is None
    assert result.error == Status(code=400, desc="bad request")


@pytest.mark.asyncio
async def test_log_operation_returns_result():
    """Decorated methods return their result unchanged."""
    result = await _EchoService().echo("x")

    assert result.data == "x"


@pytest.mark.asyncio
async def test_log_operation_reraises():
    """Exceptions propagate through the decorator."""
    with pytest.raises(RuntimeError, match="boom"):
        await _EchoService().explode()
