"""Pytest configuration and shared fixtures for all tests."""

import sys
from pathlib import Path
from unittest.mock import AsyncMock

# Добавить корень проекта в PYTHONPATH
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from aiohttp import test_utils, web  # noqa: E402
from loguru import logger  # noqa: E402

from gateway.config.settings import Settings  # noqa: E402
from gateway.models.api import WithdrawalRequest  # noqa: E402
from gateway.services.auth_client import AuthClient  # noqa: E402
from server.initialization import create_app  # noqa: E402


# Keep test output readable
logger.remove()
logger.add(sys.stderr, level="WARNING")

# Nothing listens on port 1
UNREACHABLE_ENDPOINT = "http://127.0.0.1:1/"


class MockAuthService:
    """In-process stand-in for the authorization service.

    Responses are configurable per test; every received request is
    recorded as (path, json_body).
    """

    def __init__(self) -> None:
        self.accesskey_body: bytes = b'{"key": "abc"}'
        self.accesskey_status = 200
        self.verify_status = 200
        self.requests: list[tuple[str, object]] = []
        self.url = ""

        self.app = web.Application()
        self.app.router.add_post("/issue-accesskeys", self._issue)
        self.app.router.add_post("/verify-withdrawal-request", self._verify)

    async def _issue(self, request: web.Request) -> web.Response:
        self.requests.append((request.path, await request.json()))
        return web.Response(
            body=self.accesskey_body,
            status=self.accesskey_status,
            content_type="application/json",
        )

    async def _verify(self, request: web.Request) -> web.Response:
        self.requests.append((request.path, await request.json()))
        return web.Response(text="ignored", status=self.verify_status)


def make_settings(**overrides) -> Settings:
    """Settings for tests: no log file, short processing delay."""
    values = {
        "auth_endpoint": UNREACHABLE_ENDPOINT,
        "auth_timeout_seconds": 5.0,
        "processing_delay_seconds": 0.05,
        "log_file": "",
    }
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings() -> Settings:
    """Settings pointing at an unreachable authorization service."""
    return make_settings()


@pytest.fixture
def mock_auth_client():
    """Mock AuthClient: verification passes, key issuance returns nothing."""
    client = AsyncMock(spec=AuthClient)
    client.verify_withdrawal = AsyncMock(return_value=None)
    client.issue_accesskey = AsyncMock()
    return client


@pytest.fixture
def sample_withdrawal_request() -> WithdrawalRequest:
    """Withdrawal request with a regular destination."""
    return WithdrawalRequest(
        destination="bc1qxy2kgdygjrsqtzq2n0yrf2493p83kkfjhx0wlh",
        amount=1500,
        currency="BTC",
    )


@pytest_asyncio.fixture
async def auth_service():
    """Running MockAuthService; ``url`` is its base URL."""
    service = MockAuthService()
    server = test_utils.TestServer(service.app)
    await server.start_server()
    service.url = str(server.make_url("/"))
    yield service
    await server.close()


@pytest_asyncio.fixture
async def auth_client(auth_service):
    """Real AuthClient talking to the mock authorization service."""
    client = AuthClient(make_settings(auth_endpoint=auth_service.url))
    yield client
    await client.close()


@pytest_asyncio.fixture
async def gateway_client(auth_service):
    """Test client for the gateway wired to the mock authorization service."""
    app = create_app(make_settings(auth_endpoint=auth_service.url))
    client = test_utils.TestClient(test_utils.TestServer(app))
    await client.start_server()
    yield client
    await client.close()


@pytest.fixture
def settings_factory():
    """Build test settings with overrides."""
    return make_settings
