"""Pytest configuration and fixtures for Aimee tests."""

import os

# Configure the app before anything imports aimee.config
os.environ.setdefault("AIMEE_SECRET_KEY", "test-secret-key-for-aimee-tests-0123456789")
os.environ.setdefault("AIMEE_ADMIN_PASSWORD", "testpassword")
os.environ.setdefault("AIMEE_GATEWAY_BACKEND", "offline")

from collections.abc import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from aimee.main import app
from aimee.services.auth import create_access_token
from aimee.services.gateway import AIGateway, GatewayResult, VoiceProfile, get_ai_gateway
from aimee.services.interaction_log import get_interaction_log
from aimee.services.inventory import DEFAULT_INVENTORY, InventoryStore, get_inventory_store

TEST_USERNAME = "admin"
TEST_PASSWORD = "testpassword"


@pytest.fixture
def store() -> InventoryStore:
    """A fresh store holding the default seed inventory."""
    return InventoryStore(DEFAULT_INVENTORY)


@pytest.fixture(autouse=True)
def reset_state():
    """Restore the process-wide store and log between tests."""
    get_inventory_store().reset()
    get_interaction_log().clear()
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def mock_gateway() -> MagicMock:
    """Gateway double whose calls succeed unless a test says otherwise."""
    gateway = MagicMock(spec=AIGateway)
    gateway.can_synthesize = True
    gateway.default_voice = VoiceProfile(voice_id="test-voice")
    gateway.complete = AsyncMock(return_value=GatewayResult.success("Chat reply"))
    gateway.transcribe = AsyncMock(return_value=GatewayResult.success("how many bottles of syrah"))
    gateway.synthesize = AsyncMock(return_value=GatewayResult.success(b"ID3-audio"))
    app.dependency_overrides[get_ai_gateway] = lambda: gateway
    return gateway


@pytest.fixture
def auth_headers() -> dict:
    """Authorization headers for the operator account."""
    access_token = create_access_token(data={"sub": TEST_USERNAME})
    return {"Authorization": f"Bearer {access_token}"}


@pytest_asyncio.fixture
async def client(auth_headers) -> AsyncGenerator[AsyncClient, None]:
    """Authenticated async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport,
        base_url="http://test",
        headers=auth_headers,
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def unauthenticated_client() -> AsyncGenerator[AsyncClient, None]:
    """Async test client without an Authorization header."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
