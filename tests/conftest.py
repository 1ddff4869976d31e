"""Pytest configuration and fixtures for hradmin.

Settings are read from the environment, so the required values are set
before hradmin is imported. HTTP tests build a fresh app per test (fresh
read cache) backed by the in-memory Firestore fake in tests.fakes.
"""

import os

os.environ.setdefault("SECRET_KEY", "test-secret-key-not-for-production")
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["TELEMETRY_ENABLED"] = "false"

import pytest  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from hradmin.core.config import get_settings  # noqa: E402
from hradmin.domain.enums import AdminRole  # noqa: E402
from hradmin.infrastructure.firebase.repositories import FirestoreAdminRepository  # noqa: E402
from tests.fakes import ADMIN_PASSWORD, FakeFirestoreClient  # noqa: E402

get_settings.cache_clear()


@pytest.fixture
def fake_firestore() -> FakeFirestoreClient:
    return FakeFirestoreClient()


@pytest.fixture
def app(fake_firestore: FakeFirestoreClient) -> FastAPI:
    """Fresh application wired to the Firestore fake."""
    from hradmin.main import create_app

    application = create_app()
    application.state.firestore = fake_firestore
    return application


@pytest.fixture
async def client(app: FastAPI) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def admins(fake_firestore: FakeFirestoreClient) -> dict[str, str]:
    """Two admins in the fake; returns mobile -> admin id."""
    repo = FirestoreAdminRepository(fake_firestore)
    first = await repo.add_admin("Admin One", "9000000001", AdminRole.SUPER_ADMIN, ADMIN_PASSWORD)
    second = await repo.add_admin("Admin Two", "9000000002", AdminRole.ADMIN, ADMIN_PASSWORD)
    return {first.mobile: first.id, second.mobile: second.id}


async def _login(client: AsyncClient, mobile: str) -> dict[str, str]:
    resp = await client.post(
        "/api/v1/auth/login", json={"mobile": mobile, "password": ADMIN_PASSWORD}
    )
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['access_token']}"}


@pytest.fixture
async def auth_headers(client: AsyncClient, admins: dict[str, str]) -> dict[str, str]:
    """Headers for the first admin."""
    return await _login(client, "9000000001")


@pytest.fixture
def login_as(client: AsyncClient, admins: dict[str, str]):
    """Async helper: log in by mobile and return Authorization headers."""

    async def _do(mobile: str) -> dict[str, str]:
        return await _login(client, mobile)

    return _do
