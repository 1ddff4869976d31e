"""Tests for auth endpoints and the read cache scope they control."""

from fastapi import FastAPI
from httpx import AsyncClient

from tests.fakes import ADMIN_PASSWORD


async def test_login_missing_body_returns_422(client: AsyncClient) -> None:
    response = await client.post("/api/v1/auth/login", json={})
    assert response.status_code == 422
    assert response.json()["error"] == "VALIDATION_ERROR"


async def test_login_non_digit_mobile_returns_422(client: AsyncClient) -> None:
    response = await client.post(
        "/api/v1/auth/login", json={"mobile": "90000abc01", "password": "x"}
    )
    assert response.status_code == 422


async def test_login_invalid_credentials_returns_401(
    client: AsyncClient, admins: dict[str, str]
) -> None:
    """Unknown mobile and wrong password give the same generic 401."""
    wrong_password = await client.post(
        "/api/v1/auth/login", json={"mobile": "9000000001", "password": "wrong"}
    )
    unknown = await client.post(
        "/api/v1/auth/login", json={"mobile": "9123456789", "password": ADMIN_PASSWORD}
    )
    assert wrong_password.status_code == 401
    assert unknown.status_code == 401
    assert wrong_password.json() == unknown.json()


async def test_login_accepts_country_code(
    app: FastAPI, client: AsyncClient, admins: dict[str, str]
) -> None:
    response = await client.post(
        "/api/v1/auth/login", json={"mobile": "+919000000001", "password": ADMIN_PASSWORD}
    )
    assert response.status_code == 200
    assert response.json()["token_type"] == "bearer"
    assert app.state.read_cache.scope == admins["9000000001"]


async def test_me_returns_current_admin(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get("/api/v1/auth/me", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert data["mobile"] == "9000000001"
    assert data["role"] == "super_admin"
    assert "hashed_password" not in data


async def test_me_without_token_returns_401(client: AsyncClient) -> None:
    response = await client.get("/api/v1/auth/me")
    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"


async def test_me_with_bad_token_returns_401(client: AsyncClient) -> None:
    response = await client.get(
        "/api/v1/auth/me", headers={"Authorization": "Bearer not-a-jwt"}
    )
    assert response.status_code == 401


async def test_logout_clears_cache_and_scope(
    app: FastAPI, client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    await client.get("/api/v1/employees", headers=auth_headers)
    assert app.state.read_cache.stats().collections == 1

    response = await client.post("/api/v1/auth/logout", headers=auth_headers)

    assert response.status_code == 204
    assert app.state.read_cache.scope is None
    assert app.state.read_cache.stats().collections == 0
