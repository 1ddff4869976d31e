"""Tests for SessionService: login, scope activation and logout."""

from unittest.mock import AsyncMock

import pytest

from hradmin.application.dtos.admin import AdminResult
from hradmin.application.services.session_service import SessionService
from hradmin.domain.enums import AdminRole
from hradmin.domain.exceptions import AuthenticationException
from hradmin.infrastructure.cache.scoped_read_cache import ScopedReadCache

ADMIN = AdminResult(id="admin-1", name="Admin One", mobile="9000000001", role=AdminRole.ADMIN)


@pytest.fixture
def cache() -> ScopedReadCache:
    return ScopedReadCache(60.0)


def _service(cache: ScopedReadCache, admin: AdminResult | None = ADMIN) -> SessionService:
    repo = AsyncMock()
    repo.authenticate.return_value = admin
    return SessionService(repo, cache, lambda claims: f"token-for-{claims['sub']}")


async def test_login_activates_scope_and_issues_token(cache: ScopedReadCache) -> None:
    result = await _service(cache).login("9000000001", "secret")
    assert result.admin == ADMIN
    assert result.access_token == "token-for-admin-1"
    assert cache.scope == "admin-1"


async def test_login_failure_leaves_scope(cache: ScopedReadCache) -> None:
    cache.set_scope("admin-0")
    with pytest.raises(AuthenticationException):
        await _service(cache, admin=None).login("9000000001", "wrong")
    assert cache.scope == "admin-0"


async def test_login_as_other_admin_clears_cached_reads(cache: ScopedReadCache) -> None:
    cache.set_scope("admin-0")
    fetch = AsyncMock(return_value=["admin-0 data"])
    await cache.get_collection("employees", fetch)

    await _service(cache).login("9000000001", "secret")

    await cache.get_collection("employees", fetch)
    assert fetch.await_count == 2


async def test_activate_same_admin_keeps_cache(cache: ScopedReadCache) -> None:
    service = _service(cache)
    service.activate("admin-1")
    fetch = AsyncMock(return_value=[])
    await cache.get_collection("employees", fetch)
    service.activate("admin-1")
    await cache.get_collection("employees", fetch)
    fetch.assert_awaited_once()


async def test_logout_clears_cache_and_scope(cache: ScopedReadCache) -> None:
    service = _service(cache)
    service.activate("admin-1")
    await cache.get_collection("employees", AsyncMock(return_value=[]))

    service.logout()

    assert cache.scope is None
    assert cache.stats().collections == 0
