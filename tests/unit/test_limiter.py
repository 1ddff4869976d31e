"""Tests for the per-mobile login attempt window."""

import pytest
from fastapi import HTTPException

from hradmin.core import limiter as limiter_module
from hradmin.core.limiter import (
    LOGIN_PER_MOBILE_LIMIT,
    check_login_rate_per_mobile,
    limiter,
)


@pytest.fixture
def enabled_limiter():
    previous = limiter.enabled
    limiter.enabled = True
    limiter_module._login_attempts.clear()
    yield
    limiter.enabled = previous
    limiter_module._login_attempts.clear()


def test_blocks_after_limit_per_mobile(enabled_limiter) -> None:
    for _ in range(LOGIN_PER_MOBILE_LIMIT):
        check_login_rate_per_mobile("9000000001")
    with pytest.raises(HTTPException) as exc_info:
        check_login_rate_per_mobile("9000000001")
    assert exc_info.value.status_code == 429
    check_login_rate_per_mobile("9000000002")


def test_disabled_limiter_never_blocks() -> None:
    previous = limiter.enabled
    limiter.enabled = False
    try:
        for _ in range(LOGIN_PER_MOBILE_LIMIT + 5):
            check_login_rate_per_mobile("9000000003")
    finally:
        limiter.enabled = previous


def test_expired_mobiles_are_forgotten(enabled_limiter, monkeypatch) -> None:
    now = [1000.0]
    monkeypatch.setattr(limiter_module.time, "monotonic", lambda: now[0])
    check_login_rate_per_mobile("9000000004")
    check_login_rate_per_mobile("9000000005")
    assert set(limiter_module._login_attempts) == {"9000000004", "9000000005"}

    now[0] += limiter_module.LOGIN_PER_MOBILE_WINDOW_SEC
    check_login_rate_per_mobile("9000000006")
    assert set(limiter_module._login_attempts) == {"9000000006"}


def test_window_reopens_after_expiry(enabled_limiter, monkeypatch) -> None:
    now = [1000.0]
    monkeypatch.setattr(limiter_module.time, "monotonic", lambda: now[0])
    for _ in range(LOGIN_PER_MOBILE_LIMIT):
        check_login_rate_per_mobile("9000000007")
    now[0] += limiter_module.LOGIN_PER_MOBILE_WINDOW_SEC
    check_login_rate_per_mobile("9000000007")
    assert len(limiter_module._login_attempts["9000000007"]) == 1
