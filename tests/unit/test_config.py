"""Tests for Settings validation."""

import pytest
from pydantic import ValidationError

from hradmin.core.config import Settings


def test_secret_key_required(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SECRET_KEY", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_read_cache_ttl_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        Settings(_env_file=None, secret_key="k", read_cache_ttl_seconds=0)


def test_defaults() -> None:
    settings = Settings(_env_file=None, secret_key="k")
    assert settings.read_cache_ttl_seconds == 60.0
    assert settings.access_token_expire_minutes == 480
    assert settings.firebase_service_account_key is None
