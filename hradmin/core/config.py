"""hradmin settings, read from the environment and an optional .env file.

Only SECRET_KEY is mandatory. Without Firebase credentials the app still
starts; data routes then answer 503.
"""

from functools import lru_cache

from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed configuration (names are case-insensitive)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    app_name: str = "hradmin"
    app_version: str = "1.0.0"
    debug: bool = False

    # Admin session tokens
    secret_key: SecretStr = Field(default=SecretStr(""), validate_default=True)
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 480

    # Comma-separated origins of the admin panel
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"
    rate_limit_enabled: bool = True

    # Service account JSON, inline or as a file path (inline wins)
    firebase_service_account_key: SecretStr | None = None
    firebase_service_account_path: str | None = None

    # How long employee/employment reads are served from memory
    read_cache_ttl_seconds: float = Field(default=60.0, gt=0)

    # Ensured by scripts.seed_admins on every run
    test_admin_mobile: str = "9999999999"
    test_admin_password: SecretStr = SecretStr("")

    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = Field(default=1.0, ge=0.0, le=1.0)
    telemetry_environment: str = "development"

    @field_validator("secret_key")
    @classmethod
    def _require_secret_key(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value():
            raise ValueError("SECRET_KEY is required. Generate with: openssl rand -hex 32.")
        return v


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide Settings, validated on first call.

    Tests that change environment variables call get_settings.cache_clear()
    first.
    """
    return Settings()
