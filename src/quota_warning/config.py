"""Configuration for the quota warning service.

All settings are environment-driven via pydantic-settings. Each group has its
own prefix so hosts can override individual values without a config file:

- ``QUOTA_WARNING_*``        cooldown and exemption rules
- ``QUOTA_WARNING_STORE_*``  alert state persistence backend
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 5 MiB: smaller quotas never produce warnings
DEFAULT_MIN_QUOTA_BYTES = 5 * 1024**2


class QuotaWarningSettings(BaseSettings):
    """Cooldown and exemption rules for quota warnings.

    Tier thresholds are fixed by AlertTier.
    """

    model_config = SettingsConfigDict(env_prefix="QUOTA_WARNING_", extra="ignore")

    app_id: str = Field(default="quota_warning", min_length=1)

    cooldown_days: int = Field(default=7, ge=1)
    min_quota_bytes: int = Field(default=DEFAULT_MIN_QUOTA_BYTES, ge=0)


class StateStoreSettings(BaseSettings):
    """Where last-warning timestamps are persisted."""

    model_config = SettingsConfigDict(env_prefix="QUOTA_WARNING_STORE_", extra="ignore")

    backend: Literal["memory", "sqlite", "redis"] = "memory"

    sqlite_path: str = "./data/quota_warning.db"

    redis_url: str = "redis://localhost:6379"
    redis_key_prefix: str = "quota:warning:"
    redis_max_connections: int = Field(default=10, ge=1)


class Settings(BaseSettings):
    """Top-level settings container."""

    model_config = SettingsConfigDict(env_prefix="QUOTA_WARNING_", extra="ignore")

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    quota: QuotaWarningSettings = Field(default_factory=QuotaWarningSettings)
    store: StateStoreSettings = Field(default_factory=StateStoreSettings)


settings = Settings()
