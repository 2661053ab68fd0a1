"""
order_store.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Read the database connection string that selects the storage backend.
- Hide the connection string (it may carry credentials) from repr/logging.
- Offer a cached settings instance for injection at process startup.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Backend selection is driven by a single value:
    - `database_url` set    -> relational store
    - `database_url` absent -> in-memory store
    Everything else only tunes logging.
    """

    model_config = SettingsConfigDict(
        env_prefix="ORDER_STORE_",
        case_sensitive=False,
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
    )

    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "order-store"
    log_level: str = "INFO"

    # Plain DATABASE_URL is honoured so the store drops into existing deployments.
    database_url: str | None = Field(
        default=None,
        repr=False,
        validation_alias=AliasChoices("DATABASE_URL", "ORDER_STORE_DATABASE_URL", "database_url"),
    )

    @property
    def uses_database(self) -> bool:
        return bool(self.database_url and self.database_url.strip())


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly; call `get_settings.cache_clear()`
# after changing the environment if the cached instance is involved.
