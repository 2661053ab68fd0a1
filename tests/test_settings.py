"""
tests.test_settings

Backend selection from configuration.
"""

from __future__ import annotations

import pytest

from order_store.settings import Settings, get_settings
from order_store.stores import create_order_store
from order_store.stores.memory import InMemoryOrderStore
from order_store.stores.sql import SqlOrderStore


def test_no_database_url_selects_memory() -> None:
    settings = Settings()
    assert settings.database_url is None
    assert not settings.uses_database
    assert isinstance(create_order_store(settings), InMemoryOrderStore)


def test_database_url_env_selects_sql(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "postgresql://shop:secret@db:5432/shop")
    settings = Settings()
    assert settings.uses_database
    assert isinstance(create_order_store(settings), SqlOrderStore)


def test_prefixed_database_url_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORDER_STORE_DATABASE_URL", "sqlite:///./orders.db")
    assert Settings().database_url == "sqlite:///./orders.db"


def test_empty_database_url_selects_memory(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "")
    settings = Settings()
    assert not settings.uses_database
    assert isinstance(create_order_store(settings), InMemoryOrderStore)


def test_whitespace_database_url_selects_memory() -> None:
    assert not Settings(database_url="   ").uses_database


def test_database_url_hidden_from_repr() -> None:
    settings = Settings(database_url="postgresql://shop:secret@db:5432/shop")
    assert "secret" not in repr(settings)


def test_logging_settings_use_prefix(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ORDER_STORE_LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ORDER_STORE_SERVICE_NAME", "checkout")
    settings = Settings()
    assert settings.log_level == "DEBUG"
    assert settings.service_name == "checkout"


def test_get_settings_is_cached() -> None:
    get_settings.cache_clear()
    try:
        assert get_settings() is get_settings()
    finally:
        get_settings.cache_clear()
