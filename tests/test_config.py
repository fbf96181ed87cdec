"""Settings — required connection string, driver rewrite, pool defaults."""

import pytest
from pydantic import ValidationError

from catapi.config import Settings


def test_missing_database_url_is_fatal(monkeypatch):
    monkeypatch.delenv("DATABASE_URL", raising=False)
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_postgres_url_uses_asyncpg(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "postgresql://cats:cats@db:5432/cats")
    settings = Settings(_env_file=None)
    assert settings.database_url == "postgresql+asyncpg://cats:cats@db:5432/cats"


def test_other_urls_unchanged(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///cats.db")
    assert Settings(_env_file=None).database_url == "sqlite+aiosqlite:///cats.db"


def test_defaults(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///cats.db")
    settings = Settings(_env_file=None)
    assert settings.database_pool_size == 10
    assert settings.database_max_overflow == 0
    assert settings.database_pool_timeout == 30.0
    assert (settings.host, settings.port) == ("127.0.0.1", 8080)


def test_pool_settings_from_env(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///cats.db")
    monkeypatch.setenv("DATABASE_POOL_SIZE", "4")
    monkeypatch.setenv("DATABASE_POOL_TIMEOUT", "2.5")
    settings = Settings(_env_file=None)
    assert settings.database_pool_size == 4
    assert settings.database_pool_timeout == 2.5


def test_pool_size_must_be_positive(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///cats.db")
    monkeypatch.setenv("DATABASE_POOL_SIZE", "0")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)
