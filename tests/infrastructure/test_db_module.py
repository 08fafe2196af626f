"""Tests for the engine helpers of src.infrastructure.db."""

import pytest

from src.infrastructure import db as db_module


@pytest.fixture
def no_dotenv(monkeypatch):
    monkeypatch.setattr(db_module.dotenv, "load_dotenv", lambda: None)


@pytest.fixture
def fresh_engines(monkeypatch):
    monkeypatch.setattr(db_module, "_gnucash_engine", None)
    monkeypatch.setattr(db_module, "_analytics_engine", None)
    created = []

    def fake_create_engine(url):
        created.append(url)
        return f"engine:{url}"

    monkeypatch.setattr(db_module, "_create_engine", fake_create_engine)
    return created


def test_env_var_is_read_after_loading_dotenv(monkeypatch):
    """The .env file should be loaded before reading the variable."""
    calls = []
    monkeypatch.setattr(
        db_module.dotenv,
        "load_dotenv",
        lambda: calls.append("loaded"),
    )
    monkeypatch.setenv("GNUCASH_DB_URL", "sqlite:///book.gnucash")

    assert db_module._get_env_var("GNUCASH_DB_URL") == "sqlite:///book.gnucash"
    assert calls == ["loaded"]


@pytest.mark.parametrize("value", [None, ""])
def test_missing_or_empty_env_var_raises(monkeypatch, no_dotenv, value):
    if value is None:
        monkeypatch.delenv("ANALYTICS_DB_URL", raising=False)
    else:
        monkeypatch.setenv("ANALYTICS_DB_URL", value)

    with pytest.raises(RuntimeError, match="ANALYTICS_DB_URL"):
        db_module._get_env_var("ANALYTICS_DB_URL")


def test_engines_use_a_checked_queue_pool(monkeypatch):
    captured = {}

    def fake_create_engine(db_url, **kwargs):
        captured.update(kwargs, url=db_url)
        return "engine"

    monkeypatch.setattr(db_module, "create_engine", fake_create_engine)

    assert db_module._create_engine("postgresql://budgets") == "engine"
    assert captured["url"] == "postgresql://budgets"
    assert captured["poolclass"] is db_module.QueuePool
    assert (captured["pool_size"], captured["max_overflow"]) == (5, 5)
    assert captured["pool_pre_ping"] is True


def test_each_engine_is_created_once(monkeypatch, no_dotenv, fresh_engines):
    monkeypatch.setenv("GNUCASH_DB_URL", "postgresql://gnucash")
    monkeypatch.setenv("ANALYTICS_DB_URL", "postgresql://budgets")

    gnucash = db_module.get_gnucash_engine()
    assert db_module.get_gnucash_engine() is gnucash
    analytics = db_module.get_analytics_engine()
    assert db_module.get_analytics_engine() is analytics

    assert fresh_engines == ["postgresql://gnucash", "postgresql://budgets"]


def test_adapter_delegates_to_module_engines(monkeypatch):
    monkeypatch.setattr(db_module, "get_gnucash_engine", lambda: "book")
    monkeypatch.setattr(db_module, "get_analytics_engine", lambda: "budgets")

    adapter = db_module.SqlAlchemyDatabaseEngineAdapter()

    assert adapter.get_gnucash_engine() == "book"
    assert adapter.get_analytics_engine() == "budgets"
