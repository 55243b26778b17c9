"""Tests for configuration objects."""

from __future__ import annotations

import pytest
from sqlalchemy.pool import StaticPool

from habitflow import _resolve_config
from habitflow.config import BaseConfig, DevConfig, TestingConfig, _env_bool


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.setenv("HABITFLOW_DATA_DIR", str(tmp_path))
    for name in (
        "HABITFLOW_DATABASE_URL",
        "HABITFLOW_DEV_MODE",
        "HABITFLOW_SECRET_KEY",
        "HABITFLOW_SEED_SAMPLE_DATA",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("1", True), ("true", True), (" Yes ", True), ("on", True), ("0", False), ("off", False), ("", False)],
)
def test_env_bool(monkeypatch, raw, expected):
    monkeypatch.setenv("HABITFLOW_FLAG", raw)
    assert _env_bool("HABITFLOW_FLAG") is expected


def test_env_bool_default_when_unset():
    assert _env_bool("HABITFLOW_MISSING", default=True) is True


def test_default_database_lives_in_data_dir(tmp_path):
    config = BaseConfig()
    assert config.DATA_DIR == tmp_path.resolve()
    assert config.DATABASE_URL == f"sqlite:///{tmp_path.resolve() / 'habitflow.db'}"
    assert config.SEED_SAMPLE_DATA is False
    assert config.sqlalchemy_engine_options() == {"connect_args": {"check_same_thread": False}}


def test_database_url_override(monkeypatch):
    monkeypatch.setenv("HABITFLOW_DATABASE_URL", "sqlite:////tmp/other.db")
    assert BaseConfig().DATABASE_URL == "sqlite:////tmp/other.db"


def test_non_dev_mode_requires_secret(monkeypatch):
    monkeypatch.setenv("HABITFLOW_DEV_MODE", "false")
    with pytest.raises(ValueError):
        BaseConfig()

    monkeypatch.setenv("HABITFLOW_SECRET_KEY", "s3cret")
    assert BaseConfig().SECRET_KEY == "s3cret"


def test_test_config_uses_shared_memory_database():
    config = TestingConfig()
    assert config.TESTING is True
    assert config.is_memory_database
    assert config.sqlalchemy_engine_options()["poolclass"] is StaticPool


def test_resolve_config_by_name():
    assert _resolve_config("development") is DevConfig
    assert _resolve_config("TESTING") is TestingConfig
    assert _resolve_config("unknown") is BaseConfig
    assert _resolve_config(None) is BaseConfig
