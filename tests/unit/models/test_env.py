"""Unit tests for DataAPIEnv."""

import pytest
from pydantic import ValidationError

from mongo_data_api import ConfigurationError, DataAPIEnv

ENVIRON = {
    "MONGO_API_URL": "https://example.com/data/v1",
    "MONGO_API_KEY": "key",
    "DATABASE": "todo",
    "COLLECTION": "tasks",
    "DATA_SOURCE": "Cluster0",
}


def test_populate_by_alias_and_name():
    by_alias = DataAPIEnv(**ENVIRON)
    by_name = DataAPIEnv(
        api_url="https://example.com/data/v1",
        api_key="key",
        database="todo",
        collection="tasks",
        data_source="Cluster0",
    )
    assert by_alias == by_name


def test_env_is_frozen(env):
    with pytest.raises(ValidationError):
        env.collection = "other"


def test_missing_field_rejected():
    with pytest.raises(ValidationError):
        DataAPIEnv(api_url="https://example.com")


def test_api_key_hidden_from_repr(env):
    assert "secret-key" not in repr(env)


def test_from_env():
    env = DataAPIEnv.from_env(ENVIRON)
    assert env.api_url == "https://example.com/data/v1"
    assert env.data_source == "Cluster0"


def test_from_env_with_prefix():
    environ = {f"TASKS_{k}": v for k, v in ENVIRON.items()}
    env = DataAPIEnv.from_env(environ, prefix="TASKS_")
    assert env.collection == "tasks"


def test_from_env_reports_all_missing():
    environ = {k: v for k, v in ENVIRON.items() if k not in ("MONGO_API_KEY", "DATABASE")}
    with pytest.raises(ConfigurationError) as exc_info:
        DataAPIEnv.from_env(environ)
    assert exc_info.value.missing == ["MONGO_API_KEY", "DATABASE"]
    assert "MONGO_API_KEY" in str(exc_info.value)


def test_from_env_reads_os_environ(monkeypatch):
    for key, value in ENVIRON.items():
        monkeypatch.setenv(key, value)
    assert DataAPIEnv.from_env().database == "todo"


def test_with_collection(env):
    other = env.with_collection("archive")
    assert other.collection == "archive"
    assert other.database == env.database
    assert env.collection == "tasks"
