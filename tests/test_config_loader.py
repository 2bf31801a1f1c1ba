"""Tests for configuration loading: JSON file, camelCase keys and OBSIDIAN_* env vars."""

import json
from pathlib import Path

import pytest

from obsidian_mcp.config.loader import camel_to_snake, convert_keys, load_config
from obsidian_mcp.config.schema import Config


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch) -> None:
    for name in ("OBSIDIAN_API_TOKEN", "OBSIDIAN_BASE_URL", "OBSIDIAN_REQUEST_TIMEOUT", "OBSIDIAN_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults_when_file_missing(tmp_path: Path) -> None:
    cfg = load_config(tmp_path / "missing.json")
    assert cfg.api_token == ""
    assert cfg.base_url == "http://127.0.0.1:27123"
    assert cfg.request_timeout is None
    assert cfg.log_level == "INFO"
    assert cfg.log_file is None


def test_token_from_environment(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("OBSIDIAN_API_TOKEN", "env-token")
    monkeypatch.setenv("OBSIDIAN_BASE_URL", "https://127.0.0.1:27124")
    cfg = load_config(tmp_path / "missing.json")
    assert cfg.api_token == "env-token"
    assert cfg.base_url == "https://127.0.0.1:27124"


def test_file_values_with_camel_case_keys(tmp_path: Path) -> None:
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"apiToken": "file-token", "requestTimeout": 2.5, "logFile": "x.log"}), encoding="utf-8")
    cfg = load_config(path)
    assert cfg.api_token == "file-token"
    assert cfg.request_timeout == 2.5
    assert cfg.log_file == Path("x.log")


def test_environment_fills_keys_missing_from_file(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.setenv("OBSIDIAN_API_TOKEN", "env-token")
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"baseUrl": "http://vault.local:27123"}), encoding="utf-8")
    cfg = load_config(path)
    assert cfg.api_token == "env-token"
    assert cfg.base_url == "http://vault.local:27123"


@pytest.mark.parametrize("content", ["{not json", "[1, 2]", '{"requestTimeout": -1}'])
def test_invalid_file_raises_value_error_naming_path(tmp_path: Path, content: str) -> None:
    path = tmp_path / "config.json"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ValueError) as err:
        load_config(path)
    assert str(path) in str(err.value)


def test_key_conversion() -> None:
    assert camel_to_snake("apiToken") == "api_token"
    assert camel_to_snake("base_url") == "base_url"
    assert convert_keys({"logLevel": "DEBUG", "nested": [{"innerKey": 1}]}) == {
        "log_level": "DEBUG",
        "nested": [{"inner_key": 1}],
    }


def test_config_direct_construction() -> None:
    cfg = Config(api_token="t", log_level="debug")
    assert cfg.api_token == "t"
    assert cfg.log_level == "debug"
