"""Configuration layer merge order and ProviderConfig construction."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from compat_providers.base.dto import ProviderConfig
from compat_providers.config import get_provider_config, reset_config_cache
from compat_providers.config.env import is_placeholder, parse_bool


def test_defaults_are_empty_and_bypass_off():
    cfg = get_provider_config("openai_compatible")
    assert cfg["api_key"] == ""
    assert cfg["base_url"] == ""
    assert cfg["cors_bypass"] is False


def test_env_overrides_file_and_overrides_win(monkeypatch, tmp_path):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"openai_compatible": {"base_url": "https://file.example/v1", "api_key": "file-key"}}))
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    monkeypatch.setenv("OPENAI_COMPATIBLE_API_KEY", "env-key")
    reset_config_cache()

    cfg = get_provider_config("openai_compatible", {"cors_bypass": "yes"})

    assert cfg["base_url"] == "https://file.example/v1"
    assert cfg["api_key"] == "env-key"
    assert cfg["cors_bypass"] is True


def test_yaml_config_file(monkeypatch, tmp_path):
    path = tmp_path / "providers.yaml"
    path.write_text("openai_compatible:\n  base_url: https://yaml.example/v1\n  cors_bypass: true\n")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    reset_config_cache()

    cfg = get_provider_config("openai_compatible")
    assert cfg["base_url"] == "https://yaml.example/v1"
    assert cfg["cors_bypass"] is True


def test_placeholder_env_values_are_ignored(monkeypatch):
    monkeypatch.setenv("OPENAI_COMPATIBLE_API_KEY", "<your-api-key>")
    assert get_provider_config("openai_compatible")["api_key"] == ""


def test_dotenv_file_is_loaded(monkeypatch, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("# comment\nOPENAI_COMPATIBLE_BASE_URL='https://dotenv.example/v1'\n")
    monkeypatch.setenv("DOTENV_FILE", str(env_file))
    # placeholder values are overridden by the dotenv file
    monkeypatch.setenv("OPENAI_COMPATIBLE_BASE_URL", "changeme")
    reset_config_cache()

    assert get_provider_config("openai_compatible")["base_url"] == "https://dotenv.example/v1"


@pytest.mark.parametrize("value,expected", [("1", True), ("TRUE", True), ("off", False), ("", False), (True, True), ("maybe", False)])
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


def test_is_placeholder_heuristics():
    assert is_placeholder("changeme")
    assert is_placeholder("YOUR_API_KEY")
    assert not is_placeholder("sk-live-123")
    assert not is_placeholder(None)


def test_provider_config_is_frozen_and_strips():
    cfg = ProviderConfig(api_key=" k ", base_url=" https://api.example.com/v1 ")
    assert cfg.api_key == "k"
    assert cfg.host == "api.example.com"
    assert cfg.is_complete()
    with pytest.raises(ValidationError):
        cfg.api_key = "other"


def test_provider_config_incomplete_when_any_value_missing():
    assert not ProviderConfig(api_key="k").is_complete()
    assert not ProviderConfig(base_url="https://x").is_complete()
    assert ProviderConfig().host is None


def test_provider_config_from_env(monkeypatch):
    monkeypatch.setenv("OPENAI_COMPATIBLE_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_COMPATIBLE_BASE_URL", "https://api.example.com/v1")
    cfg = ProviderConfig.from_env()
    assert cfg.is_complete()
    assert cfg.cors_bypass_enabled is False
    assert cfg.custom_transport is None
