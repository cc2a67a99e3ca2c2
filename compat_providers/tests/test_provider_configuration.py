"""Configuration checks run before any delegate call."""

from __future__ import annotations

import pytest

from compat_providers import ConfigurationError, ErrorCode, OpenAICompatibleProvider, ProviderError


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "api_key,base_url,bypass",
    [
        ("", "https://api.example.com", False),
        ("k", "", False),
        ("", "", False),
        ("", "https://api.example.com", True),
        ("k", "   ", True),
    ],
)
async def test_missing_config_fails_both_operations_without_delegate_calls(
    exchange, llm_model, request_nonstream, request_stream, api_key, base_url, bypass
):
    provider = OpenAICompatibleProvider(api_key, base_url, bypass, exchange=exchange)

    with pytest.raises(ConfigurationError):
        await provider.generate_response(llm_model, request_nonstream)
    with pytest.raises(ConfigurationError):
        await provider.stream_response(llm_model, request_stream)

    assert exchange.calls == []


@pytest.mark.asyncio
async def test_configuration_error_is_actionable_provider_error(exchange, llm_model, request_nonstream):
    provider = OpenAICompatibleProvider("", "https://api.example.com", exchange=exchange)
    with pytest.raises(ProviderError) as info:
        await provider.generate_response(llm_model, request_nonstream)
    err = info.value
    assert isinstance(err, ConfigurationError)
    assert err.code is ErrorCode.CONFIGURATION
    assert "settings" in str(err)
    assert not err.retryable


def test_incomplete_config_builds_no_client():
    provider = OpenAICompatibleProvider("", "https://api.example.com")
    assert provider._client is None


def test_complete_config_builds_sdk_client():
    from openai import AsyncOpenAI

    provider = OpenAICompatibleProvider("k", "https://api.example.com/v1")
    assert isinstance(provider._client, AsyncOpenAI)
    assert str(provider._client.base_url).startswith("https://api.example.com/v1")


def test_from_env_reads_configuration_layer(monkeypatch, exchange):
    monkeypatch.setenv("OPENAI_COMPATIBLE_API_KEY", "sk-env")
    monkeypatch.setenv("OPENAI_COMPATIBLE_BASE_URL", "https://dashscope.aliyuncs.com/compatible-mode/v1")
    monkeypatch.setenv("OPENAI_COMPATIBLE_CORS_BYPASS", "true")

    provider = OpenAICompatibleProvider.from_env(exchange=exchange)

    assert provider.config.api_key == "sk-env"
    assert provider.config.cors_bypass_enabled is True
    assert provider.backend == "alibaba-qwen"
    assert provider.supports_streaming() is False
