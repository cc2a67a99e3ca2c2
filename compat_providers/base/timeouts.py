"""Timeout configuration for provider HTTP clients.

The adapter core enforces no timeouts of its own; the values here configure the
``httpx.AsyncClient`` handed to the SDK. Supported environment variables (all
optional, positive floats):

    PT_TIMEOUT_HTTP_SECONDS      request timeout for non-streaming calls
    PT_TIMEOUT_CONNECT_SECONDS   connection establishment timeout
    PT_TIMEOUT_STREAM_SECONDS    read timeout between streamed chunks

Values are cached per process and refreshed when the environment changes.
"""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values in seconds."""

    http_timeout_seconds: float = 60.0
    connect_timeout_seconds: float = 10.0
    stream_timeout_seconds: float = 120.0


_ENV_NAMES = ("PT_TIMEOUT_HTTP_SECONDS", "PT_TIMEOUT_CONNECT_SECONDS", "PT_TIMEOUT_STREAM_SECONDS")
_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Return a positive float from ``name`` or ``default`` when unset/invalid."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached :class:`TimeoutConfig`."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(n, "") for n in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        http_timeout_seconds=_parse_env_float("PT_TIMEOUT_HTTP_SECONDS", defaults.http_timeout_seconds),
        connect_timeout_seconds=_parse_env_float("PT_TIMEOUT_CONNECT_SECONDS", defaults.connect_timeout_seconds),
        stream_timeout_seconds=_parse_env_float("PT_TIMEOUT_STREAM_SECONDS", defaults.stream_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
