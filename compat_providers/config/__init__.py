"""Unified configuration layer for providers.

Merge order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) named by PROVIDERS_CONFIG_FILE
    3. Environment variables (OPENAI_COMPATIBLE_API_KEY, ..._BASE_URL, ..._CORS_BYPASS)
    4. In-code overrides passed to ``get_provider_config``

A ``.env`` file (path from DOTENV_FILE, default ``.env``) is read once before
environment variables are consulted. Example config file:

```
openai_compatible:
  base_url: https://dashscope.aliyuncs.com/compatible-mode/v1
  api_key: sk-...
  cors_bypass: false
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    OPENAI_COMPATIBLE_CONFIG_KEY,
    OPENAI_COMPATIBLE_DEFAULT_BASE_URL,
    OPENAI_COMPATIBLE_DEFAULT_CORS_BYPASS,
)
from .env import is_placeholder, parse_bool


DEFAULTS: Dict[str, Dict[str, Any]] = {
    OPENAI_COMPATIBLE_CONFIG_KEY: {
        "base_url": OPENAI_COMPATIBLE_DEFAULT_BASE_URL,
        "cors_bypass": OPENAI_COMPATIBLE_DEFAULT_CORS_BYPASS,
    },
}

ENV_FIELD_MAP = {
    "api_key": "API_KEY",  # pragma: allowlist secret - env suffix name, not a secret
    "base_url": "BASE_URL",
    "cors_bypass": "CORS_BYPASS",
}

_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def _load_dotenv_once() -> None:
    """Read KEY=VALUE lines from the dotenv file into ``os.environ`` once.

    Existing variables win unless their value is a placeholder.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    _DOTENV_LOADED = True
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        return
    with open(path, "r", encoding="utf-8") as fh:
        for line in fh:
            line = line.strip()
            if not line or line.startswith("#") or "=" not in line:
                continue
            k, v = line.split("=", 1)
            k = k.strip()
            v = v.strip().strip('"').strip("'")
            if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                os.environ[k] = v


def _load_external_config() -> Dict[str, Any]:
    """Load and cache the PROVIDERS_CONFIG_FILE contents (JSON first, then YAML)."""
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("PROVIDERS_CONFIG_FILE")
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        data = yaml.safe_load(text) or {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None and not is_placeholder(val):
            out[field] = val
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for ``provider``.

    ``cors_bypass`` is always normalized to a bool; ``api_key`` and
    ``base_url`` are strings (possibly empty).
    """
    _load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = dict(DEFAULTS.get(name, {}))

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    cfg["cors_bypass"] = parse_bool(cfg.get("cors_bypass"), default=False)
    cfg["api_key"] = str(cfg.get("api_key") or "")
    cfg["base_url"] = str(cfg.get("base_url") or "")
    return cfg


def reset_config_cache() -> None:
    """Forget the cached config file and dotenv state (used by tests)."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "get_provider_config",
    "reset_config_cache",
    "DEFAULTS",
]
