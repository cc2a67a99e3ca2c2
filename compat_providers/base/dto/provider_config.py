"""Typed configuration object owned by one provider adapter.

Purpose
-------
Capture the adapter's whole configuration surface (credentials, endpoint,
CORS-bypass mode and the optional substitute transport) in one immutable value
fixed at construction time.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and immutability.

Failure modes
-------------
- Empty ``api_key``/``base_url`` are accepted here; the adapter reports them as
  ``ConfigurationError`` when an operation is invoked.
- Pydantic raises ``ValidationError`` for wrongly typed inputs.
"""
from __future__ import annotations

from typing import Any, Callable, Optional, Union
from urllib.parse import urlparse

import httpx
from pydantic import BaseModel, ConfigDict, field_validator

from ...config import get_provider_config
from ...config.defaults import OPENAI_COMPATIBLE_CONFIG_KEY

# Async callable taking an ``httpx.Request`` and returning an ``httpx.Response``,
# or a ready-made httpx transport.
CustomTransport = Union[httpx.AsyncBaseTransport, Callable[..., Any]]


class ProviderConfig(BaseModel):
    """Immutable adapter configuration.

    Attributes
    ----------
    api_key:
        Credential sent as the bearer token.
    base_url:
        Backend endpoint; also the input to backend-signature detection.
    cors_bypass_enabled:
        Route requests through ``custom_transport`` and disable real streaming.
    custom_transport:
        Optional fetch-capable callable or ``httpx.AsyncBaseTransport``. Used
        only when ``cors_bypass_enabled`` is set.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    api_key: str = ""
    base_url: str = ""
    cors_bypass_enabled: bool = False
    custom_transport: Optional[CustomTransport] = None

    @field_validator("api_key", "base_url", mode="before")
    @classmethod
    def _strip(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value.strip() if isinstance(value, str) else value

    def is_complete(self) -> bool:
        """Return True when both ``api_key`` and ``base_url`` are non-empty."""
        return bool(self.api_key) and bool(self.base_url)

    @property
    def host(self) -> Optional[str]:
        """Hostname of ``base_url`` for logging, ``None`` when unparsable."""
        if not self.base_url:
            return None
        return urlparse(self.base_url).hostname

    @classmethod
    def from_env(cls, custom_transport: Optional[CustomTransport] = None, **overrides: Any) -> "ProviderConfig":
        """Build a config from the configuration layer (defaults, file, env, overrides)."""
        cfg = get_provider_config(OPENAI_COMPATIBLE_CONFIG_KEY, overrides or None)
        return cls(
            api_key=cfg["api_key"],
            base_url=cfg["base_url"],
            cors_bypass_enabled=cfg["cors_bypass"],
            custom_transport=custom_transport,
        )


__all__ = ["ProviderConfig", "CustomTransport"]
