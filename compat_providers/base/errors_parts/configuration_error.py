"""
Configuration error raised before any network access is attempted.
"""
from __future__ import annotations

from dataclasses import dataclass

from ..constants import MISSING_CONFIGURATION_ERROR
from .error_code import ErrorCode
from .provider_error import ProviderError


@dataclass
class ConfigurationError(ProviderError):
    """Backend URL or API key missing.

    Always surfaced to the caller and never retried. The default message tells
    the user where to fix it.
    """

    code: ErrorCode = ErrorCode.CONFIGURATION
    message: str = MISSING_CONFIGURATION_ERROR
    provider: str = "openai-compatible"

    def __str__(self) -> str:
        return self.message


__all__ = ["ConfigurationError"]
