"""Unified provider error taxonomy public surface.

Re-exports the one-class-per-file implementations under
``compat_providers.base.errors_parts``. The streaming downgrade warning lives
here too since callers filter it alongside the error types.
"""

from .errors_parts import (
    ConfigurationError,
    ErrorCode,
    ProviderError,
    classify_exception,
    is_retryable,
)


class StreamingDowngradeWarning(UserWarning):
    """Streaming was requested but the call was served as a single result."""


__all__ = [
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "StreamingDowngradeWarning",
    "classify_exception",
    "is_retryable",
]
