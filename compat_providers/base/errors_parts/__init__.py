"""Errors parts package public surface.

Prefer importing from `compat_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .configuration_error import ConfigurationError
from .classification import classify_exception, is_retryable

__all__ = ["ErrorCode", "ProviderError", "ConfigurationError", "classify_exception", "is_retryable"]
