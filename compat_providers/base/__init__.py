"""Shared building blocks for provider adapters.

Models, errors, logging, backend signatures, response streams and the
OpenAI-style message exchange. Concrete adapters live in sibling packages
(e.g. ``compat_providers.openai_compatible``).
"""

from .backends import BackendRegistry, BackendSignature, default_registry
from .dto import ProviderConfig
from .errors import ConfigurationError, ErrorCode, ProviderError, StreamingDowngradeWarning
from .interfaces import LLMProvider, MessageExchange
from .models import LLMModel, LLMOptions, LLMRequest, LLMResponse, LLMResponseChunk, RequestMessage
from .streaming import DirectStream, ResponseStream, SingleValueStream

__all__ = [
    "BackendRegistry",
    "BackendSignature",
    "default_registry",
    "ProviderConfig",
    "ConfigurationError",
    "ErrorCode",
    "ProviderError",
    "StreamingDowngradeWarning",
    "LLMProvider",
    "MessageExchange",
    "LLMModel",
    "LLMOptions",
    "LLMRequest",
    "LLMResponse",
    "LLMResponseChunk",
    "RequestMessage",
    "ResponseStream",
    "DirectStream",
    "SingleValueStream",
]
