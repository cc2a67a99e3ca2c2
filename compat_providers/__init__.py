"""compat_providers package

One adapter for any OpenAI-protocol-compatible text-generation backend.

Public API (re-exported):
    - Version: ``__version__``
    - Adapter: :class:`OpenAICompatibleProvider`
    - Configuration: :class:`ProviderConfig`
    - Requests/results: :class:`LLMModel`, :class:`LLMRequest`,
      :class:`LLMOptions`, :class:`LLMResponse`, :class:`LLMResponseChunk`
    - Streams: :class:`ResponseStream`, :class:`DirectStream`,
      :class:`SingleValueStream`
    - Errors: :class:`ProviderError`, :class:`ConfigurationError`,
      :class:`ErrorCode`, :class:`StreamingDowngradeWarning`
    - Backend quirks: :class:`BackendRegistry`, :class:`BackendSignature`

Example::

    provider = OpenAICompatibleProvider(api_key="sk-...", base_url="https://host/v1")
    stream = await provider.stream_response(model, LLMRequest(model="m", messages=[...], stream=True))
    async for chunk in stream:
        ...
"""

from .base import (
    BackendRegistry,
    BackendSignature,
    ConfigurationError,
    DirectStream,
    ErrorCode,
    LLMModel,
    LLMOptions,
    LLMProvider,
    LLMRequest,
    LLMResponse,
    LLMResponseChunk,
    MessageExchange,
    ProviderConfig,
    ProviderError,
    RequestMessage,
    ResponseStream,
    SingleValueStream,
    StreamingDowngradeWarning,
    default_registry,
)
from .openai_compatible import OpenAICompatibleProvider

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "OpenAICompatibleProvider",
    "ProviderConfig",
    "LLMProvider",
    "MessageExchange",
    "LLMModel",
    "LLMRequest",
    "LLMOptions",
    "LLMResponse",
    "LLMResponseChunk",
    "RequestMessage",
    "ResponseStream",
    "DirectStream",
    "SingleValueStream",
    "ProviderError",
    "ConfigurationError",
    "ErrorCode",
    "StreamingDowngradeWarning",
    "BackendRegistry",
    "BackendSignature",
    "default_registry",
]
