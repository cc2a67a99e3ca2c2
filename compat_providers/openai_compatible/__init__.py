"""OpenAI-protocol-compatible provider adapter."""

from .client import OpenAICompatibleProvider
from .policy import StreamingPolicy, wants_streaming

__all__ = ["OpenAICompatibleProvider", "StreamingPolicy", "wants_streaming"]
