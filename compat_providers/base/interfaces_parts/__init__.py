"""Single-class interface modules re-exported for convenience."""

from .llm_provider import LLMProvider
from .message_exchange import MessageExchange

__all__ = ["LLMProvider", "MessageExchange"]
