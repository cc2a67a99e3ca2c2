"""OpenAI-style exchange helpers and the default message exchange delegate."""

from .message_adapter import OpenAIMessageAdapter
from .style_helpers import build_create_params, to_llm_chunk, to_llm_response, wrap_sdk_error

__all__ = [
    "OpenAIMessageAdapter",
    "build_create_params",
    "to_llm_chunk",
    "to_llm_response",
    "wrap_sdk_error",
]
