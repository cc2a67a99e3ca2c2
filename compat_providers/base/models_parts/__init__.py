"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`compat_providers.base.models_parts` if needed, while `compat_providers.base.models`
remains the primary stable import path.
"""

from .llm_model import LLMModel
from .options import LLMOptions
from .request import LLMRequest, RequestMessage, Role
from .response import (
    ChunkChoice,
    LLMResponse,
    LLMResponseChunk,
    ResponseChoice,
    ResponseDelta,
    ResponseMessage,
    ResponseUsage,
)

__all__ = [
    "LLMModel",
    "LLMOptions",
    "LLMRequest",
    "RequestMessage",
    "Role",
    "LLMResponse",
    "LLMResponseChunk",
    "ResponseChoice",
    "ChunkChoice",
    "ResponseMessage",
    "ResponseDelta",
    "ResponseUsage",
]
