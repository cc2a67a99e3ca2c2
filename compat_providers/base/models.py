"""
Backend-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``compat_providers.base.models_parts`` to keep a single stable import path.
"""

from .models_parts import (
    ChunkChoice,
    LLMModel,
    LLMOptions,
    LLMRequest,
    LLMResponse,
    LLMResponseChunk,
    RequestMessage,
    ResponseChoice,
    ResponseDelta,
    ResponseMessage,
    ResponseUsage,
    Role,
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
