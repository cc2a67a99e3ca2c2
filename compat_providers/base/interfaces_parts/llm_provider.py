"""LLMProvider Protocol (single-class module).

Defines the uniform generation contract the rest of the application calls.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable

from ..models import LLMModel, LLMOptions, LLMRequest, LLMResponse
from ..streaming import ResponseStream


@runtime_checkable
class LLMProvider(Protocol):
    """Minimal interface for text-generation providers.

    Implementations raise ``ConfigurationError`` for missing configuration and
    let backend failures propagate; they never return error payloads in place
    of results.
    """

    async def generate_response(
        self,
        model: LLMModel,
        request: LLMRequest,
        options: Optional[LLMOptions] = None,
    ) -> LLMResponse:
        """Execute a single (non-streaming) chat completion."""
        ...

    async def stream_response(
        self,
        model: LLMModel,
        request: LLMRequest,
        options: Optional[LLMOptions] = None,
    ) -> ResponseStream:
        """Start a chat completion and return its response stream."""
        ...


__all__ = ["LLMProvider"]
