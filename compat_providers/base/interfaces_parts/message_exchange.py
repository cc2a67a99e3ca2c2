"""MessageExchange Protocol (single-class module).

The delegate performing the actual protocol exchange for a provider adapter.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Mapping, Optional, Protocol, runtime_checkable

from ..models import LLMOptions, LLMRequest, LLMResponse, LLMResponseChunk


@runtime_checkable
class MessageExchange(Protocol):
    """Request/response and request/stream exchange over a configured client.

    ``extra_params`` holds backend-specific fields to merge into the request
    body. Implementations must not buffer streamed chunks ahead of the
    consumer.
    """

    async def generate_response(
        self,
        client: Any,
        request: LLMRequest,
        options: Optional[LLMOptions],
        extra_params: Mapping[str, Any],
    ) -> LLMResponse:
        ...

    async def stream_response(
        self,
        client: Any,
        request: LLMRequest,
        options: Optional[LLMOptions],
        extra_params: Mapping[str, Any],
    ) -> AsyncIterator[LLMResponseChunk]:
        ...


__all__ = ["MessageExchange"]
