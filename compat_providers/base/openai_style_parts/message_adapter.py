"""OpenAIMessageAdapter: message exchange over an OpenAI-style async client.

Purpose:
- Perform the request/response and request/stream exchanges for provider
  adapters. The adapter supplies the client, the normalized request, options
  and backend extra params; this module owns the SDK call and the translation
  of results.

External dependencies:
- ``openai`` SDK exception hierarchy for error wrapping. The client itself is
  supplied by the caller (``openai.AsyncOpenAI`` or a structural equivalent).

Failure semantics:
- ``openai.OpenAIError`` (status, connection and timeout errors) is wrapped in
  ``ProviderError`` with a classified ``ErrorCode``. Other exceptions, and
  task cancellation, propagate as raised.

Timeout strategy:
- No timeouts are set here beyond forwarding ``LLMOptions.timeout`` to the SDK.
"""

from __future__ import annotations

import inspect
from typing import Any, AsyncIterator, Mapping, Optional

import openai

from ..constants import OPENAI_COMPATIBLE_PROVIDER
from ..logging import LogContext, get_logger, normalized_log_event
from ..models import LLMOptions, LLMRequest, LLMResponse, LLMResponseChunk
from .client_protocol import _AsyncChatCompletionsClient
from .style_helpers import build_create_params, to_llm_chunk, to_llm_response, wrap_sdk_error


class OpenAIMessageAdapter:
    """Default :class:`MessageExchange` for OpenAI-protocol backends."""

    def __init__(self, provider_name: str = OPENAI_COMPATIBLE_PROVIDER) -> None:
        self._provider_name = provider_name
        self._logger = get_logger("providers.exchange")

    async def generate_response(
        self,
        client: _AsyncChatCompletionsClient,
        request: LLMRequest,
        options: Optional[LLMOptions],
        extra_params: Mapping[str, Any],
    ) -> LLMResponse:
        """Send a non-streaming completion and return the converted result."""
        params = build_create_params(request, options, extra_params, stream=False)
        try:
            raw = await client.chat.completions.create(**params)
        except openai.OpenAIError as e:
            raise self._failed(e, request, phase="chat") from e
        return to_llm_response(raw)

    async def stream_response(
        self,
        client: _AsyncChatCompletionsClient,
        request: LLMRequest,
        options: Optional[LLMOptions],
        extra_params: Mapping[str, Any],
    ) -> AsyncIterator[LLMResponseChunk]:
        """Open a streaming completion and return an iterator over its chunks.

        The request is sent when this coroutine is awaited, so start-phase
        failures surface here rather than on first iteration.
        """
        params = build_create_params(request, options, extra_params, stream=True)
        try:
            sdk_stream = await client.chat.completions.create(**params)
        except openai.OpenAIError as e:
            raise self._failed(e, request, phase="start") from e
        return self._iterate(sdk_stream, request)

    async def _iterate(self, sdk_stream: Any, request: LLMRequest) -> AsyncIterator[LLMResponseChunk]:
        try:
            async for raw in sdk_stream:
                yield to_llm_chunk(raw)
        except openai.OpenAIError as e:
            raise self._failed(e, request, phase="stream") from e
        finally:
            close = getattr(sdk_stream, "aclose", None) or getattr(sdk_stream, "close", None)
            if close is not None:
                result = close()
                if inspect.isawaitable(result):
                    await result

    def _failed(self, exc: Exception, request: LLMRequest, *, phase: str):
        err = wrap_sdk_error(exc, provider_name=self._provider_name, model=request.model)
        normalized_log_event(
            self._logger,
            "exchange.error",
            LogContext(provider=self._provider_name, model=request.model),
            phase=phase,
            error_code=err.code.value,
            emitted=None,
            retryable=err.retryable,
        )
        return err


__all__ = ["OpenAIMessageAdapter"]
