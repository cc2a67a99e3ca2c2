"""
Helper utilities translating between our DTOs and OpenAI-style SDK objects.

Purpose:
- Build ``chat.completions.create`` keyword arguments from an ``LLMRequest``,
  the call options, and backend extra params.
- Convert SDK completion and chunk objects into ``LLMResponse`` /
  ``LLMResponseChunk`` using narrow attribute access so that any object with
  the OpenAI shape (SDK model, fake, proxy payload) is accepted.
- Wrap SDK failures in ``ProviderError``.

No network I/O happens here.
"""

from __future__ import annotations

import typing as _t

from ..errors import ProviderError, classify_exception, is_retryable
from ..models import (
    ChunkChoice,
    LLMOptions,
    LLMRequest,
    LLMResponse,
    LLMResponseChunk,
    ResponseChoice,
    ResponseDelta,
    ResponseMessage,
    ResponseUsage,
)


def build_create_params(
    request: LLMRequest,
    options: _t.Optional[LLMOptions],
    extra_params: _t.Mapping[str, _t.Any],
    *,
    stream: bool,
) -> dict:
    """Assemble keyword arguments for ``client.chat.completions.create``.

    ``stream`` is passed explicitly by the caller so the exchange decides the
    wire mode, not the request's flag. Extra params travel as ``extra_body`` so
    the SDK merges them into the JSON body untouched.
    """
    params = request.to_params()
    params["stream"] = stream
    if extra_params:
        params["extra_body"] = dict(extra_params)
    if options is not None and options.timeout is not None:
        params["timeout"] = float(options.timeout)
    return params


def _usage(raw: _t.Any) -> _t.Optional[ResponseUsage]:
    usage = getattr(raw, "usage", None)
    if usage is None:
        return None
    return ResponseUsage(
        prompt_tokens=int(getattr(usage, "prompt_tokens", 0) or 0),
        completion_tokens=int(getattr(usage, "completion_tokens", 0) or 0),
        total_tokens=int(getattr(usage, "total_tokens", 0) or 0),
    )


def _reasoning(obj: _t.Any) -> _t.Optional[str]:
    """Return ``reasoning_content`` (DashScope, DeepSeek) or ``reasoning`` when present."""
    for attr in ("reasoning_content", "reasoning"):
        value = getattr(obj, attr, None)
        if isinstance(value, str):
            return value
    return None


def to_llm_response(raw: _t.Any) -> LLMResponse:
    """Convert an OpenAI-style completion object into an :class:`LLMResponse`."""
    choices = []
    for choice in getattr(raw, "choices", None) or []:
        message = getattr(choice, "message", None)
        choices.append(
            ResponseChoice(
                finish_reason=getattr(choice, "finish_reason", None),
                message=ResponseMessage(
                    role=getattr(message, "role", None) or "assistant",
                    content=getattr(message, "content", None),
                    reasoning=_reasoning(message),
                ),
            )
        )
    return LLMResponse(
        id=str(getattr(raw, "id", "") or ""),
        model=str(getattr(raw, "model", "") or ""),
        created=int(getattr(raw, "created", 0) or 0),
        choices=choices,
        usage=_usage(raw),
    )


def to_llm_chunk(raw: _t.Any) -> LLMResponseChunk:
    """Convert an OpenAI-style streaming chunk into an :class:`LLMResponseChunk`."""
    choices = []
    for choice in getattr(raw, "choices", None) or []:
        delta = getattr(choice, "delta", None)
        choices.append(
            ChunkChoice(
                finish_reason=getattr(choice, "finish_reason", None),
                delta=ResponseDelta(
                    role=getattr(delta, "role", None),
                    content=getattr(delta, "content", None),
                    reasoning=_reasoning(delta),
                ),
            )
        )
    return LLMResponseChunk(
        id=str(getattr(raw, "id", "") or ""),
        model=str(getattr(raw, "model", "") or ""),
        created=int(getattr(raw, "created", 0) or 0),
        choices=choices,
        usage=_usage(raw),
    )


def wrap_sdk_error(exc: Exception, *, provider_name: str, model: str) -> ProviderError:
    """Classify ``exc`` and return it wrapped in a :class:`ProviderError`."""
    if isinstance(exc, ProviderError):
        return exc
    code = classify_exception(exc)
    return ProviderError(
        code=code,
        message=str(exc),
        provider=provider_name,
        model=model,
        retryable=is_retryable(code),
        raw=exc,
    )


__all__ = [
    "build_create_params",
    "to_llm_response",
    "to_llm_chunk",
    "wrap_sdk_error",
]
