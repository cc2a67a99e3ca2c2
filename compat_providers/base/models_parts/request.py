"""
LLMRequest DTO for backend-agnostic chat-completion calls.

The request is an immutable value; adapters that need a different stream flag
derive a copy with :meth:`LLMRequest.with_stream` rather than mutating the
caller's instance.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Literal, Optional


# Message roles accepted by OpenAI-protocol backends.
Role = Literal["system", "user", "assistant", "tool"]


@dataclass(frozen=True)
class RequestMessage:
    """A single chat message in a request.

    Attributes:
        role: Author role of the message.
        content: Plain text content.
    """

    role: Role
    content: str

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


@dataclass(frozen=True)
class LLMRequest:
    """Normalized chat-completion request.

    Attributes:
        model: Model identifier sent to the backend.
        messages: Ordered chat messages.
        stream: ``True`` for the streaming request shape, ``False`` otherwise.
        temperature: Optional sampling temperature.
        top_p: Optional nucleus sampling value.
        max_tokens: Optional completion token cap.
        presence_penalty: Optional presence penalty.
        frequency_penalty: Optional frequency penalty.

    Methods:
        with_stream: Return a copy with the stream flag replaced.
        to_params: Return OpenAI-style keyword arguments for the request body.
    """

    model: str
    messages: List[RequestMessage] = field(default_factory=list)
    stream: bool = False
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    max_tokens: Optional[int] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None

    def with_stream(self, stream: bool) -> "LLMRequest":
        """Return a copy of this request with ``stream`` set to ``stream``."""
        if self.stream == stream:
            return self
        return replace(self, stream=stream)

    def to_params(self) -> Dict[str, Any]:
        """Return request body parameters, omitting unset sampling fields."""
        params: Dict[str, Any] = {
            "model": self.model,
            "messages": [m.to_dict() for m in self.messages],
            "stream": self.stream,
        }
        for name in ("temperature", "top_p", "max_tokens", "presence_penalty", "frequency_penalty"):
            value = getattr(self, name)
            if value is not None:
                params[name] = value
        return params


__all__ = ["LLMRequest", "RequestMessage", "Role"]
