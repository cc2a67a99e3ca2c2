"""
OpenAI-shaped response DTOs for non-streaming results and streaming chunks.

These mirror the chat-completion payload closely enough for chat UIs (content,
optional reasoning text, finish reason, usage) without depending on SDK types.
The provider adapter never inspects them; only the message exchange delegate
builds them.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ResponseUsage:
    """Token accounting reported by the backend."""

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


@dataclass(frozen=True)
class ResponseMessage:
    """Assistant message of a completed (non-streaming) choice.

    Attributes:
        role: Message role, normally ``"assistant"``.
        content: Completion text, ``None`` when the backend returned none.
        reasoning: Reasoning text for backends exposing ``reasoning_content``.
    """

    role: str = "assistant"
    content: Optional[str] = None
    reasoning: Optional[str] = None


@dataclass(frozen=True)
class ResponseDelta:
    """Incremental message fragment carried by a streaming chunk."""

    role: Optional[str] = None
    content: Optional[str] = None
    reasoning: Optional[str] = None


@dataclass(frozen=True)
class ResponseChoice:
    finish_reason: Optional[str]
    message: ResponseMessage


@dataclass(frozen=True)
class ChunkChoice:
    finish_reason: Optional[str]
    delta: ResponseDelta


@dataclass(frozen=True)
class LLMResponse:
    """Completed chat-completion response (non-streaming).

    Attributes:
        id: Backend response identifier.
        model: Model name reported by the backend.
        created: Unix timestamp of creation.
        choices: Completed choices; most callers read ``choices[0]``.
        usage: Optional token usage.
        object: Payload kind, ``"chat.completion"``.
    """

    id: str
    model: str
    created: int
    choices: List[ResponseChoice] = field(default_factory=list)
    usage: Optional[ResponseUsage] = None
    object: str = "chat.completion"

    @property
    def text(self) -> Optional[str]:
        """Return the first choice's content, or ``None`` when absent."""
        if not self.choices:
            return None
        return self.choices[0].message.content

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class LLMResponseChunk:
    """One partial response emitted by a streaming exchange."""

    id: str
    model: str
    created: int
    choices: List[ChunkChoice] = field(default_factory=list)
    usage: Optional[ResponseUsage] = None
    object: str = "chat.completion.chunk"

    @property
    def delta_text(self) -> Optional[str]:
        """Return the first choice's delta content, or ``None`` when absent."""
        if not self.choices:
            return None
        return self.choices[0].delta.content

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = [
    "ResponseUsage",
    "ResponseMessage",
    "ResponseDelta",
    "ResponseChoice",
    "ChunkChoice",
    "LLMResponse",
    "LLMResponseChunk",
]
