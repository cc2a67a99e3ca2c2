"""Protocol definition for OpenAI-style async chat completions clients.

Purpose:
- Describe the minimal client surface required by ``OpenAIMessageAdapter``
  without tying it to a concrete SDK class; ``openai.AsyncOpenAI`` conforms, and
  tests substitute ``types.SimpleNamespace`` fakes.
"""

from __future__ import annotations

from typing import Any, Protocol


class _AsyncChatCompletionsClient(Protocol):
    """Client exposing ``await chat.completions.create(**params)``.

    Returns a completion object (``choices[0].message``) or, with
    ``stream=True``, an async iterable of chunks (``choices[0].delta``).
    """

    class _ChatNS(Protocol):  # pragma: no cover - structural hint only
        class _CompletionsNS(Protocol):
            async def create(self, **params: Any) -> Any:  # noqa: D401 - SDK parity
                """Start a chat completion request (streaming or non-streaming)."""
                ...

        completions: _CompletionsNS

    chat: _ChatNS


__all__ = ["_AsyncChatCompletionsClient"]
