"""
LLMOptions DTO carrying optional per-call configuration.

``stream`` may disagree with the request's own flag; the adapter decides which
one wins (see ``StreamingPolicy``).
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional


@dataclass(frozen=True)
class LLMOptions:
    """Optional per-call settings.

    Attributes:
        stream: Caller's streaming preference, ``None`` when unspecified.
        timeout: Per-call timeout hint in seconds forwarded to the SDK.
    """

    stream: Optional[bool] = None
    timeout: Optional[float] = None

    def with_stream(self, stream: bool) -> "LLMOptions":
        """Return a copy of these options with ``stream`` set to ``stream``."""
        if self.stream == stream:
            return self
        return replace(self, stream=stream)


__all__ = ["LLMOptions"]
