"""
LLMModel DTO identifying the model a caller selected.

The adapter treats this as descriptive context (logging, diagnostics). The
model string actually sent on the wire travels inside ``LLMRequest.model``.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LLMModel:
    """Caller-selected model descriptor.

    Attributes:
        id: Stable identifier of the model entry in the host application.
        provider: Provider key the entry belongs to (e.g. ``"openai-compatible"``).
        name: Optional model name as known by the backend.
    """

    id: str
    provider: str
    name: Optional[str] = None

    @property
    def display_name(self) -> str:
        """Return ``name`` when present, otherwise ``id``."""
        return self.name or self.id


__all__ = ["LLMModel"]
