"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports the single-class modules under
``compat_providers.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import LLMProvider, MessageExchange

__all__ = ["LLMProvider", "MessageExchange"]
