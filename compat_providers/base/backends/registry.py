"""Ordered registry of backend signatures.

Evaluation order is ascending ``priority``, ties broken by registration order.
Every matching signature contributes its params; when two signatures set the
same key, the one evaluated first wins. The adapter only calls
:meth:`BackendRegistry.extra_params`, so adding a backend never touches its
dispatch logic.
"""
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from ...config.defaults import ALIBABA_QWEN_BASE_URL, ALIBABA_QWEN_HOST_PATTERN
from .signature import BackendSignature, ExtraParams, mode_params, url_matcher


class BackendRegistry:
    """Mutable collection of :class:`BackendSignature` entries."""

    def __init__(self, signatures: Optional[List[BackendSignature]] = None) -> None:
        self._entries: Dict[str, Tuple[int, BackendSignature]] = {}
        self._counter = 0
        for sig in signatures or ():
            self.register(sig)

    def register(self, signature: BackendSignature, *, replace: bool = False) -> None:
        """Add ``signature``; raise ``ValueError`` on a duplicate name unless ``replace``."""
        if signature.name in self._entries and not replace:
            raise ValueError(f"backend signature '{signature.name}' already registered")
        seq = self._entries[signature.name][0] if signature.name in self._entries else self._next_seq()
        self._entries[signature.name] = (seq, signature)

    def unregister(self, name: str) -> None:
        """Remove the signature called ``name`` if present."""
        self._entries.pop(name, None)

    def signatures(self) -> List[BackendSignature]:
        """Return signatures in evaluation order."""
        ordered = sorted(self._entries.values(), key=lambda e: (e[1].priority, e[0]))
        return [sig for _, sig in ordered]

    def match(self, base_url: str) -> List[BackendSignature]:
        """Return every signature matching ``base_url``, in evaluation order."""
        return [sig for sig in self.signatures() if sig.matches(base_url)]

    def identify(self, base_url: str) -> Optional[str]:
        """Return the name of the first matching signature, if any."""
        matched = self.match(base_url)
        return matched[0].name if matched else None

    def extra_params(self, base_url: str, *, streaming: bool) -> ExtraParams:
        """Compute the extra request params for ``base_url`` in the given mode."""
        params: ExtraParams = {}
        for sig in self.match(base_url):
            for key, value in sig.params_for(streaming).items():
                params.setdefault(key, value)
        return params

    def copy(self) -> "BackendRegistry":
        return BackendRegistry(self.signatures())

    def _next_seq(self) -> int:
        self._counter += 1
        return self._counter


# Qwen models on DashScope default to "thinking" output, which the
# non-streaming endpoint rejects unless it is switched off.
ALIBABA_QWEN = BackendSignature(
    name="alibaba-qwen",
    matches=url_matcher(exact=(ALIBABA_QWEN_BASE_URL,), contains=(ALIBABA_QWEN_HOST_PATTERN,)),
    extra_params=mode_params(non_streaming={"enable_thinking": False}),
    priority=10,
)


def default_registry() -> BackendRegistry:
    """Return a new registry holding the built-in backend signatures."""
    return BackendRegistry([ALIBABA_QWEN])


__all__ = ["BackendRegistry", "ALIBABA_QWEN", "default_registry"]
