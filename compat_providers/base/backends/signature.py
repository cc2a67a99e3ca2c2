"""BackendSignature: one known backend and the extra params it needs.

A signature pairs a base-URL predicate with a function producing extra request
parameters for a call mode. Signatures are plain values; the registry decides
evaluation order.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Mapping, Optional

ExtraParams = Dict[str, Any]

# (streaming) -> extra params for that mode.
ExtraParamsFn = Callable[[bool], Mapping[str, Any]]
# (base_url) -> whether the signature applies.
Matcher = Callable[[str], bool]


def url_matcher(exact: Iterable[str] = (), contains: Iterable[str] = ()) -> Matcher:
    """Build a matcher accepting exact base URLs or URLs containing a host pattern.

    Comparison ignores a trailing slash on the exact URLs.
    """
    exact_set = frozenset(u.rstrip("/") for u in exact)
    patterns = tuple(contains)

    def _matches(base_url: str) -> bool:
        if not base_url:
            return False
        if base_url.rstrip("/") in exact_set:
            return True
        return any(p in base_url for p in patterns)

    return _matches


def mode_params(*, non_streaming: Optional[Mapping[str, Any]] = None, streaming: Optional[Mapping[str, Any]] = None) -> ExtraParamsFn:
    """Build an extra-params function from fixed per-mode mappings."""
    ns = dict(non_streaming or {})
    st = dict(streaming or {})

    def _params(is_streaming: bool) -> Mapping[str, Any]:
        return st if is_streaming else ns

    return _params


@dataclass(frozen=True)
class BackendSignature:
    """A recognized OpenAI-compatible backend with nonstandard behavior.

    Attributes:
        name: Stable identifier used in logs (e.g. ``"alibaba-qwen"``).
        matches: Predicate over the configured base URL.
        extra_params: Function of the call mode returning params to inject.
        priority: Lower values are evaluated first and win key conflicts.
    """

    name: str
    matches: Matcher
    extra_params: ExtraParamsFn
    priority: int = 100

    def params_for(self, streaming: bool) -> ExtraParams:
        """Return a fresh dict of extra params for the given mode."""
        return dict(self.extra_params(streaming))


__all__ = [
    "BackendSignature",
    "ExtraParams",
    "ExtraParamsFn",
    "Matcher",
    "url_matcher",
    "mode_params",
]
