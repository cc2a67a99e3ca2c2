"""compat_providers.config.env
===========================

Environment helpers shared by the configuration layer.

- ``is_placeholder`` recognizes template values (``changeme``, ``<your-key>``)
  that must not count as configured credentials.
- ``parse_bool`` reads boolean flags from env/config strings.

Helpers never raise on unset or malformed values; callers decide the fallback.
"""

from __future__ import annotations

from typing import Any, Optional

_PLACEHOLDER_MARKERS = ("placeholder", "changeme", "change_me", "your_", "your-", "<", "xxx")

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off", ""})


def is_placeholder(value: Optional[str]) -> bool:
    """Return True when ``value`` looks like a template value rather than a real one."""
    if value is None:
        return False
    lowered = value.strip().lower()
    return any(marker in lowered for marker in _PLACEHOLDER_MARKERS)


def parse_bool(value: Any, default: bool = False) -> bool:
    """Interpret ``value`` as a boolean flag.

    Booleans pass through; strings are matched against common spellings;
    anything else yields ``default``.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    return default


__all__ = ["is_placeholder", "parse_bool"]
