"""Unit coverage for structured logging utilities."""

from __future__ import annotations

import io
import json
import logging

from compat_providers.base.log_support import JsonFormatter
from compat_providers.base.logging import LogContext, get_logger, log_event, normalized_log_event


def _capture(logger_name: str):
    base = get_logger()
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(JsonFormatter())
    base.addHandler(handler)
    return get_logger(logger_name), stream, lambda: base.removeHandler(handler)


def test_normalized_log_event_includes_required_keys():
    logger, stream, detach = _capture("providers.test.normalized")
    try:
        normalized_log_event(
            logger,
            "chat.start",
            LogContext(provider="openai-compatible", model="m", backend="alibaba-qwen", mode="chat"),
            phase="start",
            attempt=None,
            emitted=None,
            extra_params=["enable_thinking"],
        )
    finally:
        detach()
    payload = json.loads(stream.getvalue().strip().splitlines()[-1])
    for key in ("structured", "phase", "attempt", "emitted", "tokens"):
        assert key in payload
    assert "error_code" not in payload
    assert payload["event"] == "chat.start"
    assert payload["backend"] == "alibaba-qwen"
    assert payload["extra_params"] == ["enable_thinking"]
    assert payload["logger"] == "providers.test.normalized"


def test_log_event_drops_none_and_respects_level():
    logger, stream, detach = _capture("providers.test.level")
    try:
        log_event(logger, "stream.downgrade", None, level=logging.WARNING, reason="cors_bypass", extra=None)
    finally:
        detach()
    payload = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert payload["level"] == "WARNING"
    assert payload["reason"] == "cors_bypass"
    assert "extra" not in payload


def test_error_code_is_kept_when_present():
    logger, stream, detach = _capture("providers.test.error")
    try:
        normalized_log_event(logger, "exchange.error", None, phase="chat", error_code="rate_limit")
    finally:
        detach()
    payload = json.loads(stream.getvalue().strip().splitlines()[-1])
    assert payload["error_code"] == "rate_limit"


def test_log_context_to_dict_prunes_none_and_merges_extra():
    ctx = LogContext(provider="p", model=None, extra={"host": "h", "skip": None})
    assert ctx.to_dict() == {"provider": "p", "host": "h"}


def test_child_logger_propagates_to_base():
    child = get_logger("providers.test.child")
    assert child.propagate is True
    assert get_logger().propagate is False
