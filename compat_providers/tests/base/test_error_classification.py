from __future__ import annotations

import asyncio

import pytest

from compat_providers.base.errors import ErrorCode, ProviderError, classify_exception, is_retryable


class _StatusError(Exception):
    def __init__(self, status_code: int) -> None:
        super().__init__(f"status {status_code}")
        self.status_code = status_code


@pytest.mark.parametrize(
    "exc,code",
    [
        (_StatusError(401), ErrorCode.AUTH),
        (_StatusError(404), ErrorCode.NOT_FOUND),
        (_StatusError(429), ErrorCode.RATE_LIMIT),
        (_StatusError(502), ErrorCode.TRANSIENT),
        (_StatusError(507), ErrorCode.SERVER_ERROR),
        (asyncio.TimeoutError(), ErrorCode.TIMEOUT),
        (Exception("Request timed out."), ErrorCode.TIMEOUT),
        (Exception("Connection error."), ErrorCode.TRANSIENT),
        (Exception("model does not exist"), ErrorCode.NOT_FOUND),
        (Exception("something odd"), ErrorCode.UNKNOWN),
    ],
)
def test_classify_exception(exc, code):
    assert classify_exception(exc) is code


def test_provider_error_passthrough():
    err = ProviderError(code=ErrorCode.AUTH, message="bad key", provider="openai-compatible")
    assert classify_exception(err) is ErrorCode.AUTH


def test_retryable_codes():
    assert is_retryable(ErrorCode.RATE_LIMIT)
    assert is_retryable(ErrorCode.TRANSIENT)
    assert not is_retryable(ErrorCode.AUTH)
    assert not is_retryable(ErrorCode.CONFIGURATION)
