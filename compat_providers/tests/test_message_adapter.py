"""OpenAIMessageAdapter against fake SDK clients.

Covers:
- Request parameter assembly (extra params as ``extra_body``, timeout).
- Conversion of completion objects and chunks.
- Wrapping of SDK errors into ``ProviderError``.
"""

from __future__ import annotations

import types

import httpx
import openai
import pytest

from compat_providers.base.errors import ErrorCode, ProviderError
from compat_providers.base.models import LLMOptions, LLMRequest, RequestMessage
from compat_providers.base.openai_style_parts import OpenAIMessageAdapter, build_create_params


def _ns(**kw):
    return types.SimpleNamespace(**kw)


def _completion(text, reasoning=None):
    message = _ns(role="assistant", content=text, reasoning_content=reasoning)
    return _ns(
        id="c1",
        model="qwen-plus",
        created=7,
        choices=[_ns(finish_reason="stop", message=message)],
        usage=_ns(prompt_tokens=3, completion_tokens=2, total_tokens=5),
    )


def _chunk(text, finish=None):
    return _ns(id="k", model="qwen-plus", created=7, choices=[_ns(finish_reason=finish, delta=_ns(role=None, content=text))], usage=None)


class _FakeSDKStream:
    def __init__(self, chunks):
        self._chunks = list(chunks)
        self.closed = False

    def __aiter__(self):
        return self._gen()

    async def _gen(self):
        for c in self._chunks:
            yield c

    async def close(self):
        self.closed = True


class _FakeClient:
    def __init__(self, result=None, error=None):
        self.params = []
        self._result = result
        self._error = error
        self.chat = _ns(completions=_ns(create=self._create))

    async def _create(self, **params):
        self.params.append(params)
        if self._error is not None:
            raise self._error
        return self._result


def _request(stream=False):
    return LLMRequest(model="qwen-plus", messages=[RequestMessage(role="user", content="hi")], stream=stream, temperature=0.2)


def _status_error(status):
    req = httpx.Request("POST", "https://api.example.com/v1/chat/completions")
    resp = httpx.Response(status, request=req)
    return openai.APIStatusError("backend said no", response=resp, body=None)


def test_build_create_params_uses_explicit_mode_and_extra_body():
    params = build_create_params(_request(stream=True), LLMOptions(timeout=12), {"enable_thinking": False}, stream=False)
    assert params["stream"] is False
    assert params["extra_body"] == {"enable_thinking": False}
    assert params["timeout"] == 12.0
    assert params["temperature"] == 0.2
    assert "max_tokens" not in params
    assert params["messages"] == [{"role": "user", "content": "hi"}]


def test_build_create_params_omits_empty_extras():
    params = build_create_params(_request(), None, {}, stream=True)
    assert "extra_body" not in params
    assert "timeout" not in params
    assert params["stream"] is True


@pytest.mark.asyncio
async def test_generate_response_converts_completion():
    client = _FakeClient(result=_completion("hello", reasoning="thinking..."))
    out = await OpenAIMessageAdapter().generate_response(client, _request(), None, {"enable_thinking": False})

    assert out.text == "hello"
    assert out.choices[0].message.reasoning == "thinking..."
    assert out.usage.total_tokens == 5
    assert client.params[0]["extra_body"] == {"enable_thinking": False}
    assert client.params[0]["stream"] is False


@pytest.mark.asyncio
async def test_stream_response_yields_converted_chunks_and_closes_sdk_stream():
    sdk_stream = _FakeSDKStream([_chunk("hel"), _chunk("lo", finish="stop")])
    client = _FakeClient(result=sdk_stream)

    it = await OpenAIMessageAdapter().stream_response(client, _request(stream=True), None, {})
    chunks = [c async for c in it]

    assert [c.delta_text for c in chunks] == ["hel", "lo"]
    assert chunks[-1].choices[0].finish_reason == "stop"
    assert client.params[0]["stream"] is True
    assert sdk_stream.closed


@pytest.mark.asyncio
@pytest.mark.parametrize("status,code", [(401, ErrorCode.AUTH), (429, ErrorCode.RATE_LIMIT), (503, ErrorCode.UNAVAILABLE), (599, ErrorCode.SERVER_ERROR)])
async def test_sdk_status_errors_are_classified(status, code):
    client = _FakeClient(error=_status_error(status))
    with pytest.raises(ProviderError) as info:
        await OpenAIMessageAdapter().generate_response(client, _request(), None, {})
    assert info.value.code is code
    assert info.value.model == "qwen-plus"
    assert isinstance(info.value.raw, openai.APIStatusError)


@pytest.mark.asyncio
async def test_stream_start_errors_raise_on_await():
    client = _FakeClient(error=_status_error(429))
    with pytest.raises(ProviderError) as info:
        await OpenAIMessageAdapter().stream_response(client, _request(stream=True), None, {})
    assert info.value.retryable is True


@pytest.mark.asyncio
async def test_non_sdk_errors_propagate_as_raised():
    client = _FakeClient(error=KeyError("bug"))
    with pytest.raises(KeyError):
        await OpenAIMessageAdapter().generate_response(client, _request(), None, {})
