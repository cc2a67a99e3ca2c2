"""Pytest configuration and shared fakes for the providers test suite."""

from __future__ import annotations

from typing import Any, Iterator, List, Mapping, Optional

import pytest

from compat_providers.base.models import (
    ChunkChoice,
    LLMModel,
    LLMOptions,
    LLMRequest,
    LLMResponse,
    LLMResponseChunk,
    RequestMessage,
    ResponseChoice,
    ResponseDelta,
    ResponseMessage,
)
from compat_providers.config import reset_config_cache


class RecordingExchange:
    """MessageExchange double recording every call it receives."""

    def __init__(self, response: Optional[LLMResponse] = None, chunks: Optional[List[LLMResponseChunk]] = None) -> None:
        self.response = response or make_response("hello")
        self.chunks = chunks if chunks is not None else [make_chunk("hel"), make_chunk("lo", finish="stop")]
        self.calls: List[dict] = []
        self.error: Optional[Exception] = None

    @property
    def generate_calls(self) -> List[dict]:
        return [c for c in self.calls if c["op"] == "generate"]

    @property
    def stream_calls(self) -> List[dict]:
        return [c for c in self.calls if c["op"] == "stream"]

    def _record(self, op: str, client: Any, request: LLMRequest, options: Optional[LLMOptions], extra: Mapping[str, Any]) -> None:
        self.calls.append({"op": op, "client": client, "request": request, "options": options, "extra": dict(extra)})

    async def generate_response(self, client, request, options, extra_params):
        self._record("generate", client, request, options, extra_params)
        if self.error is not None:
            raise self.error
        return self.response

    async def stream_response(self, client, request, options, extra_params):
        self._record("stream", client, request, options, extra_params)
        if self.error is not None:
            raise self.error
        return self._iterate()

    async def _iterate(self):
        for chunk in self.chunks:
            yield chunk


def make_response(text: str, model: str = "m") -> LLMResponse:
    return LLMResponse(
        id="resp-1",
        model=model,
        created=1,
        choices=[ResponseChoice(finish_reason="stop", message=ResponseMessage(content=text))],
    )


def make_chunk(text: str, finish: Optional[str] = None, model: str = "m") -> LLMResponseChunk:
    return LLMResponseChunk(
        id="chunk",
        model=model,
        created=1,
        choices=[ChunkChoice(finish_reason=finish, delta=ResponseDelta(content=text))],
    )


@pytest.fixture()
def exchange() -> RecordingExchange:
    return RecordingExchange()


@pytest.fixture()
def llm_model() -> LLMModel:
    return LLMModel(id="qwen-plus", provider="openai-compatible", name="qwen-plus")


@pytest.fixture()
def request_nonstream() -> LLMRequest:
    return LLMRequest(model="qwen-plus", messages=[RequestMessage(role="user", content="hi")], stream=False)


@pytest.fixture()
def request_stream() -> LLMRequest:
    return LLMRequest(model="qwen-plus", messages=[RequestMessage(role="user", content="hi")], stream=True)


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Keep env/config-file state from leaking between tests."""
    for name in (
        "OPENAI_COMPATIBLE_API_KEY",
        "OPENAI_COMPATIBLE_BASE_URL",
        "OPENAI_COMPATIBLE_CORS_BYPASS",
        "PROVIDERS_CONFIG_FILE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "missing.env"))
    reset_config_cache()
    yield
    reset_config_cache()
