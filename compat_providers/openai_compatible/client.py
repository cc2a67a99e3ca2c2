"""OpenAICompatibleProvider: adapter for any OpenAI-protocol backend.

The adapter owns the dispatch decisions only:

- configuration check (``ConfigurationError`` before any network access),
- streaming vs. single-result delivery under CORS bypass (``StreamingPolicy``),
- backend-specific extra params (``BackendRegistry``).

The protocol exchange itself is delegated to a ``MessageExchange``
(``OpenAIMessageAdapter`` by default). Delegate failures propagate unchanged;
this layer never retries.

The adapter keeps no per-call state: every decision is a function of the
immutable ``ProviderConfig`` and the call's (model, request, options).
"""

from __future__ import annotations

from typing import Any, Optional

from openai import AsyncOpenAI

from ..base.backends import BackendRegistry, ExtraParams, default_registry
from ..base.constants import OPENAI_COMPATIBLE_PROVIDER
from ..base.dto import CustomTransport, ProviderConfig
from ..base.errors import ConfigurationError
from ..base.http import build_async_http_client
from ..base.interfaces import LLMProvider, MessageExchange
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import LLMModel, LLMOptions, LLMRequest, LLMResponse
from ..base.openai_style_parts import OpenAIMessageAdapter
from ..base.streaming import DirectStream, ResponseStream, SingleValueStream
from .policy import StreamingPolicy


class OpenAICompatibleProvider(LLMProvider):
    """Uniform entry point for OpenAI-protocol-compatible backends.

    Parameters:
        api_key: Bearer credential.
        base_url: Backend endpoint; also used for backend-signature detection.
        cors_bypass_enabled: Serve every call as a single result through
            ``custom_transport``.
        custom_transport: Fetch-capable callable or httpx async transport,
            substituted into the SDK client only when bypass is enabled.
        exchange: Message exchange delegate; defaults to ``OpenAIMessageAdapter``.
        registry: Backend signature registry; defaults to the built-in one.
        client: Pre-built SDK client, mainly for tests and shared clients.
    """

    def __init__(
        self,
        api_key: str = "",
        base_url: str = "",
        cors_bypass_enabled: bool = False,
        custom_transport: Optional[CustomTransport] = None,
        *,
        exchange: Optional[MessageExchange] = None,
        registry: Optional[BackendRegistry] = None,
        client: Any = None,
    ) -> None:
        self._init(
            ProviderConfig(
                api_key=api_key,
                base_url=base_url,
                cors_bypass_enabled=cors_bypass_enabled,
                custom_transport=custom_transport,
            ),
            exchange=exchange,
            registry=registry,
            client=client,
        )

    @classmethod
    def from_config(
        cls,
        config: ProviderConfig,
        *,
        exchange: Optional[MessageExchange] = None,
        registry: Optional[BackendRegistry] = None,
        client: Any = None,
    ) -> "OpenAICompatibleProvider":
        """Create an adapter from an existing :class:`ProviderConfig`."""
        provider = cls.__new__(cls)
        provider._init(config, exchange=exchange, registry=registry, client=client)
        return provider

    @classmethod
    def from_env(cls, custom_transport: Optional[CustomTransport] = None, **kwargs: Any) -> "OpenAICompatibleProvider":
        """Create an adapter from defaults, config file and environment variables."""
        return cls.from_config(ProviderConfig.from_env(custom_transport=custom_transport), **kwargs)

    def _init(
        self,
        config: ProviderConfig,
        *,
        exchange: Optional[MessageExchange],
        registry: Optional[BackendRegistry],
        client: Any,
    ) -> None:
        self._config = config
        self._exchange: MessageExchange = exchange or OpenAIMessageAdapter()
        self._registry = registry or default_registry()
        self._policy = StreamingPolicy(cors_bypass_enabled=config.cors_bypass_enabled)
        self._logger = get_logger("providers.openai_compatible")
        self._client = client if client is not None else self._make_client()

    # ----- basic info -----
    @property
    def provider_name(self) -> str:
        return OPENAI_COMPATIBLE_PROVIDER

    @property
    def config(self) -> ProviderConfig:
        return self._config

    @property
    def backend(self) -> Optional[str]:
        """Name of the recognized backend signature for ``base_url``, if any."""
        return self._registry.identify(self._config.base_url)

    def supports_streaming(self) -> bool:
        """Return False when CORS bypass makes every call single-result."""
        return self._policy.streaming_available

    # ----- operations -----
    async def generate_response(
        self,
        model: LLMModel,
        request: LLMRequest,
        options: Optional[LLMOptions] = None,
    ) -> LLMResponse:
        """Run a single-result chat completion.

        Raises:
            ConfigurationError: ``base_url`` or ``api_key`` is empty.
        """
        self._check_config()
        ctx = self._ctx(model, request, mode="chat")
        request, options = self._policy.effective_call(request, options, logger=self._logger, ctx=ctx)
        extra = self._extra_params(streaming=False)
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            emitted=None,
            extra_params=sorted(extra) or None,
        )
        return await self._exchange.generate_response(self._client, request, options, extra)

    async def stream_response(
        self,
        model: LLMModel,
        request: LLMRequest,
        options: Optional[LLMOptions] = None,
    ) -> ResponseStream:
        """Start a chat completion and return its response stream.

        Under CORS bypass the call is served by :meth:`generate_response` and
        the result is wrapped in a :class:`SingleValueStream`; the delegate's
        streaming exchange is not used.

        Raises:
            ConfigurationError: ``base_url`` or ``api_key`` is empty.
        """
        self._check_config()
        ctx = self._ctx(model, request, mode="stream")
        if not self._policy.streaming_available:
            self._policy.warn_downgrade(logger=self._logger, ctx=ctx)
            response = await self.generate_response(
                model,
                request.with_stream(False),
                options.with_stream(False) if options is not None else None,
            )
            return SingleValueStream(response)

        extra = self._extra_params(streaming=True)
        normalized_log_event(
            self._logger,
            "stream.start",
            ctx,
            phase="start",
            emitted=None,
            extra_params=sorted(extra) or None,
        )
        source = await self._exchange.stream_response(self._client, request, options, extra)
        return DirectStream(source)

    # ----- helpers -----
    def _check_config(self) -> None:
        if not self._config.is_complete():
            raise ConfigurationError()

    def _extra_params(self, *, streaming: bool) -> ExtraParams:
        return self._registry.extra_params(self._config.base_url, streaming=streaming)

    def _ctx(self, model: LLMModel, request: LLMRequest, *, mode: str) -> LogContext:
        return LogContext(
            provider=self.provider_name,
            model=request.model or model.display_name,
            backend=self.backend or self._config.host,
            mode=mode,
        )

    def _make_client(self) -> Optional[AsyncOpenAI]:
        """Build the SDK client, or ``None`` while configuration is incomplete.

        The custom transport is used only under CORS bypass.
        """
        if not self._config.is_complete():
            return None
        http_client = (
            build_async_http_client(self._config.custom_transport)
            if self._config.cors_bypass_enabled
            else None
        )
        return AsyncOpenAI(
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            http_client=http_client,
        )


__all__ = ["OpenAICompatibleProvider"]
