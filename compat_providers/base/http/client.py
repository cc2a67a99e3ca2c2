"""HTTP client construction for provider SDK clients.

Purpose:
    Build the ``httpx.AsyncClient`` handed to the ``openai`` SDK when a
    substitute transport is configured (CORS bypass). Without a substitute the
    SDK keeps its own default client.

External dependencies:
    - ``httpx`` for the async client and transport base class.

Timeout strategy:
    - Client timeouts derive from :func:`get_timeout_config`; no numeric
      literals live here.
"""

from __future__ import annotations

import inspect
from typing import Any, Awaitable, Callable, Optional, Union

import httpx

from ..timeouts import get_timeout_config

Fetch = Callable[[httpx.Request], Union[httpx.Response, Awaitable[httpx.Response]]]


class FetchTransport(httpx.AsyncBaseTransport):
    """Adapt a fetch-style callable to an httpx async transport.

    ``fetch`` receives the fully built ``httpx.Request`` and returns an
    ``httpx.Response``, synchronously or as an awaitable. Whatever the callable
    raises propagates to the SDK unchanged.
    """

    def __init__(self, fetch: Fetch) -> None:
        self._fetch = fetch

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        result = self._fetch(request)
        if inspect.isawaitable(result):
            result = await result
        if not isinstance(result, httpx.Response):
            raise TypeError(f"custom transport returned {type(result).__name__}, expected httpx.Response")
        return result


def build_timeout() -> httpx.Timeout:
    """Return the ``httpx.Timeout`` derived from the timeout configuration."""
    cfg = get_timeout_config()
    return httpx.Timeout(
        cfg.http_timeout_seconds,
        connect=cfg.connect_timeout_seconds,
        read=cfg.stream_timeout_seconds,
    )


def as_transport(custom: Union[httpx.AsyncBaseTransport, Fetch]) -> httpx.AsyncBaseTransport:
    """Return ``custom`` as an httpx transport, wrapping plain callables."""
    if isinstance(custom, httpx.AsyncBaseTransport):
        return custom
    if callable(custom):
        return FetchTransport(custom)
    raise TypeError(f"unsupported custom transport: {custom!r}")


def build_async_http_client(custom: Optional[Any] = None) -> Optional[httpx.AsyncClient]:
    """Return an ``httpx.AsyncClient`` routed through ``custom``, or ``None``.

    ``None`` means "use the SDK's default client".
    """
    if custom is None:
        return None
    return httpx.AsyncClient(transport=as_transport(custom), timeout=build_timeout())


__all__ = ["FetchTransport", "Fetch", "as_transport", "build_timeout", "build_async_http_client"]
