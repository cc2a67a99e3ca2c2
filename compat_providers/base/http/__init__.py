"""HTTP transport helpers for provider SDK clients."""

from .client import FetchTransport, as_transport, build_async_http_client, build_timeout

__all__ = ["FetchTransport", "as_transport", "build_async_http_client", "build_timeout"]
