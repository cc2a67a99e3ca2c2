"""DirectStream: pass-through over a delegate's incremental stream."""
from __future__ import annotations

from typing import AsyncIterator, TypeVar

from .response_stream import ResponseStream

T = TypeVar("T")


class DirectStream(ResponseStream[T]):
    """Yield the source's items unmodified, pulling one per ``__anext__``.

    No buffering happens here; the source is advanced only when the consumer
    asks for the next item. Closing the stream closes the source when it
    supports ``aclose``.
    """

    incremental = True

    def __init__(self, source: AsyncIterator[T]) -> None:
        super().__init__()
        self._source = source.__aiter__()

    async def _next(self) -> T:
        return await self._source.__anext__()

    async def _close(self) -> None:
        aclose = getattr(self._source, "aclose", None)
        if aclose is not None:
            await aclose()


__all__ = ["DirectStream"]
