"""ResponseStream: the streaming contract shared by every stream variant.

A response stream is a lazy, ordered, finite async iterator. It is consumed
once; after exhaustion or :meth:`aclose` further iteration stops immediately.
"""
from __future__ import annotations

from abc import abstractmethod
from typing import AsyncIterator, List, TypeVar

T = TypeVar("T")


class ResponseStream(AsyncIterator[T]):
    """Base class for response stream variants.

    Subclasses implement :meth:`_next` (raise ``StopAsyncIteration`` at the end)
    and may override :meth:`_close`.
    """

    #: True when chunks are produced incrementally by the backend.
    incremental: bool = True

    def __init__(self) -> None:
        self._closed = False

    def __aiter__(self) -> "ResponseStream[T]":
        return self

    async def __anext__(self) -> T:
        if self._closed:
            raise StopAsyncIteration
        try:
            return await self._next()
        except StopAsyncIteration:
            await self.aclose()
            raise

    @property
    def closed(self) -> bool:
        return self._closed

    async def aclose(self) -> None:
        """Stop the stream and release its source; safe to call repeatedly."""
        if self._closed:
            return
        self._closed = True
        await self._close()

    async def collect(self) -> List[T]:
        """Drain the remaining items into a list."""
        return [item async for item in self]

    @abstractmethod
    async def _next(self) -> T:
        ...

    async def _close(self) -> None:
        return None


__all__ = ["ResponseStream"]
