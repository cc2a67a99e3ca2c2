"""SingleValueStream: one already-completed value presented as a stream."""
from __future__ import annotations

from typing import TypeVar

from .response_stream import ResponseStream

T = TypeVar("T")


class SingleValueStream(ResponseStream[T]):
    """Yield exactly one value, then terminate.

    Used when streaming is unavailable and a single result is delivered to a
    consumer written against the streaming contract.
    """

    incremental = False

    def __init__(self, value: T) -> None:
        super().__init__()
        self._value = value
        self._consumed = False

    async def _next(self) -> T:
        if self._consumed:
            raise StopAsyncIteration
        self._consumed = True
        return self._value


__all__ = ["SingleValueStream"]
