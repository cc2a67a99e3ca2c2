"""Streaming primitives: the response stream contract and its two variants."""

from .direct_stream import DirectStream
from .response_stream import ResponseStream
from .single_value_stream import SingleValueStream

__all__ = ["ResponseStream", "DirectStream", "SingleValueStream"]
