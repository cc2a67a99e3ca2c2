"""StreamingPolicy: one rule for when real streaming is available.

CORS bypass routes requests through a substitute transport that cannot carry an
incremental response, so every call under bypass is served as a single result.
Both adapter operations consult this policy; the downgrade (flag rewrite,
warning, log event) happens in one place.
"""
from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Optional, Tuple

from ..base.constants import STREAMING_DOWNGRADE_WARNING
from ..base.errors import StreamingDowngradeWarning
from ..base.logging import LogContext, normalized_log_event
from ..base.models import LLMOptions, LLMRequest


def wants_streaming(request: LLMRequest, options: Optional[LLMOptions]) -> bool:
    """Return True when either the request or the options ask for streaming."""
    return bool(request.stream or (options is not None and options.stream))


@dataclass(frozen=True)
class StreamingPolicy:
    """Streaming availability for one adapter configuration.

    Attributes:
        cors_bypass_enabled: When set, real streaming is never available.
    """

    cors_bypass_enabled: bool = False

    @property
    def streaming_available(self) -> bool:
        return not self.cors_bypass_enabled

    def effective_call(
        self,
        request: LLMRequest,
        options: Optional[LLMOptions],
        *,
        logger: logging.Logger,
        ctx: LogContext,
    ) -> Tuple[LLMRequest, Optional[LLMOptions]]:
        """Return the request/options to send for a single-result exchange.

        Without bypass the caller's objects are returned as-is. With bypass the
        stream flags are forced off, and a downgrade warning is emitted when the
        caller asked for streaming.
        """
        if self.streaming_available:
            return request, options
        if wants_streaming(request, options):
            self.warn_downgrade(logger=logger, ctx=ctx)
        return request.with_stream(False), (options.with_stream(False) if options is not None else None)

    def warn_downgrade(self, *, logger: logging.Logger, ctx: LogContext) -> None:
        """Emit the informational streaming-unavailable warning and log event."""
        warnings.warn(STREAMING_DOWNGRADE_WARNING, StreamingDowngradeWarning, stacklevel=2)
        normalized_log_event(
            logger,
            "stream.downgrade",
            ctx,
            phase="start",
            level=logging.WARNING,
            emitted=None,
            reason="cors_bypass",
        )


__all__ = ["StreamingPolicy", "wants_streaming"]
