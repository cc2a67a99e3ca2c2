"""Base shared constants for provider adapters.

Central location to avoid scattering user-facing strings across modules.
"""
from __future__ import annotations

# Provider key used in logs and error payloads.
OPENAI_COMPATIBLE_PROVIDER = "openai-compatible"

# Shown to the user when base URL or key is empty; must stay actionable.
MISSING_CONFIGURATION_ERROR = (
    "OpenAI Compatible base URL or API key is missing. Please set it in settings menu."
)

# Informational warning when CORS bypass forces a single-result exchange.
STREAMING_DOWNGRADE_WARNING = (
    "Streaming is not supported when CORS bypass is enabled. "
    "Falling back to non-streaming response."
)

__all__ = [
    "OPENAI_COMPATIBLE_PROVIDER",
    "MISSING_CONFIGURATION_ERROR",
    "STREAMING_DOWNGRADE_WARNING",
]
