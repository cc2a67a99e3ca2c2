"""compat_providers.config.defaults
================================

Small, stable default values used across the package. Environment variables or
an external config file override them (see ``compat_providers.config``).

Only plain constants live here so any module can import them without cycles.
"""

from __future__ import annotations

# Provider section name used by the configuration layer and env prefix.
OPENAI_COMPATIBLE_CONFIG_KEY = "openai_compatible"

# An empty base URL is a configuration error, not a fallback to api.openai.com.
OPENAI_COMPATIBLE_DEFAULT_BASE_URL = ""
OPENAI_COMPATIBLE_DEFAULT_CORS_BYPASS = False

# ---- Known backend signatures ----
# Alibaba Cloud DashScope (Qwen) OpenAI-compatible endpoint.
ALIBABA_QWEN_BASE_URL = "https://dashscope.aliyuncs.com/compatible-mode/v1"
ALIBABA_QWEN_HOST_PATTERN = "dashscope.aliyuncs.com"


__all__ = [
    "OPENAI_COMPATIBLE_CONFIG_KEY",
    "OPENAI_COMPATIBLE_DEFAULT_BASE_URL",
    "OPENAI_COMPATIBLE_DEFAULT_CORS_BYPASS",
    "ALIBABA_QWEN_BASE_URL",
    "ALIBABA_QWEN_HOST_PATTERN",
]
