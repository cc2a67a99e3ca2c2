"""Backend signature detection and extra-parameter injection."""

from .registry import ALIBABA_QWEN, BackendRegistry, default_registry
from .signature import BackendSignature, ExtraParams, mode_params, url_matcher

__all__ = [
    "BackendSignature",
    "BackendRegistry",
    "ExtraParams",
    "ALIBABA_QWEN",
    "default_registry",
    "mode_params",
    "url_matcher",
]
