"""Typed parameter objects exchanged at the package boundary."""

from .provider_config import CustomTransport, ProviderConfig

__all__ = ["ProviderConfig", "CustomTransport"]
