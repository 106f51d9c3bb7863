"""Breach scanner package."""

from .errors import (
    ScanError,
    TransportError,
    DecodeError,
    ProviderError,
    BreachLookupError,
    OrchestratorError,
    ConfigError,
)
from .orchestrator import ScanOrchestrator
from .providers import AliasService, BreachLookup, AnonAddy, HIBP

__all__ = [
    "ScanError",
    "TransportError",
    "DecodeError",
    "ProviderError",
    "BreachLookupError",
    "OrchestratorError",
    "ConfigError",
    "ScanOrchestrator",
    "AliasService",
    "BreachLookup",
    "AnonAddy",
    "HIBP",
]
