"""Provider registry."""

from .base import AliasService, BreachLookup
from .anonaddy import AnonAddy
from .hibp import HIBP

__all__ = [
    "AliasService",
    "BreachLookup",
    "AnonAddy",
    "HIBP",
]
