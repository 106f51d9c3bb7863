from .alias import Alias, AnonAddyAlias
from .breach import Breach
from .results import ScanResult, ScanSummary

__all__ = [
    "Alias", "AnonAddyAlias",
    "Breach",
    "ScanResult", "ScanSummary",
]
