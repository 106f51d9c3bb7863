"""Data models for scan results."""

from pydantic import BaseModel
from typing import Optional

from .alias import Alias
from .breach import Breach


class ScanResult(BaseModel):
    """Outcome of scanning one active alias."""
    alias: Alias
    breaches: list[Breach] = []
    deactivation_attempted: bool = False
    deactivated: bool = False
    error: Optional[str] = None

    @property
    def breach_count(self) -> int:
        return len(self.breaches)

    @property
    def compromised(self) -> bool:
        return self.breach_count > 0

    @property
    def lookup_failed(self) -> bool:
        # A failed lookup never reaches the deactivation step
        return self.error is not None and not self.deactivation_attempted


class ScanSummary(BaseModel):
    """Aggregate numbers for one scan run."""
    aliases_listed: int = 0
    aliases_scanned: int = 0
    compromised: int = 0
    deactivated: int = 0
    lookup_failures: int = 0
    deactivation_failures: int = 0
    scan_time_seconds: float = 0.0
    audit_log: list[str] = []
