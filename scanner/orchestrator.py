"""Orchestrator runs one breach scan over every active alias."""

import logging
import time
from datetime import datetime, timezone
from typing import Callable

from models import Alias, ScanResult, ScanSummary
from .errors import OrchestratorError, ScanError
from .providers import AliasService, BreachLookup

logger = logging.getLogger(__name__)

_LEVELS = {
    "INFO": logging.INFO,
    "SUCCESS": logging.INFO,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}


class ScanOrchestrator:
    """
    Coordinates one sequential scan.

    Flow:
    1. List every alias once (failure aborts the run)
    2. Skip inactive aliases
    3. Look up breaches for each active alias, in listing order
    4. Deactivate any alias with at least one breach

    A failed lookup or deactivation is recorded on that alias's result
    and the scan moves on to the next alias.
    """

    def __init__(self):
        self.audit_log: list[str] = []
        self.results: list[ScanResult] = []
        self.aliases_listed: int = 0
        self.start_time: float = 0
        self.end_time: float = 0

    def _log(self, message: str, level: str = "INFO"):
        """Add timestamped audit log entry."""
        timestamp = datetime.now(timezone.utc).strftime("%H:%M:%S")
        self.audit_log.append(f"[{timestamp}] [{level}] {message}")
        logger.log(_LEVELS.get(level, logging.INFO), message)

    @staticmethod
    def mask_email(email: str) -> str:
        """Mask email for display."""
        if '@' not in email:
            return "***@***"
        local, domain = email.split('@', 1)
        if len(local) <= 2:
            masked = local[:1] + "***"
        else:
            masked = local[0] + "***" + local[-1]
        return f"{masked}@{domain}"

    async def run(
        self,
        alias_service: AliasService,
        breach_lookup: BreachLookup,
        on_result: Callable[[ScanResult], None] | None = None,
        on_log: Callable[[str, str], None] | None = None,
    ) -> list[ScanResult]:
        """
        Execute scan and return one result per active alias.

        Args:
            alias_service: Provider to list and deactivate aliases
            breach_lookup: Breach database to check addresses against
            on_result: Callback for each finished alias
            on_log: Callback for log entries

        Raises:
            OrchestratorError: the alias listing failed
        """
        self.audit_log = []
        self.results = []
        self.aliases_listed = 0
        self.start_time = time.time()
        self.end_time = 0

        def log(msg: str, level: str = "INFO"):
            self._log(msg, level)
            if on_log:
                on_log(msg, level)

        log(f"SCAN INITIATED ({alias_service.name} / {breach_lookup.name})")

        try:
            aliases = await alias_service.list_aliases()
        except Exception as e:
            log(f"LISTING FAILED: {type(e).__name__} - {e}", "ERROR")
            self.end_time = time.time()
            raise OrchestratorError(f"Could not list aliases: {e}", cause=e) from e

        self.aliases_listed = len(aliases)
        active = [alias for alias in aliases if alias.active]
        log(f"ALIASES: {len(aliases)} listed, {len(active)} active")

        for alias in active:
            result = await self._scan_alias(alias, alias_service, breach_lookup, log)
            self.results.append(result)
            if on_result:
                on_result(result)

        self.end_time = time.time()
        summary = self.get_summary()
        log(
            f"SCAN COMPLETE ({summary.scan_time_seconds:.1f}s): "
            f"{summary.compromised} compromised, {summary.deactivated} deactivated"
        )
        return list(self.results)

    async def _scan_alias(
        self,
        alias: Alias,
        alias_service: AliasService,
        breach_lookup: BreachLookup,
        log: Callable[[str, str], None],
    ) -> ScanResult:
        masked = self.mask_email(alias.email)
        log(f"CHECKING: {masked}")

        try:
            breaches = await breach_lookup.check(alias.email)
        except ScanError as e:
            log(f"  LOOKUP FAILED: {masked} - {e}", "ERROR")
            return ScanResult(alias=alias, error=str(e))
        except Exception as e:
            log(f"  LOOKUP ERROR: {masked} - {type(e).__name__}", "ERROR")
            return ScanResult(alias=alias, error=f"{type(e).__name__}: {e}")

        if not breaches:
            log(f"  CLEAN: {masked}", "SUCCESS")
            return ScanResult(alias=alias)

        log(f"  FOUND: {masked} in {len(breaches)} breach(es)", "WARN")
        try:
            await alias_service.deactivate(alias.id)
        except ScanError as e:
            log(f"  DEACTIVATION FAILED: {alias.id} - {e}", "ERROR")
            return ScanResult(
                alias=alias,
                breaches=breaches,
                deactivation_attempted=True,
                error=str(e),
            )
        except Exception as e:
            log(f"  DEACTIVATION ERROR: {alias.id} - {type(e).__name__}", "ERROR")
            return ScanResult(
                alias=alias,
                breaches=breaches,
                deactivation_attempted=True,
                error=f"{type(e).__name__}: {e}",
            )

        log(f"  DEACTIVATED: {alias.id}", "SUCCESS")
        return ScanResult(
            alias=alias,
            breaches=breaches,
            deactivation_attempted=True,
            deactivated=True,
        )

    def get_summary(self) -> ScanSummary:
        """Get scan results summary."""
        end = self.end_time or time.time()
        elapsed = end - self.start_time if self.start_time else 0

        return ScanSummary(
            aliases_listed=self.aliases_listed,
            aliases_scanned=len(self.results),
            compromised=sum(1 for r in self.results if r.compromised),
            deactivated=sum(1 for r in self.results if r.deactivated),
            lookup_failures=sum(1 for r in self.results if r.lookup_failed),
            deactivation_failures=sum(
                1 for r in self.results if r.deactivation_attempted and not r.deactivated
            ),
            scan_time_seconds=round(elapsed, 1),
            audit_log=list(self.audit_log),
        )
