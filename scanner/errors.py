"""Error types raised by the scanner and its providers."""

from typing import Optional


class ScanError(Exception):
    """Base class for every error the scanner raises."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class TransportError(ScanError):
    """No usable response could be obtained from a provider."""

    def __init__(self, operation: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.operation = operation
        self.cause = cause


class DecodeError(TransportError):
    """A response arrived but its body could not be decoded."""


class ProviderError(ScanError):
    """The alias provider answered with a non-success status."""

    def __init__(
        self,
        operation: str,
        message: str,
        alias_id: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.alias_id = alias_id
        self.status_code = status_code


class BreachLookupError(ScanError):
    """The breach provider answered with a status the lookup cannot use."""

    def __init__(self, status_code: int, message: str, email: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.email = email

    def __str__(self) -> str:
        return f"{self.message} (HTTP {self.status_code})"


class OrchestratorError(ScanError):
    """The scan could not start because the alias listing failed."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ConfigError(ScanError):
    """Required configuration is missing or invalid."""
