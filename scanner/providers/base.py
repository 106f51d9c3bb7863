"""Base classes for alias and breach providers."""

from abc import ABC, abstractmethod

from models import Alias, Breach


class AliasService(ABC):
    """
    Interface for alias-management providers.

    Each provider:
    - Lists every alias visible to its credential, active or not
    - Deactivates a single alias by id
    - Raises ProviderError for non-success statuses and
      TransportError when the provider cannot be reached
    """

    name: str = "Alias Service"

    @abstractmethod
    async def list_aliases(self) -> list[Alias]:
        pass

    @abstractmethod
    async def deactivate(self, alias_id: str) -> None:
        """
        Ask the provider to make an alias inactive.

        Args:
            alias_id: Provider-assigned alias id

        Raises:
            ProviderError: the provider did not confirm the deactivation
        """
        pass


class BreachLookup(ABC):
    """
    Interface for breach databases.

    A "not found" answer means zero breaches, not an error. Rate limiting
    is handled inside check() and never reaches the caller unless the
    single retry also fails.
    """

    name: str = "Breach Lookup"

    @abstractmethod
    async def check(self, email: str) -> list[Breach]:
        """
        Look up known breaches for one address.

        Args:
            email: Address to look up

        Returns:
            Breaches containing the address, empty if none

        Raises:
            BreachLookupError: the provider rejected the lookup
            TransportError: the provider could not be reached or decoded
        """
        pass
