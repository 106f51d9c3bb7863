# tests/conftest.py

from pathlib import Path

import httpx
import pytest

from models import Alias, Breach
from scanner import AliasService, BreachLookup, ProviderError

RESOURCES = Path(__file__).parent / "resources"


def load_resource(name: str) -> str:
    return (RESOURCES / name).read_text(encoding="utf-8")


class FakeAliasService(AliasService):
    """In-memory alias provider that records deactivations."""
    name = "Fake Aliases"

    def __init__(self, aliases, fail_deactivate=(), list_error=None):
        self.aliases = list(aliases)
        self.fail_deactivate = set(fail_deactivate)
        self.list_error = list_error
        self.list_calls = 0
        self.deactivated: list[str] = []

    async def list_aliases(self):
        self.list_calls += 1
        if self.list_error:
            raise self.list_error
        return list(self.aliases)

    async def deactivate(self, alias_id):
        self.deactivated.append(alias_id)
        if alias_id in self.fail_deactivate:
            raise ProviderError(
                "deactivate", f"Failed to deactivate alias {alias_id}.", alias_id=alias_id, status_code=500
            )


class FakeBreachLookup(BreachLookup):
    """Breach lookup answering from a dict of email -> breaches or exception."""
    name = "Fake Breaches"

    def __init__(self, answers):
        self.answers = answers
        self.checked: list[str] = []

    async def check(self, email):
        self.checked.append(email)
        answer = self.answers.get(email, [])
        if isinstance(answer, Exception):
            raise answer
        return list(answer)


class SleepRecorder:
    """Stands in for asyncio.sleep and remembers every wait."""

    def __init__(self):
        self.waits: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.waits.append(seconds)


def make_alias(alias_id: str, email: str, active: bool = True, description=None) -> Alias:
    return Alias(id=alias_id, email=email, active=active, description=description)


def make_breach(name: str) -> Breach:
    return Breach(name=name, title=name, domain=f"{name.lower()}.com", pwn_count=100)


def mock_client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.fixture
def sleep_recorder():
    return SleepRecorder()
