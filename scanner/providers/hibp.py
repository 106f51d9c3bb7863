"""
Check aliases for data breaches using the Have I Been Pwned v3 API.
Requires an API key, rate limited per key.
Docs: https://haveibeenpwned.com/API/v3
"""

import asyncio
import logging
import math
from typing import Awaitable, Callable
from urllib.parse import quote

import httpx
from pydantic import TypeAdapter, ValidationError

from .base import BreachLookup
from models import Breach
from scanner.errors import BreachLookupError, DecodeError, TransportError

logger = logging.getLogger(__name__)

_breach_list = TypeAdapter(list[Breach])


class HIBP(BreachLookup):
    name = "Have I Been Pwned"

    DEFAULT_HOST = "https://haveibeenpwned.com"
    DEFAULT_USER_AGENT = "has-my-alias-been-pwned"

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str,
        host: str = DEFAULT_HOST,
        user_agent: str = DEFAULT_USER_AGENT,
        default_wait: float = 2.0,
        max_wait: float = 300.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.client = client
        self.token = token
        self.host = host.rstrip("/")
        self.user_agent = user_agent
        self.default_wait = default_wait
        self.max_wait = max_wait
        self.sleep = sleep

    def _retry_after(self, resp: httpx.Response) -> float:
        """Seconds to wait before retrying, as requested by the server."""
        value = resp.headers.get("retry-after")
        try:
            seconds = float(value)
        except (TypeError, ValueError):
            seconds = math.nan

        if not math.isfinite(seconds):
            logger.warning("Missing or invalid retry-after %r, waiting %ss.", value, self.default_wait)
            return self.default_wait
        return min(max(0.0, seconds), self.max_wait)

    async def _request(self, email: str) -> httpx.Response:
        try:
            return await self.client.get(
                f"{self.host}/api/v3/breachedaccount/{quote(email, safe='@')}",
                params={"truncateResponse": "false"},
                headers={
                    "hibp-api-key": self.token,
                    "user-agent": self.user_agent,
                },
            )
        except httpx.RequestError as e:
            raise TransportError("check", f"Could not reach Have I Been Pwned: {e}", cause=e) from e

    def _decode(self, resp: httpx.Response) -> list[Breach]:
        try:
            return _breach_list.validate_json(resp.content)
        except ValidationError as e:
            raise DecodeError("check", f"Unexpected breach listing from Have I Been Pwned: {e}", cause=e) from e

    async def check(self, email: str) -> list[Breach]:
        """Look up breaches for an address, waiting out one rate limit."""
        resp = await self._request(email)

        if resp.status_code == 429:
            wait = self._retry_after(resp)
            logger.info("Rate limited by Have I Been Pwned, retrying in %ss.", wait)
            await self.sleep(wait)

            resp = await self._request(email)
            if resp.status_code == 404:
                return []
            if resp.status_code != 200:
                raise BreachLookupError(
                    resp.status_code,
                    "Breach lookup failed after rate limit retry",
                    email=email,
                )
            return self._decode(resp)

        # No breaches found
        if resp.status_code == 404:
            return []

        if resp.status_code != 200:
            raise BreachLookupError(
                resp.status_code,
                f"Breach lookup failed: {resp.reason_phrase or 'unexpected status'}",
                email=email,
            )

        return self._decode(resp)
