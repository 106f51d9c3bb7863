"""
AnonAddy alias provider.
Docs: https://app.anonaddy.com/docs
"""

import logging
from urllib.parse import quote

import httpx
from pydantic import ValidationError

from .base import AliasService
from models import AnonAddyAlias
from scanner.errors import DecodeError, ProviderError, TransportError

logger = logging.getLogger(__name__)


class AnonAddy(AliasService):
    name = "AnonAddy"

    DEFAULT_HOST = "https://app.anonaddy.com"

    def __init__(self, client: httpx.AsyncClient, token: str, host: str = DEFAULT_HOST):
        self.client = client
        self.token = token
        self.host = host.rstrip("/")

    @property
    def headers(self) -> dict[str, str]:
        return {
            "Content-Type": "application/json",
            "Accept": "application/json",
            "Authorization": f"Bearer {self.token}",
        }

    async def _send(self, method: str, url: str, operation: str) -> httpx.Response:
        try:
            return await self.client.request(method, url, headers=self.headers)
        except httpx.RequestError as e:
            raise TransportError(operation, f"Could not reach AnonAddy: {e}", cause=e) from e

    async def list_aliases(self) -> list[AnonAddyAlias]:
        """Fetch every alias, following AnonAddy's pagination links."""
        logger.info("Getting aliases from AnonAddy.")

        aliases: list[AnonAddyAlias] = []
        url: str | None = f"{self.host}/api/v1/aliases"
        fetched: set[str] = set()

        while url and url not in fetched:
            fetched.add(url)
            resp = await self._send("GET", url, "list")
            if resp.status_code != 200:
                raise ProviderError("list", "Failed to get aliases.", status_code=resp.status_code)

            try:
                body = resp.json()
                page = [AnonAddyAlias.model_validate(item) for item in body["data"]]
                url = self._next_page(body)
            except (ValueError, KeyError, TypeError, AttributeError, ValidationError) as e:
                raise DecodeError("list", f"Unexpected alias listing from AnonAddy: {e}", cause=e) from e

            aliases.extend(page)

        logger.info("Retrieved %d aliases.", len(aliases))
        return aliases

    @staticmethod
    def _next_page(body: dict) -> str | None:
        links = body.get("links") or {}
        next_url = links.get("next")
        if next_url is not None and not isinstance(next_url, str):
            raise TypeError(f"links.next must be a URL, got {next_url!r}")
        return next_url

    async def deactivate(self, alias_id: str) -> None:
        logger.info("Deactivating alias %s.", alias_id)

        resp = await self._send(
            "DELETE",
            f"{self.host}/api/v1/active-aliases/{quote(alias_id, safe='')}",
            "deactivate",
        )
        if resp.status_code != 204:
            raise ProviderError(
                "deactivate",
                f"Failed to deactivate alias {alias_id}.",
                alias_id=alias_id,
                status_code=resp.status_code,
            )
