"""
TheCocktailDB Client Module
===========================

Async client for the public TheCocktailDB JSON API. Covers the three
lookups the search pipeline needs: search by name, filter by ingredient
and lookup by id.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx

from mixologist.config import DEFAULT_COCKTAILDB_URL
from mixologist.exceptions import SourceUnavailableError

logger = logging.getLogger(__name__)


@dataclass
class DrinkReference:
    """Lightweight drink entry returned by the ingredient filter."""

    drink_id: str
    name: str = ""
    thumbnail: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> DrinkReference:
        return cls(
            drink_id=str(data["idDrink"]),
            name=data.get("strDrink") or "",
            thumbnail=data.get("strDrinkThumb") or None,
        )


class CocktailDBClient:
    """
    Client for TheCocktailDB.

    Each call opens its own httpx client with an explicit timeout, so a
    hung request fails after ``timeout`` seconds instead of stalling the
    search. Transport errors, non-2xx statuses and undecodable bodies
    raise SourceUnavailableError; "no results" is an empty list.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_COCKTAILDB_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def _get_json(self, endpoint: str, params: dict[str, str]) -> dict[str, Any]:
        url = f"{self.base_url}/{endpoint}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.get(url, params=params)
                response.raise_for_status()
                payload = response.json()
        except httpx.TimeoutException as e:
            raise SourceUnavailableError(f"Timeout after {self.timeout}s calling {endpoint}") from e
        except httpx.HTTPError as e:
            raise SourceUnavailableError(f"HTTP error calling {endpoint}: {e}") from e
        except ValueError as e:
            raise SourceUnavailableError(f"Invalid JSON from {endpoint}: {e}") from e

        if not isinstance(payload, dict):
            raise SourceUnavailableError(f"Unexpected payload from {endpoint}: {type(payload).__name__}")
        return payload

    @staticmethod
    def _drinks(payload: dict[str, Any]) -> list[dict[str, Any]]:
        """Extract the drinks list. The API answers ``null`` or ``"None Found"`` for no results."""
        drinks = payload.get("drinks")
        if not isinstance(drinks, list):
            return []
        return [drink for drink in drinks if isinstance(drink, dict)]

    async def search_by_name(self, name: str) -> list[dict[str, Any]]:
        """
        Search drinks whose name contains the given text.

        Args:
            name: Cocktail name or fragment.

        Returns:
            Raw drink records, possibly empty.
        """
        payload = await self._get_json("search.php", {"s": name})
        drinks = self._drinks(payload)
        logger.debug(f"TheCocktailDB search '{name}': {len(drinks)} drinks")
        return drinks

    async def filter_by_ingredient(self, ingredient: str) -> list[DrinkReference]:
        """
        List drinks that use an ingredient.

        Args:
            ingredient: Ingredient name.

        Returns:
            Drink references (id, name, thumbnail). Full records need
            lookup_by_id.
        """
        payload = await self._get_json("filter.php", {"i": ingredient})
        references = [
            DrinkReference.from_dict(drink) for drink in self._drinks(payload) if drink.get("idDrink")
        ]
        logger.debug(f"TheCocktailDB filter '{ingredient}': {len(references)} references")
        return references

    async def lookup_by_id(self, drink_id: str) -> dict[str, Any] | None:
        """
        Fetch the full record of one drink.

        Args:
            drink_id: TheCocktailDB drink id.

        Returns:
            The raw drink record, or None if the id is unknown.
        """
        payload = await self._get_json("lookup.php", {"i": drink_id})
        drinks = self._drinks(payload)
        return drinks[0] if drinks else None
