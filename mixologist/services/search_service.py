"""
Search Service Module
=====================

Aggregates cocktail search across three sources, in priority order:

1. Local - the curated collection bundled with the package
2. TheCocktailDB - public recipe API
3. Generative AI - only when the first two found nothing

Results are deduplicated by case-insensitive name, first seen wins, so
a local recipe always beats an API or generated recipe of the same name.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from mixologist.catalog.cocktaildb import CocktailDBClient, DrinkReference
from mixologist.catalog.local import LocalCatalog
from mixologist.catalog.normalizer import normalize_external_drink
from mixologist.core.enums import ProfileSource, SearchMode, SearchOutcome
from mixologist.core.schema import CocktailProfile, SearchResponse
from mixologist.exceptions import DatasetError
from mixologist.services.ai.client import AIClient
from mixologist.services.image_resolver import ImageResolver

if TYPE_CHECKING:
    from mixologist.config import Settings

logger = logging.getLogger(__name__)

StatusCallback = Callable[[str], None]

DETAIL_FETCH_LIMIT = 8

STATUS_LOCAL = "Checking the local collection..."
STATUS_EXTERNAL = "Searching international cocktail databases..."
STATUS_DETAILS = "Loading details for {count} drinks..."
STATUS_GENERATIVE = "Invoking the digital master mixologist..."

ERROR_MESSAGE = "A technical error occurred: {detail}"


class ResultSet:
    """Insertion-ordered profiles, unique by case-insensitive name."""

    def __init__(self) -> None:
        self._seen_names: set[str] = set()
        self._profiles: list[CocktailProfile] = []
        self.counts: dict[ProfileSource, int] = {source: 0 for source in ProfileSource}

    def add(self, profile: CocktailProfile, source: ProfileSource) -> bool:
        """Add a profile unless its name was already seen. Returns True if added."""
        key = profile.dedup_key
        if not key or key in self._seen_names:
            return False
        self._seen_names.add(key)
        self._profiles.append(profile)
        self.counts[source] += 1
        return True

    def extend(self, profiles: list[CocktailProfile], source: ProfileSource) -> int:
        return sum(1 for profile in profiles if self.add(profile, source))

    @property
    def profiles(self) -> list[CocktailProfile]:
        return list(self._profiles)

    def __len__(self) -> int:
        return len(self._profiles)


class SearchService:
    """Multi-source cocktail search with progressive fallback."""

    def __init__(
        self,
        local_catalog: LocalCatalog,
        cocktaildb: CocktailDBClient,
        ai_client: AIClient | None = None,
        image_resolver: ImageResolver | None = None,
        detail_fetch_limit: int = DETAIL_FETCH_LIMIT,
        ai_timeout: float = 60.0,
    ):
        """
        Initialize the search service.

        Args:
            local_catalog: Curated collection, queried first.
            cocktaildb: TheCocktailDB client, queried second.
            ai_client: Optional generative provider for the last-resort stage.
            image_resolver: Optional resolver for generated and chosen profiles.
            detail_fetch_limit: Maximum detail lookups in ingredient mode.
            ai_timeout: Seconds allowed for one recipe generation.
        """
        self.local_catalog = local_catalog
        self.cocktaildb = cocktaildb
        self.ai_client = ai_client
        self.image_resolver = image_resolver
        self.detail_fetch_limit = detail_fetch_limit
        self.ai_timeout = ai_timeout

    async def search(
        self,
        query: str,
        mode: SearchMode = SearchMode.BY_NAME,
        on_status: StatusCallback | None = None,
    ) -> list[CocktailProfile]:
        """
        Search all sources for a cocktail name or ingredient.

        Stages run one after another. Source failures are logged and count
        as "no results from that source"; only unexpected errors in the
        aggregation itself propagate.

        Args:
            query: Cocktail name or ingredient.
            mode: What the query is matched against.
            on_status: Optional progress callback, called before each stage.

        Returns:
            Deduplicated profiles in source-priority order, possibly empty.
        """
        query = query.strip()
        if not query:
            return []

        results = ResultSet()

        self._notify(on_status, STATUS_LOCAL)
        if self.local_catalog.is_loaded:
            local = self._search_local(query, mode)
        else:
            local = await asyncio.to_thread(self._search_local, query, mode)
        results.extend(local, ProfileSource.LOCAL)

        self._notify(on_status, STATUS_EXTERNAL)
        external = await self._search_cocktaildb(query, mode, on_status)
        results.extend(external, ProfileSource.COCKTAILDB)

        if len(results) == 0:
            self._notify(on_status, STATUS_GENERATIVE)
            generated = await self._generate(query, mode)
            if generated is not None:
                results.add(generated, ProfileSource.GENERATED)

        logger.info(
            f"Search '{query}' ({mode.value}): {len(results)} results "
            f"(local={results.counts[ProfileSource.LOCAL]}, "
            f"cocktaildb={results.counts[ProfileSource.COCKTAILDB]}, "
            f"generated={results.counts[ProfileSource.GENERATED]})"
        )
        return results.profiles

    async def execute(
        self,
        query: str,
        mode: SearchMode = SearchMode.BY_NAME,
        on_status: StatusCallback | None = None,
    ) -> SearchResponse:
        """
        Run a search and classify it into a user-visible outcome.

        Returns:
            SearchResponse with SUCCESS, NOT_FOUND, or ERROR (with the
            underlying message) when the search itself blew up.
        """
        try:
            results = await self.search(query, mode, on_status)
        except Exception as e:
            logger.exception(f"Search failed for '{query}'")
            return SearchResponse(
                query=query,
                mode=mode,
                outcome=SearchOutcome.ERROR,
                message=ERROR_MESSAGE.format(detail=str(e) or "Connection failure"),
            )

        outcome = SearchOutcome.SUCCESS if results else SearchOutcome.NOT_FOUND
        return SearchResponse(query=query, mode=mode, outcome=outcome, results=results)

    async def resolve_image(self, profile: CocktailProfile) -> CocktailProfile:
        """
        Attach an image to a chosen profile if it has none.

        Returns:
            The same profile when it already has an image or no resolver is
            configured, otherwise a copy carrying the resolved image (which
            may still be None).
        """
        if profile.image_url or self.image_resolver is None:
            return profile
        image_url = await self.image_resolver.resolve(
            profile.name, profile.glassware, profile.garnish, profile.color
        )
        return profile.with_image(image_url)

    def _search_local(self, query: str, mode: SearchMode) -> list[CocktailProfile]:
        try:
            matches = self.local_catalog.search(query, mode)
        except Exception as e:
            logger.error(f"Local collection unavailable: {e}")
            return []
        logger.debug(f"Local matches for '{query}': {len(matches)}")
        return matches

    async def _search_cocktaildb(
        self,
        query: str,
        mode: SearchMode,
        on_status: StatusCallback | None,
    ) -> list[CocktailProfile]:
        try:
            if mode == SearchMode.BY_INGREDIENT:
                references = await self.cocktaildb.filter_by_ingredient(query)
                if not references:
                    return []
                top = references[: self.detail_fetch_limit]
                self._notify(on_status, STATUS_DETAILS.format(count=len(top)))
                raw_drinks = await self._fetch_details(top)
            else:
                raw_drinks = await self.cocktaildb.search_by_name(query)
        except Exception as e:
            logger.warning(f"TheCocktailDB search failed for '{query}': {e}")
            return []

        profiles = []
        for raw in raw_drinks:
            profile = normalize_external_drink(raw)
            if profile.name:
                profiles.append(profile)
        return profiles

    async def _fetch_details(self, references: list[DrinkReference]) -> list[dict]:
        """
        Fetch full records for drink references concurrently.

        Failed or empty lookups are dropped. Records come back in
        reference order after every lookup has settled.
        """
        outcomes = await asyncio.gather(
            *(self.cocktaildb.lookup_by_id(ref.drink_id) for ref in references),
            return_exceptions=True,
        )

        details = []
        for ref, outcome in zip(references, outcomes):
            if isinstance(outcome, BaseException):
                logger.debug(f"Detail fetch failed for drink {ref.drink_id}: {outcome}")
            elif outcome:
                details.append(outcome)
        return details

    async def _generate(self, query: str, mode: SearchMode) -> CocktailProfile | None:
        if self.ai_client is None:
            logger.warning("No AI provider configured, skipping generative fallback")
            return None

        try:
            result = await asyncio.wait_for(
                self.ai_client.generate_recipe(query, mode),
                timeout=self.ai_timeout,
            )
        except Exception as e:
            logger.error(f"AI generation error for '{query}': {e!r}")
            return None

        profile = result.profile
        if not result.success or profile is None or not profile.is_complete:
            logger.warning(f"AI generation produced no usable recipe: {result.error_message}")
            return None

        image_url = None
        if self.image_resolver is not None:
            image_url = await self.image_resolver.resolve(
                profile.name, profile.glassware, profile.garnish, profile.color
            )
        return profile.with_image(image_url)

    @staticmethod
    def _notify(on_status: StatusCallback | None, message: str) -> None:
        if on_status is None:
            return
        try:
            on_status(message)
        except Exception as e:
            logger.warning(f"Progress callback failed: {e}")


def build_search_service(settings: Settings) -> SearchService:
    """
    Wire a SearchService from settings.

    Missing API keys or SDKs disable the generative stages rather than
    failing startup.
    """
    from mixologist.services.ai.client import get_ai_client, get_image_generator

    cocktaildb = CocktailDBClient(
        base_url=settings.cocktaildb_base_url,
        timeout=settings.request_timeout,
    )

    ai_client = None
    if settings.ai_api_key:
        try:
            ai_client = get_ai_client(
                provider=settings.ai_provider,
                api_key=settings.ai_api_key,
                model=settings.ai_model,
                timeout=settings.ai_timeout,
            )
        except (ImportError, ValueError) as e:
            logger.warning(f"Generative recipes disabled: {e}")

    image_generator = None
    if settings.image_api_key:
        try:
            image_generator = get_image_generator(
                api_key=settings.image_api_key,
                timeout=settings.ai_timeout,
            )
        except ImportError as e:
            logger.warning(f"Image generation disabled: {e}")

    local_catalog = LocalCatalog()
    try:
        local_catalog.load()
    except DatasetError as e:
        logger.error(f"Local collection unavailable: {e}")

    return SearchService(
        local_catalog=local_catalog,
        cocktaildb=cocktaildb,
        ai_client=ai_client,
        image_resolver=ImageResolver(cocktaildb, image_generator),
        detail_fetch_limit=settings.detail_fetch_limit,
        ai_timeout=settings.ai_timeout,
    )
