"""FastAPI application factory for Mixologist."""

import logging

from fastapi import FastAPI

from mixologist import __version__
from mixologist.config import Settings, load_env_file
from mixologist.services.favorites import FavoritesService, FavoritesStore, create_favorites_store
from mixologist.services.search_service import SearchService, build_search_service

logger = logging.getLogger(__name__)


def create_app(
    settings: Settings | None = None,
    search_service: SearchService | None = None,
    favorites_store: FavoritesStore | None = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Services are built once here and shared through app.state; pass them
    in explicitly to substitute fakes.

    Args:
        settings: Runtime settings (read from the environment if None).
        search_service: Pre-built search service.
        favorites_store: Pre-built favorites store.
    """
    if settings is None:
        load_env_file()
        settings = Settings.from_env()

    app = FastAPI(
        title="Mixologist",
        description="Cocktail recipe lookup across a curated collection, TheCocktailDB and generative AI",
        version=__version__,
    )

    app.state.settings = settings
    app.state.search_service = search_service or build_search_service(settings)
    store = favorites_store or create_favorites_store(settings)
    app.state.favorites_service = FavoritesService(store, retry_delay=settings.favorites_retry_delay)

    # Include routers (import here to avoid circular imports)
    from mixologist.web.routes import favorites, search

    app.include_router(search.router)
    app.include_router(favorites.router)

    @app.get("/health", tags=["health"])
    async def health() -> dict:
        """Report which optional backends are active."""
        service: SearchService = app.state.search_service
        return {
            "status": "ok",
            "version": __version__,
            "ai_provider": service.ai_client.provider.value if service.ai_client else None,
            "image_generation": bool(
                service.image_resolver and service.image_resolver.image_generator
            ),
            "favorites_backend": app.state.favorites_service.store.backend,
        }

    return app
