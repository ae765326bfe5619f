"""Application services for Mixologist."""

from mixologist.services.favorites import (
    FavoritesService,
    FavoritesStore,
    InMemoryFavoritesStore,
    SQLFavoritesStore,
    create_favorites_store,
)
from mixologist.services.image_resolver import ImageResolver
from mixologist.services.search_service import SearchService, build_search_service

__all__ = [
    "FavoritesService",
    "FavoritesStore",
    "InMemoryFavoritesStore",
    "SQLFavoritesStore",
    "create_favorites_store",
    "ImageResolver",
    "SearchService",
    "build_search_service",
]
