"""FastAPI dependencies for the services shared through app.state."""

from fastapi import Request

from mixologist.services.favorites import FavoritesService
from mixologist.services.search_service import SearchService


def get_search_service(request: Request) -> SearchService:
    """Dependency to get the application's search service."""
    return request.app.state.search_service


def get_favorites_service(request: Request) -> FavoritesService:
    """Dependency to get the application's favorites service."""
    return request.app.state.favorites_service
