"""Favorites routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Response
from pydantic import BaseModel

from mixologist.core.schema import CocktailProfile
from mixologist.exceptions import FavoritesStoreError
from mixologist.services.favorites import FavoritesService
from mixologist.web.dependencies import get_favorites_service

router = APIRouter(prefix="/api/favorites", tags=["favorites"])

FavoritesDep = Annotated[FavoritesService, Depends(get_favorites_service)]


class ToggleResult(BaseModel):
    name: str
    is_favorite: bool


def _store_error(e: FavoritesStoreError) -> HTTPException:
    return HTTPException(status_code=503, detail=str(e))


@router.get("", response_model=list[CocktailProfile])
def list_favorites(favorites: FavoritesDep) -> list[CocktailProfile]:
    """List all favorite cocktails."""
    try:
        return favorites.store.get_all()
    except FavoritesStoreError as e:
        raise _store_error(e)


@router.put("", response_model=CocktailProfile)
def save_favorite(profile: CocktailProfile, favorites: FavoritesDep) -> CocktailProfile:
    """Store a snapshot of the profile as a favorite."""
    try:
        return favorites.store.put(profile)
    except FavoritesStoreError as e:
        raise _store_error(e)


@router.post("/toggle", response_model=ToggleResult)
def toggle_favorite(profile: CocktailProfile, favorites: FavoritesDep) -> ToggleResult:
    """
    Flip the favorite state of a cocktail.

    Retried once on store failure before reporting 503.
    """
    try:
        is_favorite = favorites.toggle(profile)
    except FavoritesStoreError as e:
        raise _store_error(e)
    return ToggleResult(name=profile.name, is_favorite=is_favorite)


@router.get("/{name}", response_model=CocktailProfile)
def get_favorite(name: str, favorites: FavoritesDep) -> CocktailProfile:
    """Get one favorite by name (case-insensitive)."""
    try:
        profile = favorites.store.get(name)
    except FavoritesStoreError as e:
        raise _store_error(e)
    if profile is None:
        raise HTTPException(status_code=404, detail=f"Favorite '{name}' not found")
    return profile


@router.delete("/{name}", status_code=204)
def delete_favorite(name: str, favorites: FavoritesDep) -> Response:
    """Remove a favorite by name."""
    try:
        deleted = favorites.store.delete(name)
    except FavoritesStoreError as e:
        raise _store_error(e)
    if not deleted:
        raise HTTPException(status_code=404, detail=f"Favorite '{name}' not found")
    return Response(status_code=204)
