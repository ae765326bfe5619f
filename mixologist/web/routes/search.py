"""Search routes for cocktail lookup."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query

from mixologist.core.enums import SearchMode
from mixologist.core.schema import CocktailProfile, SearchResponse
from mixologist.services.search_service import SearchService
from mixologist.web.dependencies import get_search_service

router = APIRouter(prefix="/api", tags=["search"])


@router.get("/search", response_model=SearchResponse)
async def search_cocktails(
    service: Annotated[SearchService, Depends(get_search_service)],
    q: str = Query(..., description="Cocktail name or ingredient"),
    mode: SearchMode = Query(SearchMode.BY_NAME, description="Match by name or ingredient"),
) -> SearchResponse:
    """
    Search cocktails across all sources.

    The outcome field is success, not_found or error; errors are reported
    in the body, not as HTTP failures, so clients can show the message.

    Args:
        q: The search text.
        mode: name or ingredient.

    Returns:
        SearchResponse with outcome and results.
    """
    if not q.strip():
        raise HTTPException(status_code=422, detail="Query must not be empty")
    return await service.execute(q, mode)


@router.post("/profiles/image", response_model=CocktailProfile)
async def resolve_profile_image(
    profile: CocktailProfile,
    service: Annotated[SearchService, Depends(get_search_service)],
) -> CocktailProfile:
    """
    Attach an image to a chosen profile.

    Profiles that already have an image are returned unchanged.
    """
    return await service.resolve_image(profile)
