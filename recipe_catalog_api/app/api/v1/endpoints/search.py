"""
Search endpoints for API v1.

Ingredient and title searches are case-insensitive substring matches;
tag search requires an exact tag.  ``/paginated`` pages through all
recipes in creation order.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from recipe_catalog_api.app.api.deps import get_search_service, get_settings
from recipe_catalog_api.app.core.config import Settings
from recipe_catalog_api.app.schemas.recipe import Recipe
from recipe_catalog_api.app.services import SearchService


router = APIRouter()


def _require_query(q: Optional[str]) -> str:
    if not q:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Missing query parameter")
    return q


@router.get("/ingredient", response_model=List[Recipe])
def search_by_ingredient(
    q: Optional[str] = Query(None, description="Part of an ingredient name"),
    search: SearchService = Depends(get_search_service),
) -> List[Recipe]:
    return search.search_by_ingredient(_require_query(q))


@router.get("/tag", response_model=List[Recipe])
def search_by_tag(
    q: Optional[str] = Query(None, description="Exact tag"),
    search: SearchService = Depends(get_search_service),
) -> List[Recipe]:
    return search.search_by_tag(_require_query(q))


@router.get("/title", response_model=List[Recipe])
def search_by_title(
    q: Optional[str] = Query(None, description="Part of a recipe title"),
    search: SearchService = Depends(get_search_service),
) -> List[Recipe]:
    return search.search_by_title(_require_query(q))


@router.get("/paginated", response_model=List[Recipe])
def paginated_recipes(
    page: int = Query(1, description="Page number, starting at 1"),
    page_size: Optional[int] = Query(None, description="Recipes per page"),
    search: SearchService = Depends(get_search_service),
    settings: Settings = Depends(get_settings),
) -> List[Recipe]:
    """Return one page of recipes.

    ``page_size`` defaults to ``DEFAULT_PAGE_SIZE`` and may not exceed
    ``MAX_PAGE_SIZE``.  Pages beyond the last recipe are empty.
    """
    if page < 1:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid page parameter")
    size = settings.default_page_size if page_size is None else page_size
    if size < 1 or size > settings.max_page_size:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid page_size parameter")
    return search.get_paginated_recipes(page, size)
