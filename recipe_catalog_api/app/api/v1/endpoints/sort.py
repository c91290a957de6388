"""
Sort endpoint for API v1.

``criteria`` is one of ``prepTime``, ``cookTime``, ``totalTime``,
``title`` or ``servings`` (case-insensitive, snake_case accepted);
anything else sorts by title.  ``order=desc`` (or ``descending``)
reverses the order.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from recipe_catalog_api.app.api.deps import get_recipe_service
from recipe_catalog_api.app.schemas.recipe import Recipe
from recipe_catalog_api.app.services import RecipeService, SortBy


router = APIRouter()


@router.get("/recipes", response_model=List[Recipe])
def sort_recipes(
    criteria: Optional[str] = Query(None, description="Sort criterion"),
    order: Optional[str] = Query(None, description="'asc' or 'desc'"),
    recipes: RecipeService = Depends(get_recipe_service),
) -> List[Recipe]:
    ascending = (order or "").lower() not in {"desc", "descending"}
    return recipes.sort_recipes(SortBy.parse(criteria), ascending)
