"""
Recipe endpoints for API v1.

Anyone may list and read recipes.  Creating, replacing and deleting
recipes requires a valid bearer token.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from recipe_catalog_api.app.api.deps import get_recipe_service
from recipe_catalog_api.app.core.security import TokenClaims, get_current_user
from recipe_catalog_api.app.schemas.recipe import Recipe, RecipeInput
from recipe_catalog_api.app.services import RecipeService


router = APIRouter()


@router.get("", response_model=List[Recipe], summary="List recipes")
def list_recipes(recipes: RecipeService = Depends(get_recipe_service)) -> List[Recipe]:
    return recipes.get_all_recipes()


@router.get("/{recipe_id}", response_model=Recipe, summary="Get a single recipe")
def get_recipe(recipe_id: str, recipes: RecipeService = Depends(get_recipe_service)) -> Recipe:
    return recipes.get_recipe_by_id(recipe_id)


@router.post("", response_model=Recipe, status_code=status.HTTP_201_CREATED, summary="Create a recipe")
def create_recipe(
    data: RecipeInput,
    current_user: TokenClaims = Depends(get_current_user),
    recipes: RecipeService = Depends(get_recipe_service),
) -> Recipe:
    return recipes.create_recipe(data)


@router.put("/{recipe_id}", response_model=Recipe, summary="Replace a recipe")
def update_recipe(
    recipe_id: str,
    data: RecipeInput,
    current_user: TokenClaims = Depends(get_current_user),
    recipes: RecipeService = Depends(get_recipe_service),
) -> Recipe:
    """Replace every field of a recipe except its id and creation time."""
    return recipes.update_recipe(recipe_id, data)


@router.delete("/{recipe_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a recipe")
def delete_recipe(
    recipe_id: str,
    current_user: TokenClaims = Depends(get_current_user),
    recipes: RecipeService = Depends(get_recipe_service),
) -> None:
    """Delete a recipe.

    Its ratings stay in place unless ``CASCADE_RATING_DELETE`` is set.
    """
    recipes.delete_recipe(recipe_id)
    return None
