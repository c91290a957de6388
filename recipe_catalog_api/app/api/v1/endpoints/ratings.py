"""
Rating endpoints for API v1.

Ratings are nested under their recipe.  Reading ratings and the
average score is public; leaving, changing and removing a rating
requires a bearer token, and only the author of a rating may change
or remove it.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from recipe_catalog_api.app.api.deps import get_rating_service
from recipe_catalog_api.app.core.security import TokenClaims, get_current_user
from recipe_catalog_api.app.schemas.rating import AverageRating, Rating, RatingInput
from recipe_catalog_api.app.services import RatingService


router = APIRouter()


def _ensure_rating_of_recipe(ratings: RatingService, recipe_id: str, rating_id: str) -> None:
    rating = ratings.get_rating_by_id(rating_id)
    if rating.recipe_id != recipe_id:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"rating {rating_id} not found for recipe {recipe_id}",
        )


@router.get("", response_model=List[Rating], summary="List ratings of a recipe")
def list_ratings(recipe_id: str, ratings: RatingService = Depends(get_rating_service)) -> List[Rating]:
    return ratings.get_ratings_by_recipe_id(recipe_id)


@router.get("/average", response_model=AverageRating, summary="Average score of a recipe")
def average_rating(recipe_id: str, ratings: RatingService = Depends(get_rating_service)) -> AverageRating:
    """Return the mean score, or 0 when the recipe has no ratings."""
    return AverageRating(recipe_id=recipe_id, average=ratings.get_average_rating(recipe_id))


@router.post("", response_model=Rating, status_code=status.HTTP_201_CREATED, summary="Rate a recipe")
def create_rating(
    recipe_id: str,
    data: RatingInput,
    current_user: TokenClaims = Depends(get_current_user),
    ratings: RatingService = Depends(get_rating_service),
) -> Rating:
    """Leave a 1 to 5 star rating for an existing recipe."""
    return ratings.create_rating(recipe_id, current_user.user_id, data)


@router.put("/{rating_id}", response_model=Rating, summary="Change a rating")
def update_rating(
    recipe_id: str,
    rating_id: str,
    data: RatingInput,
    current_user: TokenClaims = Depends(get_current_user),
    ratings: RatingService = Depends(get_rating_service),
) -> Rating:
    _ensure_rating_of_recipe(ratings, recipe_id, rating_id)
    return ratings.update_rating(rating_id, current_user.user_id, data)


@router.delete("/{rating_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a rating")
def delete_rating(
    recipe_id: str,
    rating_id: str,
    current_user: TokenClaims = Depends(get_current_user),
    ratings: RatingService = Depends(get_rating_service),
) -> None:
    _ensure_rating_of_recipe(ratings, recipe_id, rating_id)
    ratings.delete_rating(rating_id, current_user.user_id)
    return None
