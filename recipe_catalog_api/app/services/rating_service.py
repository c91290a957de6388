"""
Business logic for recipe ratings.

Ratings may only be left for recipes that exist, and only the user who
left a rating may change or remove it.  Scores must lie between
``MIN_SCORE`` and ``MAX_SCORE``.
"""

import logging
from typing import List

from ..core.errors import UnauthorizedError, ValidationError
from ..repositories import RatingRepository
from ..schemas.rating import Rating, RatingInput
from .recipe_service import RecipeService


logger = logging.getLogger(__name__)

MIN_SCORE = 1
MAX_SCORE = 5


class RatingService:
    """Service for handling recipe ratings."""

    def __init__(self, repository: RatingRepository, recipe_service: RecipeService) -> None:
        self.repository = repository
        self.recipe_service = recipe_service

    @staticmethod
    def _validate(data: RatingInput) -> None:
        if not MIN_SCORE <= data.score <= MAX_SCORE:
            raise ValidationError(f"Rating score must be between {MIN_SCORE} and {MAX_SCORE}")

    def _owned_rating(self, rating_id: str, user_id: str) -> Rating:
        rating = self.repository.find_by_id(rating_id)
        if rating.user_id != user_id:
            logger.warning("User %s tried to modify rating %s owned by %s", user_id, rating_id, rating.user_id)
            raise UnauthorizedError("unauthorized: rating belongs to another user")
        return rating

    def get_all_ratings(self) -> List[Rating]:
        return self.repository.find_all()

    def get_rating_by_id(self, rating_id: str) -> Rating:
        return self.repository.find_by_id(rating_id)

    def get_ratings_by_recipe_id(self, recipe_id: str) -> List[Rating]:
        return self.repository.find_by_recipe_id(recipe_id)

    def get_ratings_by_user_id(self, user_id: str) -> List[Rating]:
        return self.repository.find_by_user_id(user_id)

    def create_rating(self, recipe_id: str, user_id: str, data: RatingInput) -> Rating:
        """Rate an existing recipe.

        Raises ``ValidationError`` for an out of range score and
        ``NotFoundError`` when the recipe does not exist.
        """
        self._validate(data)
        self.recipe_service.get_recipe_by_id(recipe_id)
        rating = self.repository.create(recipe_id, user_id, data)
        logger.info("User %s rated recipe %s with %d", user_id, recipe_id, rating.score)
        return rating

    def update_rating(self, rating_id: str, user_id: str, data: RatingInput) -> Rating:
        """Change score and comment of a rating owned by ``user_id``."""
        self._validate(data)
        self._owned_rating(rating_id, user_id)
        return self.repository.update(rating_id, data)

    def delete_rating(self, rating_id: str, user_id: str) -> None:
        """Remove a rating owned by ``user_id``."""
        self._owned_rating(rating_id, user_id)
        self.repository.delete(rating_id)
        logger.info("User %s deleted rating %s", user_id, rating_id)

    def get_average_rating(self, recipe_id: str) -> float:
        """Mean score of a recipe's ratings, or 0.0 when it has none."""
        ratings = self.repository.find_by_recipe_id(recipe_id)
        if not ratings:
            return 0.0
        return sum(rating.score for rating in ratings) / len(ratings)
