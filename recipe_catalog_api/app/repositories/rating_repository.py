"""Storage for ratings."""

from typing import List

from ..schemas.rating import Rating, RatingInput, new_rating, update_rating
from .base import InMemoryRepository


class RatingRepository(InMemoryRepository[Rating]):
    entity_name = "rating"

    def find_by_recipe_id(self, recipe_id: str) -> List[Rating]:
        return self._select(lambda rating: rating.recipe_id == recipe_id)

    def find_by_user_id(self, user_id: str) -> List[Rating]:
        return self._select(lambda rating: rating.user_id == user_id)

    def create(self, recipe_id: str, user_id: str, data: RatingInput) -> Rating:
        with self._lock.write_locked():
            rating = new_rating(self._new_id(), recipe_id, user_id, data)
            self._items[rating.id] = rating
            return rating.model_copy(deep=True)

    def update(self, rating_id: str, data: RatingInput) -> Rating:
        with self._lock.write_locked():
            updated = update_rating(self._get(rating_id), data)
            self._items[rating_id] = updated
            return updated.model_copy(deep=True)

    def delete_by_recipe_id(self, recipe_id: str) -> int:
        """Remove every rating of ``recipe_id`` and return how many went."""
        with self._lock.write_locked():
            doomed = [key for key, rating in self._items.items() if rating.recipe_id == recipe_id]
            for key in doomed:
                del self._items[key]
            return len(doomed)
