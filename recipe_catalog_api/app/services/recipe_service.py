"""
Business logic for recipes.

``RecipeService`` wraps the recipe repository with the catalog's
query helpers: exact tag filtering and multi-criteria sorting.  Sorting
always works on a copy of the collection, so a sort request never
reorders stored data.
"""

import logging
from enum import Enum
from typing import Callable, Dict, List, Optional, Union

from ..repositories import RatingRepository, RecipeRepository
from ..schemas.recipe import Recipe, RecipeInput


logger = logging.getLogger(__name__)


class SortBy(str, Enum):
    """Criteria accepted by ``RecipeService.sort_recipes``."""

    PREP_TIME = "prepTime"
    COOK_TIME = "cookTime"
    TOTAL_TIME = "totalTime"
    TITLE = "title"
    SERVINGS = "servings"

    @classmethod
    def parse(cls, value: Optional[str]) -> "SortBy":
        """Map a query string value to a criterion.

        Matching ignores case and underscores, so ``prepTime``,
        ``preptime`` and ``prep_time`` are the same.  Anything unknown
        falls back to ``TITLE``.
        """
        if value:
            wanted = value.replace("_", "").lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return cls.TITLE


_SORT_KEYS: Dict[SortBy, Callable[[Recipe], Union[int, str]]] = {
    SortBy.PREP_TIME: lambda r: r.prep_time,
    SortBy.COOK_TIME: lambda r: r.cook_time,
    SortBy.TOTAL_TIME: lambda r: r.prep_time + r.cook_time,
    SortBy.TITLE: lambda r: r.title,
    SortBy.SERVINGS: lambda r: r.servings,
}


class RecipeService:
    """Service for managing recipes."""

    def __init__(
        self,
        repository: RecipeRepository,
        ratings: Optional[RatingRepository] = None,
        cascade_rating_delete: bool = False,
    ) -> None:
        self.repository = repository
        self.ratings = ratings
        self.cascade_rating_delete = cascade_rating_delete

    def get_all_recipes(self) -> List[Recipe]:
        return self.repository.find_all()

    def get_recipe_by_id(self, recipe_id: str) -> Recipe:
        return self.repository.find_by_id(recipe_id)

    def create_recipe(self, data: RecipeInput) -> Recipe:
        recipe = self.repository.create(data)
        logger.info("Created recipe %s '%s'", recipe.id, recipe.title)
        return recipe

    def update_recipe(self, recipe_id: str, data: RecipeInput) -> Recipe:
        recipe = self.repository.update(recipe_id, data)
        logger.info("Updated recipe %s", recipe_id)
        return recipe

    def delete_recipe(self, recipe_id: str) -> None:
        """Delete a recipe.

        Ratings of the recipe are kept unless cascading is enabled, in
        which case they are removed right after the recipe.  The two
        steps lock different collections and are not atomic together.
        """
        self.repository.delete(recipe_id)
        logger.info("Deleted recipe %s", recipe_id)
        if self.cascade_rating_delete and self.ratings is not None:
            removed = self.ratings.delete_by_recipe_id(recipe_id)
            logger.info("Removed %d ratings of deleted recipe %s", removed, recipe_id)

    def filter_recipes_by_tag(self, tag: str) -> List[Recipe]:
        """Recipes whose tag list contains exactly ``tag``."""
        return [recipe for recipe in self.repository.find_all() if tag in recipe.tags]

    def sort_recipes(self, criteria: Union[SortBy, str] = SortBy.TITLE, ascending: bool = True) -> List[Recipe]:
        """Return all recipes ordered by ``criteria``.

        Unknown criteria sort by title.  The sort is stable, so recipes
        that compare equal keep their insertion order in both
        directions.
        """
        key = _SORT_KEYS.get(criteria, _SORT_KEYS[SortBy.TITLE])
        return sorted(self.repository.find_all(), key=key, reverse=not ascending)
