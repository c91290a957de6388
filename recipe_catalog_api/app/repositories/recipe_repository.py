"""Storage for recipes."""

from ..schemas.recipe import Recipe, RecipeInput, new_recipe, update_recipe
from .base import InMemoryRepository


class RecipeRepository(InMemoryRepository[Recipe]):
    entity_name = "recipe"

    def create(self, data: RecipeInput) -> Recipe:
        with self._lock.write_locked():
            recipe = new_recipe(self._new_id(), data)
            self._items[recipe.id] = recipe
            return recipe.model_copy(deep=True)

    def update(self, recipe_id: str, data: RecipeInput) -> Recipe:
        with self._lock.write_locked():
            updated = update_recipe(self._get(recipe_id), data)
            self._items[recipe_id] = updated
            return updated.model_copy(deep=True)
