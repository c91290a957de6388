"""
Search and pagination over the recipe collection.

Text searches are case-insensitive substring matches.  Tag search is
an exact match and is delegated to ``RecipeService``.
"""

from typing import List

from ..core.errors import ValidationError
from ..schemas.recipe import Recipe
from .recipe_service import RecipeService


class SearchService:
    """Service for finding and paging recipes."""

    def __init__(self, recipe_service: RecipeService) -> None:
        self.recipe_service = recipe_service

    def search_by_ingredient(self, ingredient: str) -> List[Recipe]:
        needle = ingredient.lower()
        return [
            recipe
            for recipe in self.recipe_service.get_all_recipes()
            if any(needle in item.lower() for item in recipe.ingredients)
        ]

    def search_by_tag(self, tag: str) -> List[Recipe]:
        return self.recipe_service.filter_recipes_by_tag(tag)

    def search_by_title(self, title: str) -> List[Recipe]:
        needle = title.lower()
        return [recipe for recipe in self.recipe_service.get_all_recipes() if needle in recipe.title.lower()]

    def get_paginated_recipes(self, page: int, page_size: int) -> List[Recipe]:
        """Return page ``page`` (1-indexed) of ``page_size`` recipes.

        Pages past the end are empty.  Recipes are paged in creation
        order.
        """
        if page < 1:
            raise ValidationError("page must be 1 or greater")
        if page_size < 1:
            raise ValidationError("page_size must be 1 or greater")
        recipes = self.recipe_service.get_all_recipes()
        start = (page - 1) * page_size
        if start >= len(recipes):
            return []
        end = min(start + page_size, len(recipes))
        return recipes[start:end]
