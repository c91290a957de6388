"""
Pydantic schemas for recipes.

``RecipeInput`` is the payload clients send when creating or replacing
a recipe; ``Recipe`` is the stored entity with its server-assigned
identifier and timestamps.  ``new_recipe`` and ``update_recipe`` are
the only places where recipe entities are built.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, Field, computed_field

from .base import utcnow


class RecipeInput(BaseModel):
    """Schema for creating or replacing a recipe."""

    title: str = Field(..., examples=["Pasta Carbonara"])
    description: str = Field("", examples=["Creamy Roman pasta"])
    ingredients: List[str] = Field(default_factory=list, examples=[["spaghetti", "eggs", "guanciale"]])
    instructions: List[str] = Field(default_factory=list, examples=[["Boil pasta", "Mix with eggs"]])
    prep_time: int = Field(0, description="Preparation time in minutes")
    cook_time: int = Field(0, description="Cooking time in minutes")
    servings: int = Field(0, description="Number of servings")
    tags: List[str] = Field(default_factory=list, examples=[["italian", "dinner"]])


class Recipe(RecipeInput):
    """Schema for a stored recipe."""

    id: str
    created_at: datetime
    updated_at: datetime

    @computed_field  # type: ignore[misc]
    @property
    def total_time(self) -> int:
        return self.prep_time + self.cook_time


def new_recipe(recipe_id: str, data: RecipeInput) -> Recipe:
    """Build a recipe from ``data`` stamped with the current time."""
    now = utcnow()
    return Recipe(id=recipe_id, created_at=now, updated_at=now, **data.model_dump())


def update_recipe(original: Recipe, data: RecipeInput) -> Recipe:
    """Replace every field of ``original`` except its id and creation time."""
    return Recipe(
        id=original.id,
        created_at=original.created_at,
        updated_at=utcnow(),
        **data.model_dump(),
    )
