import pytest

from recipe_catalog_api.app.core.errors import ValidationError
from recipe_catalog_api.app.repositories import RecipeRepository
from recipe_catalog_api.app.schemas.recipe import RecipeInput
from recipe_catalog_api.app.services import RecipeService, SearchService


@pytest.fixture
def search() -> SearchService:
    recipes = RecipeService(RecipeRepository())
    recipes.create_recipe(
        RecipeInput(title="Pasta Carbonara", ingredients=["Spaghetti", "Eggs", "Guanciale"], tags=["italian"])
    )
    recipes.create_recipe(RecipeInput(title="Quick Salad", ingredients=["Lettuce", "Tomato"], tags=["vegetarian"]))
    recipes.create_recipe(RecipeInput(title="Tomato Pasta", ingredients=["penne", "tomato sauce"], tags=["Italian"]))
    return SearchService(recipes)


def test_search_by_ingredient_is_case_insensitive_substring(search):
    assert [r.title for r in search.search_by_ingredient("TOMATO")] == ["Quick Salad", "Tomato Pasta"]
    assert [r.title for r in search.search_by_ingredient("ghett")] == ["Pasta Carbonara"]
    assert search.search_by_ingredient("saffron") == []


def test_search_by_title_is_case_insensitive_substring(search):
    assert [r.title for r in search.search_by_title("pasta")] == ["Pasta Carbonara", "Tomato Pasta"]


def test_search_by_tag_is_exact(search):
    assert [r.title for r in search.search_by_tag("italian")] == ["Pasta Carbonara"]
    assert search.search_by_tag("ital") == []


@pytest.fixture
def five_recipes() -> SearchService:
    recipes = RecipeService(RecipeRepository())
    for i in range(1, 6):
        recipes.create_recipe(RecipeInput(title=f"Recipe {i}"))
    return SearchService(recipes)


@pytest.mark.parametrize(
    "page, expected",
    [
        (1, ["Recipe 1", "Recipe 2"]),
        (2, ["Recipe 3", "Recipe 4"]),
        (3, ["Recipe 5"]),
        (4, []),
    ],
)
def test_pagination(five_recipes, page, expected):
    assert [r.title for r in five_recipes.get_paginated_recipes(page, 2)] == expected


def test_pagination_is_stable_between_calls(five_recipes):
    first = five_recipes.get_paginated_recipes(2, 2)
    assert five_recipes.get_paginated_recipes(2, 2) == first


@pytest.mark.parametrize("page, page_size", [(0, 2), (1, 0), (-1, 10)])
def test_pagination_rejects_bad_bounds(five_recipes, page, page_size):
    with pytest.raises(ValidationError):
        five_recipes.get_paginated_recipes(page, page_size)
