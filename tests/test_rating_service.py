import pytest

from recipe_catalog_api.app.core.errors import NotFoundError, UnauthorizedError, ValidationError
from recipe_catalog_api.app.repositories import RatingRepository, RecipeRepository
from recipe_catalog_api.app.schemas.rating import RatingInput
from recipe_catalog_api.app.schemas.recipe import RecipeInput
from recipe_catalog_api.app.services import RatingService, RecipeService


@pytest.fixture
def recipe_service() -> RecipeService:
    return RecipeService(RecipeRepository())


@pytest.fixture
def service(recipe_service) -> RatingService:
    return RatingService(RatingRepository(), recipe_service)


@pytest.fixture
def recipe(recipe_service):
    return recipe_service.create_recipe(RecipeInput(title="Pasta Carbonara"))


def test_average_without_ratings_is_zero(service, recipe):
    assert service.get_average_rating(recipe.id) == 0


def test_average_is_mean_of_scores(service, recipe):
    for score in (5, 5, 5, 1):
        service.create_rating(recipe.id, "alice", RatingInput(score=score))

    assert service.get_average_rating(recipe.id) == 4.0


def test_average_is_not_rounded(service, recipe):
    for score in (5, 4, 4):
        service.create_rating(recipe.id, "alice", RatingInput(score=score))

    assert service.get_average_rating(recipe.id) == pytest.approx(13 / 3)


def test_create_rating_for_missing_recipe(service):
    with pytest.raises(NotFoundError):
        service.create_rating("missing", "alice", RatingInput(score=3))


@pytest.mark.parametrize("score", [0, 6, -1])
def test_score_out_of_range(service, recipe, score):
    with pytest.raises(ValidationError):
        service.create_rating(recipe.id, "alice", RatingInput(score=score))
    assert service.get_ratings_by_recipe_id(recipe.id) == []


def test_owner_can_update_and_delete(service, recipe):
    rating = service.create_rating(recipe.id, "alice", RatingInput(score=2, comment="too salty"))

    updated = service.update_rating(rating.id, "alice", RatingInput(score=4, comment="better now"))
    assert updated.score == 4
    assert updated.user_id == "alice"

    service.delete_rating(rating.id, "alice")
    with pytest.raises(NotFoundError):
        service.get_rating_by_id(rating.id)


def test_other_user_cannot_update(service, recipe):
    rating = service.create_rating(recipe.id, "alice", RatingInput(score=2, comment="too salty"))

    with pytest.raises(UnauthorizedError):
        service.update_rating(rating.id, "bob", RatingInput(score=5, comment="great"))

    assert service.get_rating_by_id(rating.id) == rating


def test_other_user_cannot_delete(service, recipe):
    rating = service.create_rating(recipe.id, "alice", RatingInput(score=2))

    with pytest.raises(UnauthorizedError):
        service.delete_rating(rating.id, "bob")

    assert service.get_rating_by_id(rating.id) == rating


def test_update_missing_rating(service):
    with pytest.raises(NotFoundError):
        service.update_rating("missing", "alice", RatingInput(score=3))
    with pytest.raises(NotFoundError):
        service.delete_rating("missing", "alice")


def test_ratings_by_user(service, recipe, recipe_service):
    other = recipe_service.create_recipe(RecipeInput(title="Beef Stew"))
    service.create_rating(recipe.id, "alice", RatingInput(score=5))
    service.create_rating(other.id, "alice", RatingInput(score=3))
    service.create_rating(other.id, "bob", RatingInput(score=1))

    assert {r.recipe_id for r in service.get_ratings_by_user_id("alice")} == {recipe.id, other.id}
    assert len(service.get_all_ratings()) == 3
