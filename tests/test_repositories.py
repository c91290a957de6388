from datetime import datetime, timedelta, timezone

import pytest

from recipe_catalog_api.app.core.errors import DuplicateError, NotFoundError
from recipe_catalog_api.app.repositories import RatingRepository, RecipeRepository, UserRepository
from recipe_catalog_api.app.schemas.rating import RatingInput
from recipe_catalog_api.app.schemas.recipe import RecipeInput
from recipe_catalog_api.app.schemas.user import UserInput


CARBONARA = RecipeInput(
    title="Pasta Carbonara",
    description="Creamy Roman pasta",
    ingredients=["spaghetti", "eggs", "guanciale"],
    instructions=["Boil pasta", "Mix with eggs"],
    prep_time=15,
    cook_time=20,
    servings=4,
    tags=["italian", "dinner"],
)


def test_create_then_find_returns_identical_fields():
    repo = RecipeRepository()
    created = repo.create(CARBONARA)

    found = repo.find_by_id(created.id)

    assert found.id == created.id
    assert found.id
    assert found.model_dump(include=set(RecipeInput.model_fields)) == CARBONARA.model_dump()
    assert found.total_time == 35


def test_created_ids_are_unique():
    repo = RecipeRepository()
    ids = {repo.create(RecipeInput(title=f"Recipe {i}")).id for i in range(20)}
    assert len(ids) == 20


def test_update_keeps_id_and_created_at_and_advances_updated_at(monkeypatch):
    repo = RecipeRepository()
    t0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
    monkeypatch.setattr("recipe_catalog_api.app.schemas.recipe.utcnow", lambda: t0)
    original = repo.create(CARBONARA)

    t1 = t0 + timedelta(minutes=5)
    monkeypatch.setattr("recipe_catalog_api.app.schemas.recipe.utcnow", lambda: t1)
    replacement = RecipeInput(title="Quick Salad", prep_time=10, tags=["vegetarian"])
    updated = repo.update(original.id, replacement)

    assert updated.id == original.id
    assert updated.created_at == t0
    assert updated.updated_at == t1
    assert updated.title == "Quick Salad"
    assert updated.ingredients == []
    assert updated.cook_time == 0
    assert repo.find_by_id(original.id) == updated


def test_delete_then_find_raises_not_found():
    repo = RecipeRepository()
    recipe = repo.create(CARBONARA)
    repo.delete(recipe.id)

    with pytest.raises(NotFoundError):
        repo.find_by_id(recipe.id)


@pytest.mark.parametrize("operation", ["find", "update", "delete"])
def test_unknown_id_raises_not_found(operation):
    repo = RecipeRepository()
    with pytest.raises(NotFoundError):
        if operation == "find":
            repo.find_by_id("missing")
        elif operation == "update":
            repo.update("missing", CARBONARA)
        else:
            repo.delete("missing")


def test_returned_entities_are_copies():
    repo = RecipeRepository()
    recipe = repo.create(CARBONARA)
    recipe.tags.append("mutated")

    assert repo.find_by_id(recipe.id).tags == ["italian", "dinner"]


def test_find_all_keeps_insertion_order():
    repo = RecipeRepository()
    titles = ["Zucchini Bread", "Apple Pie", "Miso Soup"]
    for title in titles:
        repo.create(RecipeInput(title=title))

    assert [r.title for r in repo.find_all()] == titles


def test_rating_finders_by_recipe_and_user():
    repo = RatingRepository()
    repo.create("r1", "alice", RatingInput(score=5))
    repo.create("r1", "bob", RatingInput(score=3))
    repo.create("r2", "alice", RatingInput(score=4))

    assert sorted(r.user_id for r in repo.find_by_recipe_id("r1")) == ["alice", "bob"]
    assert sorted(r.recipe_id for r in repo.find_by_user_id("alice")) == ["r1", "r2"]
    assert repo.find_by_recipe_id("r3") == []


def test_rating_update_never_changes_owner_or_recipe():
    repo = RatingRepository()
    rating = repo.create("r1", "alice", RatingInput(score=2, comment="meh"))

    updated = repo.update(rating.id, RatingInput(score=4, comment="better"))

    assert (updated.user_id, updated.recipe_id) == ("alice", "r1")
    assert (updated.score, updated.comment) == (4, "better")
    assert updated.created_at == rating.created_at


def test_delete_by_recipe_id_removes_only_that_recipe():
    repo = RatingRepository()
    repo.create("r1", "alice", RatingInput(score=5))
    repo.create("r1", "bob", RatingInput(score=3))
    kept = repo.create("r2", "alice", RatingInput(score=4))

    assert repo.delete_by_recipe_id("r1") == 2
    assert repo.find_all() == [kept]


def _user(username="testuser", email="test@example.com", **kwargs) -> UserInput:
    return UserInput(username=username, email=email, password="password123", **kwargs)


def test_user_create_rejects_duplicate_username_and_email():
    repo = UserRepository()
    original = repo.create(_user(), "hash")

    with pytest.raises(DuplicateError, match="username"):
        repo.create(_user(email="other@example.com"), "hash2")
    with pytest.raises(DuplicateError, match="email"):
        repo.create(_user(username="other"), "hash2")

    assert repo.find_all() == [original]


def test_user_update_allows_keeping_own_name_but_not_taking_others():
    repo = UserRepository()
    alice = repo.create(_user("alice", "alice@example.com"), "hash")
    repo.create(_user("bob", "bob@example.com"), "hash")

    renamed = repo.update(alice.id, _user("alice", "alice@new.example.com"))
    assert renamed.email == "alice@new.example.com"
    assert renamed.password_hash == "hash"

    with pytest.raises(DuplicateError):
        repo.update(alice.id, _user("bob", "alice@new.example.com"))
    assert repo.find_by_id(alice.id).username == "alice"


def test_user_finders():
    repo = UserRepository()
    user = repo.create(_user(), "hash")

    assert repo.find_by_username("testuser").id == user.id
    assert repo.find_by_email("test@example.com").id == user.id
    with pytest.raises(NotFoundError):
        repo.find_by_username("nobody")


def test_user_role_defaults_to_user():
    repo = UserRepository()
    assert repo.create(_user(), "hash").role == "user"
    assert repo.create(_user("chef", "chef@example.com", role=""), "hash").role == "user"
    assert repo.create(_user("boss", "boss@example.com", role="admin"), "hash").role == "admin"


def test_password_hash_is_not_serialized():
    repo = UserRepository()
    user = repo.create(_user(), "secret-hash")

    assert "password_hash" not in user.model_dump()
    assert "secret-hash" not in user.model_dump_json()
