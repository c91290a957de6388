"""
Assembly of repositories and services.

``build_container`` wires one repository per entity and the services
on top of them from a ``Settings`` instance.  The application factory
stores the result on ``app.state.container``; endpoints reach it
through the dependencies in ``api.deps``.
"""

from dataclasses import dataclass

from .core.config import Settings
from .core.security import TokenService
from .repositories import RatingRepository, RecipeRepository, UserRepository
from .services import RatingService, RecipeService, SearchService, UserService


@dataclass
class ServiceContainer:
    settings: Settings
    recipe_service: RecipeService
    rating_service: RatingService
    search_service: SearchService
    user_service: UserService


def build_container(settings: Settings) -> ServiceContainer:
    recipes = RecipeRepository()
    ratings = RatingRepository()
    users = UserRepository()

    token_service = TokenService(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
        expires_minutes=settings.access_token_expire_minutes,
    )
    recipe_service = RecipeService(recipes, ratings, cascade_rating_delete=settings.cascade_rating_delete)
    return ServiceContainer(
        settings=settings,
        recipe_service=recipe_service,
        rating_service=RatingService(ratings, recipe_service),
        search_service=SearchService(recipe_service),
        user_service=UserService(users, token_service, settings.password_hash_iterations),
    )
