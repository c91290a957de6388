"""
FastAPI dependencies giving endpoints access to the services.

The services live on ``app.state.container`` (see ``container.py``),
so each application instance, including the ones built in tests, has
its own storage and signing key.
"""

from fastapi import Request

from ..container import ServiceContainer
from ..core.config import Settings
from ..services import RatingService, RecipeService, SearchService, UserService


def get_container(request: Request) -> ServiceContainer:
    return request.app.state.container


def get_settings(request: Request) -> Settings:
    return get_container(request).settings


def get_recipe_service(request: Request) -> RecipeService:
    return get_container(request).recipe_service


def get_rating_service(request: Request) -> RatingService:
    return get_container(request).rating_service


def get_search_service(request: Request) -> SearchService:
    return get_container(request).search_service


def get_user_service(request: Request) -> UserService:
    return get_container(request).user_service
