"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to
the in-memory repositories.  Services raise the errors defined in
``core.errors`` and know nothing about HTTP.
"""

from .rating_service import RatingService
from .recipe_service import RecipeService, SortBy
from .search_service import SearchService
from .user_service import UserService

__all__ = ["RatingService", "RecipeService", "SearchService", "SortBy", "UserService"]
