"""
In-memory storage for the catalog entities.

Each repository owns one keyed collection and one readers-writer lock.
Reads take the shared lock, mutations the exclusive lock, and no
operation spans two repositories.  Data lives in process memory only
and is lost on restart.
"""

from .rating_repository import RatingRepository
from .recipe_repository import RecipeRepository
from .user_repository import UserRepository

__all__ = ["RatingRepository", "RecipeRepository", "UserRepository"]
