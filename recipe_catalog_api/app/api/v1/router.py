"""
Top-level router for version 1 of the API.

This router aggregates the domain routers (auth, recipes, ratings,
search, sort, users, info).  When new endpoints are added, include
their routers here.
"""

from fastapi import APIRouter

from .endpoints import (
    auth,
    recipes,
    ratings,
    search,
    sort,
    users,
    info,
)

router = APIRouter()

router.include_router(auth.router, prefix="/auth", tags=["auth"])
router.include_router(recipes.router, prefix="/recipes", tags=["recipes"])
# Ratings are nested under their recipe: /recipes/{recipe_id}/ratings
router.include_router(ratings.router, prefix="/recipes/{recipe_id}/ratings", tags=["ratings"])
router.include_router(search.router, prefix="/search", tags=["search"])
router.include_router(sort.router, prefix="/sort", tags=["sort"])
# The users router defines both /users/me/... and /admin/users/... paths.
router.include_router(users.router, tags=["users"])
router.include_router(info.router, prefix="/info", tags=["info"])
