"""
User endpoints for API v1.

``/users/me/ratings`` lists the ratings left by the caller.  The
``/admin/users`` routes let administrators (role ``admin``) list,
inspect, update and delete accounts.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from recipe_catalog_api.app.api.deps import get_rating_service, get_user_service
from recipe_catalog_api.app.core.security import TokenClaims, get_current_user, require_roles
from recipe_catalog_api.app.schemas.rating import Rating
from recipe_catalog_api.app.schemas.user import UserInput, UserRead, to_read
from recipe_catalog_api.app.services import RatingService, UserService


ADMIN_ROLE = "admin"

router = APIRouter()


@router.get("/users/me/ratings", response_model=List[Rating])
def my_ratings(
    current_user: TokenClaims = Depends(get_current_user),
    ratings: RatingService = Depends(get_rating_service),
) -> List[Rating]:
    return ratings.get_ratings_by_user_id(current_user.user_id)


@router.get("/admin/users", response_model=List[UserRead])
def list_users(
    current_user: TokenClaims = Depends(require_roles(ADMIN_ROLE)),
    users: UserService = Depends(get_user_service),
) -> List[UserRead]:
    return [to_read(user) for user in users.get_all_users()]


@router.get("/admin/users/{user_id}", response_model=UserRead)
def get_user(
    user_id: str,
    current_user: TokenClaims = Depends(require_roles(ADMIN_ROLE)),
    users: UserService = Depends(get_user_service),
) -> UserRead:
    return to_read(users.get_user_by_id(user_id))


@router.put("/admin/users/{user_id}", response_model=UserRead)
def update_user(
    user_id: str,
    data: UserInput,
    current_user: TokenClaims = Depends(require_roles(ADMIN_ROLE)),
    users: UserService = Depends(get_user_service),
) -> UserRead:
    """Update a user's username, email, and optionally role and password."""
    return to_read(users.update_user(user_id, data))


@router.delete("/admin/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: str,
    current_user: TokenClaims = Depends(require_roles(ADMIN_ROLE)),
    users: UserService = Depends(get_user_service),
) -> None:
    """Delete a user.  Administrators cannot delete their own account."""
    if current_user.user_id == user_id:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot delete your own account")
    users.delete_user(user_id)
    return None
