"""
Authentication endpoints for API v1.

Users register with a username, email and password, then exchange
their credentials for a bearer token at ``/login``.  The token must be
sent as ``Authorization: Bearer <token>`` to every protected route and
is valid for 24 hours by default.
"""

from fastapi import APIRouter, Depends, status

from recipe_catalog_api.app.api.deps import get_user_service
from recipe_catalog_api.app.core.security import TokenClaims, get_current_user
from recipe_catalog_api.app.schemas.user import LoginRequest, Token, UserInput, UserRead, to_read
from recipe_catalog_api.app.services import UserService


router = APIRouter()


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(data: UserInput, users: UserService = Depends(get_user_service)) -> UserRead:
    """Register a new user.

    Self-registered accounts always get the ``user`` role; administrators
    grant other roles through ``PUT /admin/users/{id}``.  A taken
    username or email yields 409.
    """
    return to_read(users.create_user(data.model_copy(update={"role": None})))


@router.post("/login", response_model=Token)
def login_user(credentials: LoginRequest, users: UserService = Depends(get_user_service)) -> Token:
    """Authenticate a user and return a bearer token.

    Wrong usernames and wrong passwords produce the same 401 response.
    """
    token = users.authenticate(credentials.username, credentials.password)
    return Token(access_token=token)


@router.get("/me", response_model=UserRead)
def read_current_user(
    current_user: TokenClaims = Depends(get_current_user),
    users: UserService = Depends(get_user_service),
) -> UserRead:
    return to_read(users.get_user_by_id(current_user.user_id))
