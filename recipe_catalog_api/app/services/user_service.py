"""
Business logic for users and authentication.

``UserService`` registers users, hashes their passwords and exchanges
valid credentials for signed bearer tokens.  Token signing is
delegated to the ``TokenService`` handed in at construction, which
holds the signing secret.
"""

import logging
from typing import List

from ..core.errors import InvalidCredentialsError, NotFoundError, ValidationError
from ..core.security import (
    DEFAULT_PASSWORD_ITERATIONS,
    TokenClaims,
    TokenService,
    hash_password,
    verify_password,
)
from ..repositories import UserRepository
from ..schemas.user import User, UserInput


logger = logging.getLogger(__name__)


class UserService:
    """Service for managing users and issuing tokens."""

    def __init__(
        self,
        repository: UserRepository,
        token_service: TokenService,
        password_iterations: int = DEFAULT_PASSWORD_ITERATIONS,
    ) -> None:
        self.repository = repository
        self.token_service = token_service
        self.password_iterations = password_iterations

    def get_all_users(self) -> List[User]:
        return self.repository.find_all()

    def get_user_by_id(self, user_id: str) -> User:
        return self.repository.find_by_id(user_id)

    def create_user(self, data: UserInput) -> User:
        """Register a new user.

        The password is required and stored only as a salted hash.
        Raises ``DuplicateError`` if the username or email is taken.
        """
        if not data.password:
            raise ValidationError("password is required")
        logger.info("Registering user %s", data.username)
        user = self.repository.create(data, hash_password(data.password, self.password_iterations))
        logger.info("Registered user %s with role %s", user.id, user.role)
        return user

    def update_user(self, user_id: str, data: UserInput) -> User:
        """Update username and email, plus role and password when given."""
        password_hash = None
        if data.password:
            password_hash = hash_password(data.password, self.password_iterations)
        user = self.repository.update(user_id, data, password_hash)
        logger.info("Updated user %s", user_id)
        return user

    def delete_user(self, user_id: str) -> None:
        self.repository.delete(user_id)
        logger.info("Deleted user %s", user_id)

    def authenticate(self, username: str, password: str) -> str:
        """Check credentials and return a signed access token.

        An unknown username and a wrong password raise the same
        ``InvalidCredentialsError``.
        """
        try:
            user = self.repository.find_by_username(username)
        except NotFoundError:
            logger.warning("Failed login for unknown user %s", username)
            raise InvalidCredentialsError() from None
        if not verify_password(password, user.password_hash):
            logger.warning("Failed login for user %s", username)
            raise InvalidCredentialsError()
        logger.info("User %s logged in", user.id)
        return self.token_service.create_access_token(user.id, user.role)

    def validate_token(self, token: str) -> TokenClaims:
        """Return the identity embedded in ``token``.

        Raises ``InvalidTokenError`` for malformed, forged or expired
        tokens.
        """
        return self.token_service.decode_access_token(token)
