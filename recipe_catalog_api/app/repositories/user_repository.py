"""
Storage for users.

Usernames and emails are unique.  Both are checked by scanning the
collection under the write lock, in the same critical section as the
insert or update, so two concurrent registrations cannot both succeed.
"""

from typing import Optional

from ..core.errors import DuplicateError
from ..schemas.user import User, UserInput, new_user, update_user
from .base import InMemoryRepository


class UserRepository(InMemoryRepository[User]):
    entity_name = "user"

    def _find_one(self, field: str, value: str) -> User:
        with self._lock.read_locked():
            for user in self._items.values():
                if getattr(user, field) == value:
                    return user.model_copy(deep=True)
        raise self._not_found(value)

    def find_by_username(self, username: str) -> User:
        return self._find_one("username", username)

    def find_by_email(self, email: str) -> User:
        return self._find_one("email", email)

    def _check_unique(self, data: UserInput, exclude_id: Optional[str] = None) -> None:
        # Caller must hold the write lock.
        for user in self._items.values():
            if user.id == exclude_id:
                continue
            if user.username == data.username:
                raise DuplicateError("username already exists")
            if user.email == data.email:
                raise DuplicateError("email already exists")

    def create(self, data: UserInput, password_hash: str) -> User:
        with self._lock.write_locked():
            self._check_unique(data)
            user = new_user(self._new_id(), data, password_hash)
            self._items[user.id] = user
            return user.model_copy(deep=True)

    def update(self, user_id: str, data: UserInput, password_hash: Optional[str] = None) -> User:
        with self._lock.write_locked():
            original = self._get(user_id)
            self._check_unique(data, exclude_id=user_id)
            updated = update_user(original, data, password_hash)
            self._items[user_id] = updated
            return updated.model_copy(deep=True)
