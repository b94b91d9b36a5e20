"""
Process-local user store used by the sign-up endpoint
"""
import logging
import threading
from typing import Dict, Optional

from domain.entities import User
from domain.repositories import DuplicateUserError, UserRepository

logger = logging.getLogger(__name__)


class InMemoryUserRepository(UserRepository):
    """Dictionary-backed repository keyed by normalized email"""

    def __init__(self):
        self._lock = threading.Lock()
        self._users_by_email: Dict[str, User] = {}
        self._users_by_id: Dict[str, User] = {}

    def add(self, user: User) -> None:
        key = user.email.lower()
        with self._lock:
            if key in self._users_by_email:
                raise DuplicateUserError(user.email)
            self._users_by_email[key] = user
            self._users_by_id[user.user_id] = user
        logger.debug(f"Stored user {user.user_id}")

    def get_by_email(self, email: str) -> Optional[User]:
        with self._lock:
            return self._users_by_email.get(email.lower())

    def get_by_id(self, user_id: str) -> Optional[User]:
        with self._lock:
            return self._users_by_id.get(user_id)

    def __len__(self) -> int:
        with self._lock:
            return len(self._users_by_id)


_user_repository: Optional[InMemoryUserRepository] = None


def get_user_repository() -> InMemoryUserRepository:
    """Get global user repository instance"""
    global _user_repository
    if _user_repository is None:
        _user_repository = InMemoryUserRepository()
    return _user_repository
