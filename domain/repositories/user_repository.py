from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import User


class DuplicateUserError(Exception):
    """Raised by add() when the email is already stored"""


class UserRepository(ABC):
    @abstractmethod
    def add(self, user: User) -> None:
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[User]:
        pass

    @abstractmethod
    def get_by_id(self, user_id: str) -> Optional[User]:
        pass
