from .user_repository import DuplicateUserError, UserRepository

__all__ = ["UserRepository", "DuplicateUserError"]
