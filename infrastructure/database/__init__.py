from .in_memory_user_repository import InMemoryUserRepository, get_user_repository

__all__ = ["InMemoryUserRepository", "get_user_repository"]
