from .signup_api import signup_router
from .text_generation_api import text_generation_router

__all__ = [
    "signup_router",
    "text_generation_router",
]
