from .text_generation import CustomizationOptions, TextGenerationRequest, Tone
from .user import SignUpResult, User, UserSignUp

__all__ = [
    "Tone",
    "CustomizationOptions",
    "TextGenerationRequest",
    "UserSignUp",
    "User",
    "SignUpResult",
]
