from .generate_text import GenerateTextUseCase
from .sign_up import SignUpError, SignUpUseCase

__all__ = ["GenerateTextUseCase", "SignUpUseCase", "SignUpError"]
