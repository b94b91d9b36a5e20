from .signup_schemas import SignUpResponse, UserSignUpRequest
from .text_generation_schemas import CustomizationOptionsSchema, TextGenerationRequest, TextGenerationResponse

__all__ = [
    "UserSignUpRequest", "SignUpResponse",
    "CustomizationOptionsSchema", "TextGenerationRequest", "TextGenerationResponse",
]
