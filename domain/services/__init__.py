from .text_generation_service import (
    OpenAITextGenerationService,
    TextGenerationError,
    TextGenerationService,
    get_text_generation_service,
)

__all__ = [
    "TextGenerationService",
    "OpenAITextGenerationService",
    "TextGenerationError",
    "get_text_generation_service",
]
