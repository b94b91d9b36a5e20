import logging
from typing import Optional

from config import env
from domain.entities.text_generation import CustomizationOptions, TextGenerationRequest, Tone
from domain.services.text_generation_service import TextGenerationService

logger = logging.getLogger(__name__)


class GenerateTextUseCase:
    """テキスト生成ユースケース"""

    def __init__(self, text_generation_service: TextGenerationService, model: Optional[str] = None):
        self.text_generation_service = text_generation_service
        self.model = model or env.get_openai_model()

    async def execute(self, content: str, tone: Tone, language: str) -> str:
        """テキスト生成を実行する"""
        request = TextGenerationRequest(
            content=content,
            options=CustomizationOptions(tone=Tone(tone), language=language),
            model=self.model,
        )
        logger.info(f"Generating response (tone={request.options.tone.value}, language={language})")
        return await self.text_generation_service.generate_response(request)
