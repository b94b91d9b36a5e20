import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from domain.services.text_generation_service import TextGenerationService, get_text_generation_service
from domain.use_cases.generate_text import GenerateTextUseCase
from presentation.schemas.text_generation_schemas import TextGenerationRequest, TextGenerationResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Text Generation"])


async def get_generate_text_use_case(
    text_generation_service: TextGenerationService = Depends(get_text_generation_service),
) -> GenerateTextUseCase:
    """テキスト生成ユースケースの依存性注入"""
    return GenerateTextUseCase(text_generation_service)


@router.post(
    "/generate",
    summary="AIレスポンス生成",
    description="OpenAI APIの function calling を使用して、指定したトーンと言語でレスポンスを生成します",
    response_model=TextGenerationResponse,
    response_model_exclude_none=True,
)
async def generate_text(request: Request, use_case: GenerateTextUseCase = Depends(get_generate_text_use_case)):
    """本文の解析からプロバイダ呼び出しまでの失敗はすべて 500 で返す"""
    try:
        payload = TextGenerationRequest.model_validate(await request.json())
        response = await use_case.execute(
            content=payload.content,
            tone=payload.options.tone,
            language=payload.options.language,
        )
        return JSONResponse({"success": True, "response": response}, status_code=200)

    except Exception as e:
        logger.error(f"Text generation failed: {e}")
        return JSONResponse(
            {
                "success": False,
                "message": "Failed to generate response.",
                "details": str(e),
            },
            status_code=500,
        )


# エクスポート用
text_generation_router = router
