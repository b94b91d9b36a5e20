from typing import Optional

from pydantic import BaseModel, Field

from domain.entities.text_generation import Tone


class CustomizationOptionsSchema(BaseModel):
    """生成オプションスキーマ"""

    tone: Tone = Field(..., description="生成テキストのトーン")
    language: str = Field(..., description="生成テキストの言語")


class TextGenerationRequest(BaseModel):
    """テキスト生成リクエストスキーマ"""

    content: str = Field(..., description="生成の元となるテキスト")
    options: CustomizationOptionsSchema = Field(..., description="トーンと言語")


class TextGenerationResponse(BaseModel):
    """テキスト生成レスポンススキーマ"""

    success: bool = Field(..., description="生成に成功したかどうか")
    response: Optional[str] = Field(None, description="生成されたテキスト")
    message: Optional[str] = Field(None, description="エラーメッセージ")
    details: Optional[str] = Field(None, description="エラーの詳細")
