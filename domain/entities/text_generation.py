from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Tone(str, Enum):
    """生成テキストのトーン"""

    FORMAL = "formal"
    INFORMAL = "informal"
    FRIENDLY = "friendly"
    PROFESSIONAL = "professional"


@dataclass
class CustomizationOptions:
    """生成テキストのカスタマイズオプション"""

    tone: Tone
    language: str


@dataclass
class TextGenerationRequest:
    """テキスト生成リクエストのドメインエンティティ"""

    content: str
    options: CustomizationOptions
    model: Optional[str] = "gpt-4o-mini"

