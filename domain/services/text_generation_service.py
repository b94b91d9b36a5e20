import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, Optional

import openai
from openai import AsyncOpenAI

from config import env
from domain.entities.text_generation import TextGenerationRequest

logger = logging.getLogger(__name__)

TOOL_NAME = "generate_response"

GENERATE_RESPONSE_TOOL: Dict[str, Any] = {
    "type": "function",
    "function": {
        "name": TOOL_NAME,
        "description": "Generate an AI-powered response based on the provided content",
        "parameters": {
            "type": "object",
            "properties": {
                "response": {
                    "type": "string",
                    "description": "The AI-generated response",
                },
            },
            "required": ["response"],
        },
    },
}

PROMPT_TEMPLATE = """Generate an AI response with the following content:

Content: {content}
Tone: {tone}
Language: {language}"""


class TextGenerationError(Exception):
    """テキスト生成に失敗した場合の例外"""


def build_prompt(request: TextGenerationRequest) -> str:
    """リクエストからプロンプト文字列を組み立てる"""
    tone = request.options.tone
    return PROMPT_TEMPLATE.format(
        content=request.content,
        tone=getattr(tone, "value", tone),
        language=request.options.language,
    )


class TextGenerationService(ABC):
    """テキスト生成サービスの抽象クラス"""

    @abstractmethod
    async def generate_response(self, request: TextGenerationRequest) -> str:
        """トーンと言語を指定してレスポンス文を生成する"""
        pass


class OpenAITextGenerationService(TextGenerationService):
    """OpenAI APIの function calling を使用したテキスト生成サービス"""

    def __init__(self, api_key: Optional[str] = None, client: Optional[AsyncOpenAI] = None):
        self._api_key = api_key
        self._client = client

    @property
    def client(self) -> AsyncOpenAI:
        # APIキー未設定の場合は呼び出し時にプロバイダのエラーとなる
        if self._client is None:
            self._client = AsyncOpenAI(api_key=self._api_key or env.get_openai_api_key())
        return self._client

    async def generate_response(self, request: TextGenerationRequest) -> str:
        """ツール呼び出しを強制し、引数の response フィールドを返す"""
        try:
            completion = await self.client.chat.completions.create(
                model=request.model,
                messages=[{"role": "user", "content": build_prompt(request)}],
                tools=[GENERATE_RESPONSE_TOOL],
                tool_choice={"type": "function", "function": {"name": TOOL_NAME}},
            )
        except openai.OpenAIError as e:
            logger.error(f"OpenAI API error: {e}")
            raise TextGenerationError(f"Error generating response: {e}") from e

        return parse_tool_response(completion)


def parse_tool_response(completion: Any) -> str:
    """chat completion の最初のツール呼び出しから response を取り出す"""
    tool_calls = completion.choices[0].message.tool_calls if completion.choices else None
    if not tool_calls or tool_calls[0].function.name != TOOL_NAME:
        logger.warning("OpenAI returned no generate_response tool call")
        raise TextGenerationError("Error generating response: Unexpected response from OpenAI")

    try:
        arguments = json.loads(tool_calls[0].function.arguments)
    except json.JSONDecodeError as e:
        raise TextGenerationError(f"Error generating response: invalid tool arguments ({e})") from e

    if not isinstance(arguments, dict) or not isinstance(arguments.get("response"), str):
        raise TextGenerationError("Error generating response: tool arguments missing 'response'")
    return arguments["response"]


def get_text_generation_service() -> TextGenerationService:
    """テキスト生成サービスのファクトリ関数"""
    return OpenAITextGenerationService()
