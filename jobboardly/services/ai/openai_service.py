"""
OpenAI Service Implementation
Uses GPT-4o-mini in JSON mode
"""
import structlog
from openai import AsyncOpenAI, OpenAIError

from jobboardly.config import settings
from jobboardly.core.exceptions import PromptServiceError
from .base import PromptProvider

logger = structlog.get_logger(__name__)

SYSTEM_PROMPT = "You are a recruitment matching assistant. Always answer with a single JSON object."


class OpenAIService(PromptProvider):
    """OpenAI API implementation"""

    def __init__(self):
        self.client = AsyncOpenAI(api_key=settings.OPENAI_API_KEY)
        self.chat_model = settings.OPENAI_MODEL

    async def generate(self, prompt: str) -> str:
        try:
            response = await self.client.chat.completions.create(
                model=self.chat_model,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                response_format={"type": "json_object"},
                temperature=settings.AI_TEMPERATURE,
                max_tokens=settings.AI_MAX_OUTPUT_TOKENS,
            )
        except OpenAIError as e:
            logger.error("openai_request_failed", error=str(e))
            raise PromptServiceError(f"OpenAI request failed: {e}") from e

        content = response.choices[0].message.content if response.choices else None
        if not content:
            raise PromptServiceError("OpenAI returned an empty response")
        return content

    @property
    def name(self) -> str:
        return "openai"
