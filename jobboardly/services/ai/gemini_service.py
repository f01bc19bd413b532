"""
Google Gemini Service Implementation
Uses Gemini 1.5 Flash with JSON response mode
"""
import google.generativeai as genai
import structlog

from jobboardly.config import settings
from jobboardly.core.exceptions import PromptServiceError
from .base import PromptProvider

logger = structlog.get_logger(__name__)


class GeminiService(PromptProvider):
    """Google Gemini API implementation"""

    def __init__(self):
        genai.configure(api_key=settings.GEMINI_API_KEY)
        self.model = genai.GenerativeModel(settings.GEMINI_MODEL)

    async def generate(self, prompt: str) -> str:
        try:
            response = await self.model.generate_content_async(
                prompt,
                generation_config=genai.types.GenerationConfig(
                    temperature=settings.AI_TEMPERATURE,
                    max_output_tokens=settings.AI_MAX_OUTPUT_TOKENS,
                    response_mime_type="application/json",
                ),
            )
            # .text raises ValueError when the candidate was blocked or empty
            text = response.text
        except Exception as e:
            logger.error("gemini_request_failed", error=str(e))
            raise PromptServiceError(f"Gemini request failed: {e}") from e

        logger.debug("gemini_response_received", chars=len(text))
        return text

    @property
    def name(self) -> str:
        return "gemini"
