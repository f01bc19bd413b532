"""
OpenRouter Service Implementation
Uses various free/cheap models via the OpenRouter chat completions API
"""
import httpx
import structlog

from jobboardly.config import settings
from jobboardly.core.exceptions import PromptServiceError
from .base import PromptProvider
from .openai_service import SYSTEM_PROMPT

logger = structlog.get_logger(__name__)


class OpenRouterService(PromptProvider):
    """OpenRouter API implementation (access to multiple models)"""

    def __init__(self):
        self.api_key = settings.OPENROUTER_API_KEY
        self.base_url = "https://openrouter.ai/api/v1"
        self.chat_model = settings.OPENROUTER_MODEL
        self.timeout = settings.OPENROUTER_TIMEOUT

    async def generate(self, prompt: str) -> str:
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    headers={
                        "Authorization": f"Bearer {self.api_key}",
                        "HTTP-Referer": settings.APP_URL,
                        "X-Title": settings.APP_NAME,
                    },
                    json={
                        "model": self.chat_model,
                        "messages": [
                            {"role": "system", "content": SYSTEM_PROMPT},
                            {"role": "user", "content": prompt},
                        ],
                        "temperature": settings.AI_TEMPERATURE,
                        "max_tokens": settings.AI_MAX_OUTPUT_TOKENS,
                    },
                )
                response.raise_for_status()
                data = response.json()
        except httpx.HTTPError as e:
            logger.error("openrouter_http_error", error=str(e))
            raise PromptServiceError(f"OpenRouter request failed: {e}") from e
        except ValueError as e:
            raise PromptServiceError("OpenRouter returned a non-JSON payload") from e

        try:
            return data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as e:
            raise PromptServiceError("OpenRouter returned an unexpected payload") from e

    @property
    def name(self) -> str:
        return "openrouter"
