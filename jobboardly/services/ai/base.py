"""
Base AI Provider Interface
Abstract class for all prompt providers (Gemini, OpenAI, OpenRouter)
"""
import json
import re
from abc import ABC, abstractmethod
from typing import Any, Dict

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


class PromptProvider(ABC):
    """Base class for all AI providers"""

    @abstractmethod
    async def generate(self, prompt: str) -> str:
        """
        Run a single prompt and return the raw model text.

        Implementations ask the model for a JSON object but return the text
        untouched; parsing and schema validation belong to the caller.

        Raises:
            PromptServiceError: the request failed (network, auth, quota,
                blocked/empty response)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name"""
        pass


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Parse the JSON object in a model response.

    Models sometimes wrap JSON in markdown fences or prose, so the outermost
    ``{...}`` span is parsed when the whole text is not valid JSON.

    Raises:
        ValueError: no JSON object could be parsed
    """
    try:
        result = json.loads(text)
    except (json.JSONDecodeError, TypeError):
        match = _JSON_OBJECT.search(text or "")
        if not match:
            raise ValueError("Response does not contain a JSON object")
        result = json.loads(match.group())

    if not isinstance(result, dict):
        raise ValueError(f"Expected a JSON object, got {type(result).__name__}")
    return result
