"""
AI Provider Factory
Centralized access to prompt providers with construction-time fallback
"""
from typing import Dict, Optional

import structlog

from jobboardly.config import settings
from .base import PromptProvider
from .gemini_service import GeminiService
from .openai_service import OpenAIService
from .openrouter_service import OpenRouterService

logger = structlog.get_logger(__name__)


class AIFactory:
    """Factory to get AI provider based on configuration"""

    _providers = {
        'gemini': GeminiService,
        'openai': OpenAIService,
        'openrouter': OpenRouterService,
    }

    _instances: Dict[str, PromptProvider] = {}  # Singleton instances

    _key_mapping = {
        'gemini': 'GEMINI_API_KEY',
        'openai': 'OPENAI_API_KEY',
        'openrouter': 'OPENROUTER_API_KEY',
    }

    @classmethod
    def get_provider(cls, provider_name: Optional[str] = None) -> PromptProvider:
        """
        Get AI provider instance

        Args:
            provider_name: 'gemini', 'openai' or 'openrouter'.
                          If None, uses settings.AI_PROVIDER

        Raises:
            ValueError: If provider not found or API key missing
        """
        if provider_name is None:
            provider_name = settings.AI_PROVIDER

        if provider_name in cls._instances:
            return cls._instances[provider_name]

        provider_class = cls._providers.get(provider_name)
        if not provider_class:
            available = ', '.join(cls._providers.keys())
            raise ValueError(
                f"Unknown AI provider: {provider_name}. "
                f"Available providers: {available}"
            )

        cls._validate_api_key(provider_name)

        instance = provider_class()
        cls._instances[provider_name] = instance
        logger.info("ai_provider_initialized", provider=provider_name)
        return instance

    @classmethod
    def get_provider_with_fallback(cls, primary: Optional[str] = None) -> PromptProvider:
        """
        Get the primary provider, or the fallback when the primary cannot be
        constructed (unknown name, missing key). Request failures are never
        retried on the fallback.
        """
        if primary is None:
            primary = settings.AI_PROVIDER
        fallback = settings.AI_FALLBACK_PROVIDER

        try:
            return cls.get_provider(primary)
        except ValueError as e:
            if not fallback or fallback == primary:
                raise
            logger.warning("ai_provider_unavailable", provider=primary, fallback=fallback, error=str(e))
            return cls.get_provider(fallback)

    @classmethod
    def _validate_api_key(cls, provider_name: str):
        """Validate that API key is configured"""
        key_name = cls._key_mapping.get(provider_name)
        if not key_name:
            return

        if not getattr(settings, key_name, None):
            raise ValueError(
                f"{provider_name} requires {key_name} to be set in environment variables"
            )

    @classmethod
    def list_providers(cls) -> list:
        """List all available providers"""
        return list(cls._providers.keys())

    @classmethod
    def reset(cls) -> None:
        """Drop cached instances (settings changed, tests)."""
        cls._instances.clear()


def get_ai_provider(provider_name: Optional[str] = None) -> PromptProvider:
    """Get AI provider instance (convenience function / FastAPI dependency)"""
    return AIFactory.get_provider_with_fallback(provider_name)
