"""
DocuGen - LLM Service
=====================

Chat model factory for outline synthesis. Supports Google Gemini (default)
and OpenAI through their LangChain integrations. The rest of the code base
only sees ``BaseChatModel``, so providers can be swapped without touching
the renderers.
"""

from typing import Dict, Optional

import structlog
from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_openai import ChatOpenAI

from docugen.core.config import settings
from docugen.services.base import ConfigurationError

logger = structlog.get_logger(__name__)

SUPPORTED_PROVIDERS = frozenset({"google", "openai"})


class LLMFactory:
    """Factory for creating and caching chat model instances."""

    _instances: Dict[str, BaseChatModel] = {}

    @classmethod
    def _resolve(
        cls,
        provider: Optional[str],
        model: Optional[str],
    ) -> tuple:
        provider = (provider or settings.LLM_PROVIDER).lower()
        if provider not in SUPPORTED_PROVIDERS:
            raise ConfigurationError(
                f"Unsupported LLM provider: {provider}",
                details={"supported": sorted(SUPPORTED_PROVIDERS)},
            )
        if model is None:
            model = settings.GOOGLE_CHAT_MODEL if provider == "google" else settings.OPENAI_CHAT_MODEL
        return provider, model

    @staticmethod
    def _api_key(provider: str) -> str:
        api_key = settings.GOOGLE_API_KEY if provider == "google" else settings.OPENAI_API_KEY
        if not api_key:
            env_name = "GOOGLE_API_KEY" if provider == "google" else "OPENAI_API_KEY"
            raise ConfigurationError(f"{env_name} environment variable is not set")
        return api_key

    @classmethod
    def get_chat_model(
        cls,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> BaseChatModel:
        """
        Get a chat model instance.

        Args:
            provider: LLM provider (google, openai)
            model: Model name (e.g., gemini-2.5-flash, gpt-4o)
            temperature: Sampling temperature
            max_tokens: Maximum tokens in response

        Returns:
            BaseChatModel: LangChain chat model instance
        """
        provider, model = cls._resolve(provider, model)
        temperature = temperature if temperature is not None else settings.LLM_TEMPERATURE
        max_tokens = max_tokens or settings.LLM_MAX_TOKENS

        cache_key = f"{provider}:{model}:{temperature}:{max_tokens}"

        if cache_key not in cls._instances:
            cls._instances[cache_key] = cls._create_chat_model(
                provider=provider,
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
            )
            logger.info(
                "Created chat model",
                provider=provider,
                model=model,
                temperature=temperature,
            )

        return cls._instances[cache_key]

    @classmethod
    def _create_chat_model(
        cls,
        provider: str,
        model: str,
        temperature: float,
        max_tokens: int,
        **kwargs,
    ) -> BaseChatModel:
        """Create a new chat model instance."""
        if provider == "google":
            return ChatGoogleGenerativeAI(
                model=model,
                temperature=temperature,
                max_output_tokens=max_tokens,
                google_api_key=cls._api_key(provider),
                timeout=settings.LLM_TIMEOUT_SECONDS,
                **kwargs,
            )
        return ChatOpenAI(
            model=model,
            temperature=temperature,
            max_tokens=max_tokens,
            api_key=cls._api_key(provider),
            timeout=settings.LLM_TIMEOUT_SECONDS,
            **kwargs,
        )

    @classmethod
    def get_structured_model(
        cls,
        response_schema: dict,
        provider: Optional[str] = None,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> BaseChatModel:
        """
        Get a chat model configured to answer with JSON matching a schema.

        Structured models are not cached; the schema is part of the model
        configuration.

        Args:
            response_schema: JSON schema dict describing the expected output
            provider: LLM provider (google, openai)
            model: Model name
            temperature: Sampling temperature

        Returns:
            BaseChatModel configured for structured output
        """
        provider, model = cls._resolve(provider, model)
        temperature = temperature if temperature is not None else settings.LLM_TEMPERATURE

        if provider == "openai":
            # Not strict: strict mode requires every property to be required
            return cls._create_chat_model(
                provider=provider,
                model=model,
                temperature=temperature,
                max_tokens=settings.LLM_MAX_TOKENS,
                model_kwargs={
                    "response_format": {
                        "type": "json_schema",
                        "json_schema": {
                            "name": response_schema.get("title", "structured_output"),
                            "schema": response_schema,
                            "strict": False,
                        },
                    },
                },
            )
        return cls._create_chat_model(
            provider=provider,
            model=model,
            temperature=temperature,
            max_tokens=settings.LLM_MAX_TOKENS,
            response_mime_type="application/json",
            response_schema=response_schema,
        )

