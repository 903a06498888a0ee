"""
DocuGen - Core Configuration
============================

Centralized configuration using Pydantic settings.
Settings can be configured via:
1. Environment variables (.env file) - For secrets (LLM API keys)
2. Defaults - Sensible defaults for everything else

Usage:
    from docugen.core.config import settings

    api_key = settings.GOOGLE_API_KEY
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    These are static settings that require restart to change. Theme
    selection at runtime happens on the session, not here.
    """

    # ==========================================================================
    # Application
    # ==========================================================================
    APP_NAME: str = Field(default="DocuGenius AI", description="Product name used in branding and file metadata")
    OUTPUT_DIR: str = Field(default="output", description="Directory exports are saved to")

    # ==========================================================================
    # LLM Provider
    # ==========================================================================
    LLM_PROVIDER: str = Field(default="google", description="Outline provider (google, openai)")
    GOOGLE_API_KEY: str = Field(default="", description="Google AI API key")
    OPENAI_API_KEY: str = Field(default="", description="OpenAI API key")
    GOOGLE_CHAT_MODEL: str = Field(default="gemini-2.5-flash", description="Gemini model for outline synthesis")
    OPENAI_CHAT_MODEL: str = Field(default="gpt-4o", description="OpenAI model for outline synthesis")
    LLM_TEMPERATURE: float = Field(default=0.7, description="Sampling temperature")
    LLM_MAX_TOKENS: int = Field(default=8192, description="Maximum tokens in the outline response")
    LLM_TIMEOUT_SECONDS: float = Field(default=120.0, description="Provider request timeout")

    # ==========================================================================
    # Theme defaults
    # ==========================================================================
    DEFAULT_PALETTE: str = Field(default="indigo", description="Palette id selected when a session starts")
    DEFAULT_FONT: str = Field(default="sans", description="Font id selected when a session starts")

    # ==========================================================================
    # Logging
    # ==========================================================================
    LOG_LEVEL: str = Field(default="INFO", description="Root log level")
    LOG_FORMAT: str = Field(default="console", description="Log renderer (console, json)")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
