"""
Configuration module - centralized settings for the entire application.
Uses pydantic-settings to load values from environment variables and .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Pydantic-settings automatically:
    1. Reads from environment variables (highest priority)
    2. Falls back to .env file values
    3. Uses default values if neither exists

    To override in production, set environment variables:
        export GEMINI_API_KEY=your-api-key
        export GEMINI_MODEL=gemini-2.5-pro
    """

    # ---------------------------------------------------------------------------
    # PYDANTIC SETTINGS CONFIGURATION
    # ---------------------------------------------------------------------------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # ---------------------------------------------------------------------------
    # APPLICATION SETTINGS
    # ---------------------------------------------------------------------------
    # APP_NAME: Display name shown in API docs and logging
    APP_NAME: str = "ResumeForge"

    # DEBUG: Enable debug logging
    DEBUG: bool = False

    # ---------------------------------------------------------------------------
    # AI/LLM PROVIDER SETTINGS
    # ---------------------------------------------------------------------------
    # GEMINI_API_KEY: Google's Gemini API, used for every generation call
    GEMINI_API_KEY: str = ""

    # GEMINI_MODEL: Default model for generation, refinement and tool sub-calls
    GEMINI_MODEL: str = "gemini-2.5-flash"

    # AI Request timeout in seconds
    AI_REQUEST_TIMEOUT: int = 60

    # GEMINI_MAX_TOOL_ROUNDS: Upper bound on model -> tool -> model round trips
    # inside a single structured generation call
    GEMINI_MAX_TOOL_ROUNDS: int = 4

    # ---------------------------------------------------------------------------
    # RESUME GENERATION SETTINGS
    # ---------------------------------------------------------------------------
    # A complete resume (HTML + CSS) is long, keep the token budget generous
    RESUME_TEMPERATURE: float = 0.7
    RESUME_MAX_TOKENS: int = 16000

    # LOGO_URL_TEMPLATE: Deterministic logo lookup, {domain} is substituted
    # with the company domain resolved by the model
    LOGO_URL_TEMPLATE: str = "https://logo.clearbit.com/{domain}"


# ---------------------------------------------------------------------------
# GLOBAL SETTINGS INSTANCE
# ---------------------------------------------------------------------------
# Usage: from resumeforge.core.config import settings
settings = Settings()
