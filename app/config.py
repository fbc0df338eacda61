"""
Configuration Management

Uses Pydantic BaseSettings to load configuration from environment variables.
All settings can be overridden via .env file or environment variables.

Environment Variables:
    ANTHROPIC_API_KEY: API key for the free-form fallback responder
    CLAUDE_CHAT_MODEL: Model used for free-form replies
    PORT: Port to bind the application server (default: 3000)
    CORS_ORIGINS: Comma-separated list of allowed origins (default: *)
    APP_ENV: Environment name (development/staging/production)
    DEBUG: Enable debug mode (default: False)
"""

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Anthropic Configuration
    anthropic_api_key: str = ""
    """Anthropic API key.

    Used only by the free-form fallback responder. When empty, the
    assistant still runs the scripted booking flow and answers
    unmatched messages with a canned prompt.
    """

    claude_chat_model: str = "claude-3-5-haiku-20241022"
    """Model used for free-form replies (fast and cheap)."""

    freeform_max_tokens: int = 200
    """Maximum tokens in a free-form reply."""

    freeform_temperature: float = 0.3
    """Sampling temperature for free-form replies."""

    freeform_history_limit: int = 6
    """Number of most recent history entries sent with a free-form request."""

    # Application Environment
    app_env: Literal["development", "staging", "production"] = "development"
    """Current application environment.

    Options:
    - development: Local development, verbose errors, docs enabled
    - staging: Pre-production testing environment
    - production: Live production environment
    """

    debug: bool = False
    """Enable debug mode.

    When True:
    - DEBUG level logging (phase transitions, session lifecycle)
    - Request duration logging
    - Auto-reload when started via __main__
    """

    # Application Configuration
    app_name: str = "travel-booking-assistant"
    """Application name."""

    host: str = "0.0.0.0"
    """Host to bind the application server."""

    port: int = 3000
    """Port to bind the application server."""

    # CORS Configuration
    cors_origins: str = "*"
    """Comma-separated list of allowed CORS origins."""

    # Pydantic configuration
    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env file if it exists
        env_file_encoding="utf-8",
        case_sensitive=False,  # Allow PORT or port
        extra="ignore",  # Ignore extra environment variables
    )

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.app_env == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.app_env == "development"

    @property
    def cors_origins_list(self) -> list[str]:
        """Split cors_origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Uses lru_cache so settings are read from the environment once,
    at process start, and reused everywhere.

    Returns:
        Settings: Cached settings instance

    Example:
        >>> from app.config import get_settings
        >>> settings = get_settings()
        >>> print(settings.port)
        3000
    """
    return Settings()


# Module-level settings instance for easy imports
settings = get_settings()
