"""
Application configuration using Pydantic settings.

Configuration is loaded from environment variables with sensible defaults.
Using Pydantic's BaseSettings means we get:
- Type validation at startup (fail fast if config is wrong)
- Documentation of what's required vs optional
- Easy testing with different configurations

Selection thresholds are not here on purpose: they are part of the
classifier's contract and live next to it.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ..core.coaching.models import ContextAwareness, EmpathyLevel, Intensity


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables.
    For lists (like api_keys), use comma-separated values in env.
    """

    # API Configuration
    api_title: str = "PillarCoach API"
    api_version: str = "v1"
    api_keys: str = Field(
        default="dev-key-1,dev-key-2",
        description="Comma-separated API keys. Using a list enables key rotation without downtime."
    )

    # Prompt Defaults
    default_empathy_level: EmpathyLevel = Field(
        default=EmpathyLevel.HIGH,
        description="Empathy level used when a request doesn't specify one."
    )
    default_intensity: Intensity = Field(
        default=Intensity.MODERATE,
        description="Conversational intensity used when a request doesn't specify one."
    )
    default_context_awareness: ContextAwareness = Field(
        default=ContextAwareness.STANDARD,
        description="Context awareness used when a request doesn't specify one."
    )
    max_input_chars: int = Field(
        default=4000,
        description="Maximum length of free text accepted for classification."
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    # CORS
    cors_origins: str = Field(
        default="http://localhost:3000",
        description="Comma-separated list of allowed CORS origins. Use * for development only."
    )

    model_config = SettingsConfigDict(
        env_prefix="PILLARCOACH_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @property
    def api_keys_list(self) -> list[str]:
        """Parse comma-separated API keys into a list."""
        return [key.strip() for key in self.api_keys.split(",") if key.strip()]

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        if self.cors_origins == "*":
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    def validate_required_fields(self) -> list[str]:
        """
        Validate that required fields are set.

        Returns list of missing required fields. Kept separate from Pydantic
        validation so the app can start and report the problem on /health/ready.
        """
        missing = []

        if not self.api_keys_list:
            missing.append("PILLARCOACH_API_KEYS")

        if self.max_input_chars < 1:
            missing.append("PILLARCOACH_MAX_INPUT_CHARS (must be positive)")

        return missing


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache means we only load settings once per process.
    For tests, you can call get_settings.cache_clear() to reset.
    """
    return Settings()
