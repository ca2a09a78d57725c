"""
Application configuration using Pydantic Settings.

Environment-based infrastructure switching is controlled by the ENVIRONMENT variable.
"""

from functools import lru_cache
from typing import List, Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    # ===========================================
    # Environment
    # ===========================================
    ENVIRONMENT: Literal["local"] = "local"
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # ===========================================
    # Server
    # ===========================================
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    ALLOWED_ORIGINS: List[str] = Field(
        default=["http://localhost:3000", "http://localhost:5173"]
    )

    # ===========================================
    # Plans
    # ===========================================
    # Timezone used when a plan does not carry its own
    APP_TIMEZONE: str = "Asia/Tokyo"

    # Fallback candidates offered when an interruption leaves blocks unplaced
    CANDIDATE_MORNING_HOUR: int = Field(6, ge=0, le=23)
    CANDIDATE_EVENING_HOUR: int = Field(20, ge=0, le=23)

    # Window created for a next-day plan that does not exist yet
    DEFAULT_WINDOW_START_HOUR: int = Field(6, ge=0, le=23)
    DEFAULT_WINDOW_END_HOUR: int = Field(23, ge=1, le=24)

    @model_validator(mode="after")
    def _check_default_window(self) -> "Settings":
        if self.DEFAULT_WINDOW_END_HOUR <= self.DEFAULT_WINDOW_START_HOUR:
            raise ValueError("DEFAULT_WINDOW_END_HOUR must be after DEFAULT_WINDOW_START_HOUR")
        return self

    @property
    def is_local(self) -> bool:
        """Check if running in local environment."""
        return self.ENVIRONMENT == "local"


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Using lru_cache ensures settings are loaded only once.
    """
    return Settings()
