"""Application configuration with validation."""
from typing import Literal
from functools import lru_cache
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """SOC efficacy calculator settings, read from the environment / .env."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "SOC Efficacy Calculator"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # Maturity bands (applied to every domain and to the final score)
    BAND_LOW_THRESHOLD: float = Field(default=40.0, ge=0, le=100)
    BAND_HIGH_THRESHOLD: float = Field(default=70.0, ge=0, le=100)

    # Display
    DISPLAY_DECIMAL_PLACES: int = Field(default=2, ge=0, le=6)

    @model_validator(mode="after")
    def validate_band_thresholds(self):
        """Low threshold must sit strictly below the high threshold."""
        if self.BAND_LOW_THRESHOLD >= self.BAND_HIGH_THRESHOLD:
            raise ValueError(
                f"BAND_LOW_THRESHOLD ({self.BAND_LOW_THRESHOLD}) must be below "
                f"BAND_HIGH_THRESHOLD ({self.BAND_HIGH_THRESHOLD})"
            )
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self


@lru_cache
def get_settings() -> Settings:
    return Settings()
