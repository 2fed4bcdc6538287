"""Library configuration."""

from functools import lru_cache
from typing import Any

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """reCAPTCHA settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # reCAPTCHA
    recaptcha_secret_key: str = ""
    recaptcha_enabled: bool = True
    recaptcha_min_score: float = 0.5

    # Seconds; unset or empty disables the bound
    recaptcha_timeout: float | None = 10.0

    @field_validator("recaptcha_timeout", mode="before")
    @classmethod
    def parse_timeout(cls, v: Any) -> Any:
        if isinstance(v, str) and v.strip().lower() in ("", "none"):
            return None
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
