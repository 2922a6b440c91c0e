"""
Application configuration using Pydantic Settings
"""

from typing import List
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Reservation providers
    reservations_sandbox: bool = False

    opentable_api_key: str = ""
    opentable_restaurant_id: str = ""

    sevenrooms_api_key: str = ""
    sevenrooms_webhook_secret: str = ""

    resy_api_key: str = ""
    resy_webhook_secret: str = ""

    # API Server
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    cors_origins: str = "http://localhost:5173"

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator(
        "opentable_api_key",
        "opentable_restaurant_id",
        "sevenrooms_api_key",
        "sevenrooms_webhook_secret",
        "resy_api_key",
        "resy_webhook_secret",
        mode="after",
    )
    @classmethod
    def strip_credentials(cls, v: str) -> str:
        return (v or "").strip()

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins from comma-separated string"""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance"""
    return Settings()


settings = get_settings()
