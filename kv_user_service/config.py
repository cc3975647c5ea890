"""
Configuration management for the user service.

Loads and validates environment variables for the application.
"""

from typing import Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    User service configuration.

    All settings can be overridden via environment variables.
    """

    # Service configuration
    SERVICE_NAME: str = Field(default="kv-user-service")
    SERVICE_HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8080, ge=1, le=65535)
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )

    # Redis configuration ("host:port" or a redis:// URL)
    REDIS_URL: str = Field(default="localhost:6379")
    REDIS_PASSWORD: Optional[str] = Field(default=None)
    REDIS_DB: int = Field(default=0, ge=0)
    REDIS_MAX_CONNECTIONS: int = Field(default=10, ge=1)
    REDIS_SOCKET_TIMEOUT: int = Field(default=5, ge=1)
    REDIS_CONNECT_TIMEOUT: int = Field(default=5, ge=1)
    REDIS_HEALTH_CHECK_INTERVAL: int = Field(default=240, ge=0)

    # Load the two demo users on startup
    SEED_DEMO_USERS: bool = Field(default=True)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
