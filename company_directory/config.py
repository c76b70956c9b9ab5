"""Configuration for Company Directory Service."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Company directory service configuration.

    All settings can be overridden via environment variables.
    """

    # Service configuration
    SERVICE_NAME: str = Field(default="company-directory-service")
    SERVICE_HOST: str = Field(default="0.0.0.0")
    SERVICE_PORT: int = Field(default=8020, ge=1, le=65535)
    DEBUG: bool = Field(default=False)
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    LOG_JSON: bool = Field(default=True)

    # Database
    DATABASE_URL: str = Field(default="sqlite:///./company_directory.db")
    DB_POOL_PRE_PING: bool = Field(default=True)

    # Store retry policy: retries after the first failure, 2s/4s/8s backoff
    RETRY_MAX_ATTEMPTS: int = Field(default=3, ge=0)
    RETRY_BASE_DELAY_SECONDS: float = Field(default=2.0, ge=0)
    RETRY_MAX_DELAY_SECONDS: float = Field(default=30.0, ge=0)

    # CORS
    CORS_ORIGINS: str = Field(default="http://localhost:8080,http://localhost:3000")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins string into list."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
