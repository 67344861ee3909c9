"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(..., min_length=1)

    # JWT
    jwt_secret: str = Field(..., min_length=1)
    jwt_expiration_minutes: int = Field(default=1440)  # 24 hours

    # HTTP
    cors_origin: str = Field(default="http://localhost:3000")
    port: int = Field(default=8080)

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @field_validator("jwt_secret")
    @classmethod
    def validate_jwt_secret(cls, value: str) -> str:
        """Reject a blank signing secret so tokens are never signed with an empty key."""
        if not value.strip():
            raise ValueError("JWT_SECRET must not be empty")
        return value

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
