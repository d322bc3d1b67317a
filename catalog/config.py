"""Configuration management for the application."""

from functools import lru_cache

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_JWT_SECRET = "your-secret-key"  # noqa: S105


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Database
    database_url: str = Field(default="sqlite:///./database.sqlite")
    seed_sample_projects: bool = Field(default=True)

    # JWT
    jwt_secret: str = Field(default=DEFAULT_JWT_SECRET)
    jwt_algorithm: str = Field(default="HS256")
    jwt_expiration_minutes: int = Field(default=1440)  # 24 hours

    # Server
    host: str = Field(default="0.0.0.0")  # noqa: S104
    port: int = Field(default=3000)
    cors_origin: str = Field(default="http://localhost:5173")

    # Client
    api_url: str = Field(default="http://localhost:3000")

    # API
    environment: str = Field(default="development")
    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def validate_production_settings(self) -> "Settings":
        """Validate that production has secure settings."""
        if self.is_production and self.uses_default_jwt_secret:
            raise ValueError("JWT_SECRET must be changed in production")
        return self

    @property
    def uses_default_jwt_secret(self) -> bool:
        """Check if tokens are signed with the built-in development secret."""
        return self.jwt_secret == DEFAULT_JWT_SECRET

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
