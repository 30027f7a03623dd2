"""Configuration settings for the content API and seed routine."""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with Pydantic validation."""

    # Database settings
    database_url: str = Field(
        default="sqlite+aiosqlite:///./.tmp/data.db",
        description="Async database URL (SQLite or PostgreSQL)"
    )

    # Environment settings
    environment: str = Field(
        default="development",
        description="Application environment, also scopes the core store"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Application log level"
    )

    # Security settings
    api_token_secret: str = Field(
        default="change-me-local-development-api-token-secret",
        description="Secret used to verify bearer API tokens"
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000", "http://localhost:1337"],
        description="Allowed CORS origins"
    )

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=1337, description="Server port")

    # Tracing
    otlp_endpoint: str | None = Field(
        default=None,
        description="OTLP collector endpoint; spans are only exported when set"
    )

    # Media settings
    uploads_dir: Path = Field(
        default=Path("data/uploads"),
        description="Directory the seed routine reads media files from"
    )
    media_root: Path = Field(
        default=Path("public/uploads"),
        description="Directory uploaded media is stored in and served from"
    )

    # Seed settings
    seed_force_import: bool = Field(
        default=False,
        description="Import seed data even when the first-run flag is already set"
    )

    # Pagination
    default_page_size: int = Field(default=25, ge=1)
    max_page_size: int = Field(default=100, ge=1)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Validate environment value."""
        valid_environments = ["development", "test", "staging", "production"]
        if v.lower() not in valid_environments:
            raise ValueError(f"Environment must be one of: {valid_environments}")
        return v.lower()

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level value."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v: str | list[str]) -> list[str]:
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",")]
        return v

    @property
    def debug(self) -> bool:
        """Return True if in development mode."""
        return self.environment == "development"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


# Global settings instance
settings = Settings()
