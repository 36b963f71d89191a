"""Configuration management for the application."""

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Log level for loguru")

    # Proxy Configuration
    proxy: str | None = Field(default=None, description="HTTP proxy URL")

    # Timeout Configuration (None leaves the transport default in place)
    timeout: float | None = Field(
        default=None, description="Outbound request timeout in seconds"
    )

    # Gemini API Configuration
    gemini_api_key: str | None = Field(default=None, description="Gemini API key")
    gemini_base_api: str = Field(
        default="https://generativelanguage.googleapis.com",
        description="Generative Language API base URL",
    )
    gemini_api_version: str = Field(default="v1beta", description="API version")

    # Model tiers
    fast_model: str = Field(
        default="gemini-2.5-flash", description="Model tried first"
    )
    strong_model: str = Field(
        default="gemini-2.5-pro", description="Fallback model when the fast one fails"
    )

    # Request Configuration
    image_mime_type: str = Field(
        default="image/jpeg", description="MIME type sent with inline images"
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


def get_settings() -> Settings:
    """Load a fresh settings object from the current environment."""
    return Settings()


# Global settings instance
settings = get_settings()
