"""Configuration management for the application."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Value shipped in .env templates before a real key is filled in
PLACEHOLDER_API_KEY = "your_actual_api_key_here"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server Configuration
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=8000, description="Server port")
    log_level: str = Field(default="INFO", description="Log level")

    # Proxy Configuration
    proxy: str | None = Field(default=None, description="HTTP proxy URL")

    # Timeout Configuration
    timeout: int = Field(default=120, description="Request timeout in seconds")

    # Gemini API Configuration
    gemini_api_key: str = Field(default="", description="Gemini API key")
    gemini_model: str = Field(
        default="gemini-2.5-flash-image-preview",
        description="Model used for every generation call",
    )
    gemini_base_api: str = Field(
        default="https://generativelanguage.googleapis.com",
        description="Gemini API base URL",
    )

    @property
    def is_configured(self) -> bool:
        """Whether a real API key is present."""
        key = self.gemini_api_key.strip()
        return bool(key) and key != PLACEHOLDER_API_KEY


# Settings instance used by the application entry point
settings = Settings()
