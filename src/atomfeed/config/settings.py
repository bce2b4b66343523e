"""Configuration management using pydantic-settings.

Supports environment variables (prefixed ``ATOMFEED_``) and .env file loading.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Reader configuration."""

    model_config = SettingsConfigDict(
        env_prefix="ATOMFEED_",
        env_file=(".env", ".env.local"),  # .env.local overrides .env
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Reading
    read_chunk_size: int = Field(
        default=64 * 1024,
        ge=1,
        description="Bytes pulled from the input stream per read",
    )
    trim_text: bool = Field(
        default=True,
        description="Strip text events and drop whitespace-only ones",
    )

    # Logging
    log_level: str = "INFO"
    log_json: bool = False  # Set True in production for structured logs


# Global singleton instance
settings = Settings()
