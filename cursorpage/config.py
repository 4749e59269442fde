"""Configuration management for the cursorpage service."""

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application settings
    app_name: str = "Cursor Pagination API"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8000

    # Logging settings
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Pagination settings
    default_page_size: int = 10
    max_page_size: int = 100
    default_order: str = "created_at"
    default_direction: int = -1
    prefetch: bool = True
    strict_cursors: bool = True

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("default_direction")
    @classmethod
    def validate_default_direction(cls, v):
        """Validate default direction is 1 (asc) or -1 (desc)."""
        if v not in (1, -1):
            raise ValueError("Default direction must be 1 (asc) or -1 (desc)")
        return v

    @field_validator("default_page_size", "max_page_size")
    @classmethod
    def validate_page_size(cls, v):
        """Validate page sizes are positive."""
        if v <= 0:
            raise ValueError("Page size must be greater than 0")
        return v

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
        "env_parse_none_str": True,
    }


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get application settings."""
    return settings
