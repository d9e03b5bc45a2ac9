"""Configuration management for the request-ip service."""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ATTRIBUTE_NAME = "clientIp"

LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


class Settings(BaseSettings):
    """Application settings."""

    # API Configuration
    app_name: str = Field(default="request-ip")
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=8000)

    # Name of the request.state attribute the middleware writes to
    client_ip_attribute: str = Field(default=DEFAULT_ATTRIBUTE_NAME)

    @field_validator("log_level")
    @classmethod
    def known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    model_config = SettingsConfigDict(
        env_prefix="REQUEST_IP_",
        env_file=None,  # Don't load from .env file
        case_sensitive=False,
        extra="ignore"
    )

def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()
