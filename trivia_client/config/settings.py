"""Application settings and configuration."""

from functools import lru_cache

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings

# Load .env file if present
load_dotenv()

DEFAULT_BASE_URL = "https://opentdb.com"
DEFAULT_TIMEOUT = 10.0


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # API Configuration
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Root URL of the Open Trivia DB API",
        validation_alias="TRIVIA_BASE_URL",
    )

    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT,
        gt=0.0,
        le=120.0,
        description="Request timeout in seconds",
        validation_alias="TRIVIA_TIMEOUT",
    )

    # Query Defaults
    default_amount: int = Field(
        default=10,
        ge=1,
        le=50,  # the API refuses more than 50 per call
        description="Default number of questions to fetch",
        validation_alias="TRIVIA_DEFAULT_AMOUNT",
    )

    # Output Settings
    log_level: str = Field(
        default="WARNING",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
        validation_alias="TRIVIA_LOG_LEVEL",
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
    }


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Returns:
        Settings object with loaded configuration
    """
    return Settings()
