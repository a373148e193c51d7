"""
Application Configuration
This module centralizes all configuration for the ptlist application.
It uses Pydantic's BaseSettings to load settings from environment variables
and a .env file, providing validation and type hints.
"""

from pathlib import Path
from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_DIRECTORY = Path(__file__).parent.parent


class Settings(BaseSettings):
    """
    Application settings loaded from the environment and the .env file.

    Attributes:
        app_env (str): Deployment environment (e.g. 'dev', 'prod').
        api_host (str): Interface the API server binds to. The port is a
            required command line argument, not a setting.
        log_level (str): Minimum level of the log sink.
        log_json (bool): Emit logs as JSON lines instead of pretty text.
        cors_origins (list[str]): Origins allowed to call the API from a
            browser (JSON list in the environment). Empty disables CORS.
        max_timestamps (int): Upper bound on the length of one generated
            sequence; larger ranges are rejected as bad requests.
    """

    app_env: str = "prod"
    api_host: str = "0.0.0.0"
    log_level: str = "INFO"
    log_json: bool = False
    cors_origins: List[str] = []

    max_timestamps: int = 100_000

    model_config = SettingsConfigDict(
        env_prefix="PTLIST__",
        env_nested_delimiter="__",
        env_file=PROJECT_DIRECTORY / ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )


# Single settings instance shared across the application
settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the shared settings (overridable in tests)."""
    return settings
