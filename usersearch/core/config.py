"""
Application configuration.

Loads settings from environment variables and .env file.
All configuration is centralized here, with no scattered magic strings.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_DATASET_PATH = Path(__file__).resolve().parent.parent / "data" / "dataset.xml"


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode (exposes /docs). Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        api_prefix: Path prefix for every router.
        dataset_path: XML file holding the user records.
        access_tokens: Tokens accepted in the ``AccessToken`` header.
        rate_limit_enabled: Turn per-client rate limiting on or off.
        rate_limit_default: Default rate limit for all endpoints.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "UserSearch"
    version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"
    api_prefix: str = "/api/v1"

    dataset_path: Path = DEFAULT_DATASET_PATH
    access_tokens: list[str] = ["2a54a886a8bbcc309ae4ffa75241cd6d"]

    rate_limit_enabled: bool = True
    rate_limit_default: str = "60/minute"


settings = Settings()
