"""
Settings management for custom resource handlers using Pydantic.

Settings are read by the Lambda entrypoint only; the dispatch core receives
explicit parameters.
"""

from functools import lru_cache
from typing import TypeVar

from pydantic import Field
from pydantic_settings import BaseSettings

T = TypeVar("T", bound=BaseSettings)


class Settings(BaseSettings):
    """
    Base settings class for custom resource handlers.

    Extend this class to add your own configuration. Values are loaded from
    environment variables (case-sensitive) or a ``.env`` file.

    Example:
        class BucketSettings(Settings):
            BUCKET_PREFIX: str

        settings = get_settings(BucketSettings)
    """

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": True,
        "extra": "ignore",  # Allow extra .env fields
    }

    # Timeout for the PUT to the pre-signed ResponseURL
    CALLBACK_TIMEOUT_SECONDS: float = Field(default=10.0, gt=0)
    MAX_REASON_LENGTH: int = Field(default=1024, gt=0)
    # CloudFormation rejects response bodies above 4096 bytes
    MAX_RESPONSE_BYTES: int = Field(default=4096, gt=0)


@lru_cache
def get_settings(settings_class: type[T] = Settings) -> T:
    """
    Get cached settings instance.

    Settings are cached so warm invocations do not re-read the environment.

    Args:
        settings_class: Settings class to instantiate (default: Settings)

    Returns:
        Cached settings instance
    """
    return settings_class()
