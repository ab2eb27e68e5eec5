"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from FIELDRULES_* environment variables."""

    # Metadata key holding the directive string on each field
    TAG_KEY: str = "validate"

    # Logging
    LOG_LEVEL: str = "info"
    LOG_JSON: bool = False

    model_config = {
        "env_prefix": "FIELDRULES_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
