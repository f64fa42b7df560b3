from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Logging
    LOG_LEVEL: str = Field(default="INFO", pattern=r"^(?i:debug|info|warning|error|critical)$")
    LOG_JSON: bool = False  # True for production (structured JSON), False for dev (colored)

    # Evaluation
    STRICT_COMPARISONS: bool = False  # Raise TypeError on incomparable bounds instead of failing

    class Config:
        env_prefix = "TYPECONTRACTS_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
