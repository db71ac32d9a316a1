"""
Configuration settings for userstore.
Values come from environment variables, falling back to a ``.env`` file.
"""
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    # Paths
    BASE_DIR: Path = Path(__file__).resolve().parent.parent
    DATA_DIR: Path = BASE_DIR / "database"

    # Database
    DB_PATH: Path = Field(
        default=DATA_DIR / "database.sqlite",
        validation_alias="DB_PATH",
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", validation_alias="LOG_LEVEL")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


def get_db_path() -> Path:
    return get_settings().DB_PATH
