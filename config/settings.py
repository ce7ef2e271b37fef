"""Application settings using Pydantic Settings."""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings
from typing import List


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Database Configuration
    mongodb_url: str = Field(
        "mongodb://localhost:27017/exercise_tracker",
        validation_alias=AliasChoices("mongo_uri", "mongodb_url"),
    )
    default_database: str = "exercise_tracker"

    # Application Configuration
    app_name: str = "Exercise Tracker"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # CORS Configuration
    cors_origins: List[str] = ["*"]

    # Calendar day boundaries and rendered dates use this fixed UTC offset
    display_utc_offset_hours: int = Field(0, gt=-24, lt=24)

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


# Global settings instance
settings = Settings()
