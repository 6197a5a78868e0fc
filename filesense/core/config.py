"""Engine configuration."""

from pydantic import ConfigDict, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Engine settings loaded from FILESENSE_* environment variables."""

    # Scanning
    include_hidden: bool = True
    smart_categories: bool = False  # Refine categories from filename keywords
    progress_interval: int = Field(default=100, ge=1)  # Log progress every N files

    # Moving
    verify_copies: bool = True  # Compare sizes before deleting after a copy
    max_collision_attempts: int = Field(default=9999, ge=1)

    model_config = ConfigDict(
        env_prefix="FILESENSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings() -> Settings:
    """Load settings from the current environment."""
    return Settings()
