"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("FLOCK_TRACKER_ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path("~/.flock-tracker")
    database_name: str = "flock.sqlite3"
    photos_dir_name: str = "photos"
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="FLOCK_TRACKER_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )

    @property
    def database_path(self) -> Path:
        return self.data_dir.expanduser() / self.database_name

    @property
    def photos_dir(self) -> Path:
        return self.data_dir.expanduser() / self.photos_dir_name
