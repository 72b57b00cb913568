from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# Load environment variables from a .env file if present (local dev only)
load_dotenv()


class Settings(BaseSettings):
    """Application configuration loaded from environment variables or .env file."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Storage
    storage_root: Path = Field(Path("wwwroot"), description="Web root holding the image buckets.")
    originals_dir: str = Field("Images", description="Bucket sub-directory for uploaded originals.")
    cropped_dir: str = Field("CroppedImages", description="Bucket sub-directory for crop outputs.")

    # Image encoding
    jpeg_quality: int = Field(90, ge=1, le=100, description="Quality used when cropped output is JPEG.")

    # Logging
    log_level: str = Field("INFO")


@lru_cache()
def get_settings() -> Settings:  # pragma: no cover
    """Return a cached Settings instance so it is only parsed once."""

    return Settings()
