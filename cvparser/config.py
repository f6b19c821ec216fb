from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Service settings, read from CVPARSER_* environment variables or a .env file."""

    app_name: str = "CV Parser (Candidate Profile Extraction Service)"
    log_level: str = "INFO"

    # Uploads above this size are rejected before any conversion work
    max_upload_mb: float = 50.0

    # x_tolerance values tried per PDF page; the least glued/fragmented text wins
    pdf_x_tolerances: List[float] = [1.5, 2, 2.5, 3]

    model_config = SettingsConfigDict(
        env_prefix="CVPARSER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()
