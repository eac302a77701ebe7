"""Centralized application settings loaded from environment variables."""

from pydantic_settings import BaseSettings
from typing import List
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./ojt_tracker.db"
    DEBUG: bool = True
    ALLOWED_ORIGINS: List[str] = ["http://localhost:3000", "http://localhost:8081"]
    LOG_LEVEL: str = "INFO"

    # Hours goal
    DEFAULT_REQUIRED_HOURS: int = 300
    MAX_LOG_HOURS: int = 24

    # Log list paging
    LOG_PAGE_SIZE: int = 10

    # Report drafts
    DRAFT_DIR: str = "drafts"
    DRAFT_DEBOUNCE_SECONDS: float = 1.0

    class Config:
        # Load backend/.env regardless of the working directory.
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
