"""
Factory Issue Dashboard - Configuration
"""
from pathlib import Path
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Paths
    BASE_DIR: Path = Path(__file__).parent
    DATA_DIR: Path = Field(default_factory=lambda: Path(__file__).parent / "data")
    DATABASE_PATH: Path = Field(default_factory=lambda: Path(__file__).parent / "data" / "issues.db")
    DATABASE_URL: Optional[str] = Field(default=None, description="Overrides DATABASE_PATH when set")

    # Logging
    LOG_DIR: Optional[Path] = Field(default_factory=lambda: Path(__file__).parent / "data" / "logs")
    LOG_LEVEL: str = Field(default="INFO")

    # API
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8000)
    CORS_ORIGINS: List[str] = Field(default=["*"])

    # Session cookie shared with the login service
    SESSION_SECRET_KEY: str = Field(default="change-me", description="Signs the session cookie")
    SESSION_COOKIE_NAME: str = Field(default="session")

    # Rankings
    DEFAULT_LANGUAGE: str = Field(default="ko")
    RANKING_LIMIT: int = Field(default=3)
    COMMENTER_CACHE_TTL_SECONDS: int = Field(default=30 * 60)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


# Global settings instance
settings = Settings()


def ensure_directories():
    """Ensure all required directories exist."""
    dirs = [settings.DATA_DIR]
    if settings.LOG_DIR:
        dirs.append(settings.LOG_DIR)
    for dir_path in dirs:
        dir_path.mkdir(parents=True, exist_ok=True)
