"""Runtime configuration, read from the environment and an optional ``.env``."""
from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Column classification
    SAMPLE_SIZE: int = Field(default=10, ge=1)
    DATE_GUARD_MIN_CHARS: int = 6

    # Analysis report
    MAX_CHART_SUGGESTIONS: int = Field(default=4, ge=0)
    BAR_MAX_CATEGORIES: int = 20
    PIE_MAX_CATEGORIES: int = 8
    LINE_MIN_UNIQUE: int = 5

    # Outcome filter defaults
    SURE_WIN_THRESHOLD: float = Field(default=0.8, ge=0.0, le=1.0)
    DRAW_THRESHOLD: float = Field(default=0.5, ge=0.0, le=1.0)

    # Slip builder
    SLIP_SELECTION_CAP: int = Field(default=5, ge=1)
    DEFAULT_LAMBDA_TOLERANCE: float = Field(default=0.05, ge=0.0)

    # API
    MAX_UPLOAD_BYTES: int = 20 * 1024 * 1024

    LOG_LEVEL: str = "INFO"


settings = Settings()
