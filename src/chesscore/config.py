"""Runtime configuration via environment variables."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from ``CHESSCORE_*`` variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="CHESSCORE_", env_file=".env", extra="ignore"
    )

    engine_path: str = "stockfish"
    engine_depth: int = Field(default=15, ge=1)
    engine_movetime_ms: int | None = Field(default=None, ge=1)
    engine_timeout: float = Field(default=10.0, gt=0)
    engine_search_timeout: float = Field(default=60.0, gt=0)
    log_level: str = "WARNING"


settings = Settings()
