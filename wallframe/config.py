"""Runtime settings, overridable through WALLFRAME_* environment variables."""

from __future__ import annotations
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

# Common Australian structural pine lengths (mm).
DEFAULT_STOCK_LENGTHS = [2400, 2700, 3000, 3300, 3600, 4200, 4800, 5400, 6000]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WALLFRAME_", env_file=".env", extra="ignore",
    )

    log_level: str = "INFO"

    # API server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # Junctions
    snap_tolerance: float = 150.0   # Endpoint match distance (mm)

    # Stock ordering
    stock_lengths: list[float] = list(DEFAULT_STOCK_LENGTHS)
    kerf: float = 5.0                       # Saw loss per cut (mm)
    custom_length_increment: float = 600.0  # Rounding for over-length pieces


@lru_cache
def get_settings() -> Settings:
    return Settings()
