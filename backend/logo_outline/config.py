"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    logo_outline_env: str = "development"
    logo_outline_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:4200"]

    # Rasterization
    synthetic_color_seed: int = 0
    raster_scale: int = 2

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
