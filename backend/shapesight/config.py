"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    shapesight_env: str = "development"
    shapesight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["*"]

    # Server
    host: str = "127.0.0.1"
    port: int = 8787

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
