"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgnative_env: str = "development"
    svgnative_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]

    # Conversion defaults
    default_flavor: str = "generic"
    themed_fill_tags: list[str] = ["Path"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
