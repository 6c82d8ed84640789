"""Service configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    gummygrid_env: str = "development"
    gummygrid_log_level: str = "info"

    # Salt used for avatars served over HTTP
    gummygrid_salt: int = 0

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
