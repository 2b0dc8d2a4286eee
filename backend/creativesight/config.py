"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Empty key = no remote capability; the engine runs fully local
    anthropic_api_key: str = ""
    creativesight_env: str = "development"
    creativesight_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Model routing
    model_cheap: str = "claude-haiku-4-5-20251001"
    model_mid: str = "claude-sonnet-4-5-20250929"
    model_frontier: str = "claude-sonnet-4-5-20250929"

    # Remote exchanges
    remote_timeout_s: float = 60.0
    max_tokens_analysis: int = 2000
    max_tokens_aux: int = 1000

    # Uploads
    max_upload_bytes: int = 20 * 1024 * 1024

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @property
    def has_remote_credentials(self) -> bool:
        return bool(self.anthropic_api_key.strip())


settings = Settings()
