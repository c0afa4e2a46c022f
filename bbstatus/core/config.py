"""
Notifier configuration using pydantic-settings.
All environment variables are validated and typed.
"""

import os
from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Notifier settings loaded from BITBUCKET_* environment variables."""

    # OAuth consumer credentials (configured per notifier)
    api_key: str = ""
    api_secret: str = ""

    # Which build lifecycle points send a status
    notify_start: bool = True
    notify_finish: bool = True

    # Bitbucket Cloud endpoints
    hosting_domain: str = "bitbucket.org"
    api_url: str = "https://api.bitbucket.org/2.0"
    token_url: str = "https://bitbucket.org/site/oauth2/access_token"
    http_timeout: float = 10.0

    # Credential check endpoint
    server_host: str = "0.0.0.0"
    server_port: int = 8081

    log_level: str = "INFO"

    @field_validator("api_key", "api_secret", mode="before")
    @classmethod
    def _strip_credential(cls, value: str | None) -> str:
        if value is None:
            return ""
        return str(value).strip()

    @field_validator("api_url", "token_url", mode="before")
    @classmethod
    def _normalize_url(cls, value: str) -> str:
        return str(value).strip().rstrip("/")

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return str(value).strip().upper()

    model_config = {
        "env_prefix": "BITBUCKET_",
        "env_file": os.path.join(os.path.dirname(os.path.dirname(os.path.dirname(__file__))), ".env"),
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton settings instance
settings = Settings()
