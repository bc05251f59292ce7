"""Configuration settings for the Mundipagg API client."""
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings.

    Read once from ``MUNDIPAGG_*`` environment variables (or ``.env``) and
    frozen afterwards, so a single instance can be shared between callers.
    """

    model_config = SettingsConfigDict(
        env_prefix="MUNDIPAGG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # API
    api_url: str = "https://api.mundipagg.com/core/v1"
    user_agent: str = "Mundipagg Python SDK"
    timeout: float = 100.0  # seconds

    # Credentials
    secret_key: str = ""
    account_management_key: str = ""
    mp_token: str = ""

    # Correlation
    request_key: Optional[str] = None
    merchant_id: Optional[str] = None

    # Logging
    log_level: str = "INFO"


settings = Settings()
