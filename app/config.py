# app/config.py

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application-wide settings.
    Values are read from environment variables / .env and exposed as attributes.
    """

    # ---------- Keyword density ----------
    # Only tokens strictly longer than this are ranked (short words still count
    # toward totalWords).
    min_keyword_length: int = 3

    # How many ranked keywords the analyzer returns
    top_keywords_limit: int = 20

    # ---------- Crawler ----------
    request_timeout_seconds: float = 10.0
    user_agent: str = "seo-density-analyzer/0.1 (+https://example.com/bot)"

    # ---------- HTTP ----------
    # Value of Access-Control-Allow-Origin on every response
    cors_allow_origin: str = "*"

    # ---------- Logging ----------
    log_level: str = "INFO"

    # ---------- Pydantic Settings ----------
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",             # unknown env vars are not an error
    )


@lru_cache
def get_settings() -> Settings:
    """Helper so Settings behaves like a singleton."""
    return Settings()


# Other modules use `from app.config import settings`
settings = get_settings()
