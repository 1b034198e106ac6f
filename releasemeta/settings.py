from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Release metadata service settings.

    All settings can be overridden via environment variables or .env file.
    Environment variables use uppercase names (e.g., TMDB_API_KEY=...).

    Year backfill:
        Only runs when the file name carries no year and a TMDB key is set.
        Lookup failures are logged and never reach the caller.
    """
    app_version: str = "v1.0.0"
    request_timeout: int = 10
    log_level: str = "INFO"

    tmdb_api_key: Optional[str] = None
    tmdb_base_url: str = "https://api.themoviedb.org/3"
    tmdb_language: str = "en-US"
    enable_year_backfill: bool = True

    # HEAD the link for Content-Length when the name has no size in it
    probe_link_size: bool = True

    # ", " for the details page buttons, "+" for compact admin captions
    label_language_separator: str = ", "
    testing: bool = False

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @property
    def year_backfill_enabled(self) -> bool:
        return bool(self.enable_year_backfill and self.tmdb_api_key)


settings = Settings()
