from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    openlibrary_base_url: str = "https://openlibrary.org"
    covers_base_url: str = "https://covers.openlibrary.org/b/id"
    placeholder_cover_url: str = (
        "https://placehold.co/300x450/334155/e2e8f0?text=No+Cover+Available"
    )

    # Open Library returns 100 docs by default; the grid only shows one page.
    page_size: int = 24

    # Open Library asks API consumers to identify themselves.
    user_agent: str = "Book Finder (https://openlibrary.org/developers/api)"

    log_level: str = "INFO"
    app_version: str = "0.1.0"


@lru_cache
def get_settings() -> Settings:
    return Settings()
