from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


PACKAGE_DIR = Path(__file__).resolve().parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="RECIPEBOOK_",
        env_file=".env",
        env_file_encoding="utf-8",
    )

    database_url: str = "sqlite:///./recipes.db"
    templates_dir: Path = PACKAGE_DIR / "templates"
    app_title: str = "Recipe App"
    log_level: str = "INFO"
    echo_sql: bool = False


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
