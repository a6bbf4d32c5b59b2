"""Application settings loaded from environment / .env file."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ASTEXT_",
        extra="ignore",
    )

    # ── Rendering defaults (HTTP surface only) ────────────
    lf_char: str = "\n"
    zwsp_char: str = "\u200b"
    trim: bool = False
    extra_chars: str = ""
    skip_dels: bool = False

    # ── Request limits ────────────────────────────────────
    max_html_size: int = 5 * 1024 * 1024  # characters
    max_tree_depth: int = 512

    # ── CORS ──────────────────────────────────────────────
    allowed_origins: str = "*"


@lru_cache
def get_settings() -> Settings:
    return Settings()
