"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    glyph_env: str = "development"
    glyph_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Engine tunables (see glyph.engine.config.GenerationConfig)
    glyph_max_retries: int = 6
    glyph_min_quality: float = 70.0
    glyph_max_variations: int = 12

    # Remembered-hash history (see glyph.engine.store.InMemoryHashStore)
    glyph_history_max_brands: int = 10_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
