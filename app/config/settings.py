from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    # None keeps synthesis and shuffling non-deterministic
    random_seed: int | None = None
    faker_locale: str = "en_US"

    csv_encoding: str | None = None
    output_dir: Path | None = None
