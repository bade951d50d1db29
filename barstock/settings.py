from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


PROJECT_ROOT = Path(__file__).resolve().parents[1]
ENV_FILES = [PROJECT_ROOT / ".env", ".env"]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=ENV_FILES, extra="ignore")

    # Logging
    LOG_LEVEL: str = "INFO"

    # Records
    DEFAULT_UNIT: str = "ml"

    # Rendering (None = list every recipe)
    REPORT_DETAIL_LIMIT: int | None = None


settings = Settings()
