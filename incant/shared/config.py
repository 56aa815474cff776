# incant/shared/config.py
from enum import Enum
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic.
    """

    # --- Application Meta ---
    APP_NAME: str = "incant"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT
    DEBUG: bool = False

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"
    OTEL_SERVICE_NAME: str = "incant-decoder"
    OTEL_CONSOLE_EXPORT: bool = False

    # --- Lexicon Data ---
    # Relative paths are resolved against the project root.
    DATA_DIR: str = "data/lexicon"

    # Dialects loaded at startup. Empty means every dialect folder found in DATA_DIR.
    DIALECTS: List[str] = []

    # --- Request Guards ---
    MAX_STREAM_LENGTH: int = 4096

    @property
    def DATA_PATH(self) -> Path:
        """Absolute path to the dialect data directory."""
        path = Path(self.DATA_DIR)
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path

    model_config = SettingsConfigDict(env_prefix="INCANT_", env_file=".env", extra="ignore")


settings = Settings()
