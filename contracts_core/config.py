from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # --------------------------------------
    # FASTAPI APP SETTINGS
    # --------------------------------------
    APP_NAME: str = "ContractLifecycle"
    APP_ENV: str = "development"
    APP_PORT: int = 8000
    APP_HOST: str = "0.0.0.0"
    DEBUG: bool = False
    CORS_ORIGINS: List[str] = ["http://localhost:3000"]

    # --------------------------------------
    # DATABASE SETTINGS
    # --------------------------------------
    DATABASE_URL: str = "sqlite+aiosqlite:///./contracts.db"
    DB_ECHO: bool = False

    # --------------------------------------
    # MISC SETTINGS
    # --------------------------------------
    LOG_LEVEL: str = "info"

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")


# Cached instance to avoid re-reading on each import
@lru_cache()
def get_settings():
    return Settings()
