"""Configuration management for the loyalty service."""

import os
from functools import lru_cache

from dotenv import load_dotenv

load_dotenv()


class Settings:
    PROJECT_NAME: str = os.getenv("LOYALTY_PROJECT_NAME", "Loyalty Service")
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./loyalty.db")
    API_KEY: str = os.getenv("API_KEY", "")
    API_PREFIX: str = os.getenv("API_PREFIX", "/api")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()


__all__ = ["settings", "Settings", "get_settings"]
