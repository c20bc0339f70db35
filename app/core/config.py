# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Centralized application settings loaded from environment.

    Required env vars (.env):
      - MONGO_URL (MongoDB connection string)
      - JWT_SECRET (secret used to sign access tokens)

    Optional:
      - MONGO_DB_NAME, JWT_EXPIRE_DAYS, CORS_ORIGINS, PORT
    """

    PROJECT_NAME: str = "Ecom API"
    API_PREFIX: str = "/api"

    # MongoDB
    MONGO_URL: str
    MONGO_DB_NAME: str = "ecom"
    MONGO_TIMEOUT_MS: int = 5000

    # JWT signing
    JWT_SECRET: str
    JWT_ALG: str = "HS256"
    JWT_EXPIRE_DAYS: int = 7

    CORS_ORIGINS: list[str] = ["*"]
    PORT: int = 5000

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings() -> Settings:
    """
    Cached settings loader.
    Ensures we don't re-parse .env on every import / request.
    """
    return Settings()
