from __future__ import annotations

from datetime import timedelta
from functools import lru_cache
from typing import Literal

from pydantic import ConfigDict, model_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    ENVIRONMENT: Literal["local", "test", "production"] = "local"
    BUILD_NUMBER: str = "dev"
    LOG_LEVEL: str = "INFO"
    PORT: int = 8000

    POSTGRES_USER: str = "postgres"
    POSTGRES_PASSWORD: str = "postgres"
    POSTGRES_DB: str = "commerce"
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432

    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_RECYCLE: int = 300
    DB_ECHO: bool = False

    REDIS_URL: str = "redis://localhost:6379/0"

    ACCESS_TOKEN_SECRET: str = ""
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRES_IN: int = 3600  # seconds

    CORS_ORIGINS: list[str] = ["*"]

    @model_validator(mode="after")
    def _require_secret_in_production(self) -> Settings:
        if self.ENVIRONMENT == "production" and not self.ACCESS_TOKEN_SECRET:
            raise ValueError("ACCESS_TOKEN_SECRET must be set in production")
        return self

    @property
    def database_url(self) -> str:
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.POSTGRES_DB}"
        )

    @property
    def access_token_ttl(self) -> timedelta:
        return timedelta(seconds=self.ACCESS_TOKEN_EXPIRES_IN)

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Settings from the environment. Only entrypoints call this."""
    return Settings()
