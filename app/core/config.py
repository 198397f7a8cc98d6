# app/core/config.py
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field


class Settings(BaseSettings):
    DATABASE_URL: str = Field(default="sqlite:///./tickets.db")
    APP_NAME: str = "Ticket Assignment API"
    APP_DESC: str = "Assign tickets to users and track their status"
    APP_VERSION: str = "1.0.0"

    # JWT
    JWT_SECRET: str = "dev_secret"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60

    # CORS origins, comma separated
    CORS_ORIGINS: str | None = None

    LOG_LEVEL: str = "INFO"
    LOG_SQL: bool = False

    # Ticket workflow switches
    VALIDATE_ASSIGNEES: bool = True
    UPDATE_REQUIRES_EXISTING_TICKET: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    @property
    def cors_origins(self) -> list[str]:
        if not self.CORS_ORIGINS:
            return ["*"]
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


__all__ = ["Settings", "get_settings"]
