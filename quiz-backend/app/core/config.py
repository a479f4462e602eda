from __future__ import annotations

from functools import lru_cache
from typing import Any
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, AliasChoices, field_validator


class Settings(BaseSettings):
    # .env is optional; real environment variables take precedence
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # General
    APP_NAME: str = "Quiz Backend"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = Field(
        "INFO",
        validation_alias=AliasChoices("LOG_LEVEL", "log_level"),
    )

    # Listening socket
    HOST: str = Field(
        "0.0.0.0",
        validation_alias=AliasChoices("HOST", "host"),
    )
    PORT: int = Field(
        3000,
        validation_alias=AliasChoices("PORT", "port"),
        description="Port the HTTP server binds to",
    )

    # Database
    DATABASE_URL: str = Field(
        ...,
        validation_alias=AliasChoices("DATABASE_URL", "database_url"),
        description="Connection string of the quizzes database",
    )
    DB_ECHO: bool = Field(
        False,
        validation_alias=AliasChoices("DB_ECHO", "db_echo"),
        description="Log every SQL statement",
    )

    # CORS: a single allowed origin
    FRONTEND_ORIGIN: str = Field(
        "http://localhost:5173",
        validation_alias=AliasChoices("FRONTEND_ORIGIN", "frontend_origin"),
    )

    @field_validator("DATABASE_URL", mode="before")
    @classmethod
    def _normalize_database_url(cls, v: Any) -> Any:
        """
        Heroku-style URLs (postgres://...) and bare postgresql:// URLs are
        pointed at the psycopg 3 driver.
        """
        if isinstance(v, str):
            s = v.strip()
            for scheme in ("postgres://", "postgresql://"):
                if s.startswith(scheme):
                    return "postgresql+psycopg://" + s[len(scheme):]
            return s
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
