"""
Configuration Settings

This module defines application configuration using Pydantic Settings.
All configuration is loaded from environment variables or .env file.

Design Decisions:
- Uses pydantic-settings for type-safe configuration
- DATABASE_URL has no default: startup fails when it is missing
- Settings are frozen and handed to the app factory, never mutated afterwards
- Listening address and id format are configuration, not constants
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

__all__ = ["Settings", "get_settings", "BASE_DIR"]

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables or .env file.
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
        frozen=True,
    )

    # Database Configuration
    # For SQLite: sqlite+aiosqlite:///./shorturl.db
    DATABASE_URL: str = Field(
        ...,
        description="Async SQLAlchemy connection string (required)"
    )
    DB_POOL_SIZE: int = Field(
        default=5,
        ge=1,
        description="Number of connections kept in the pool"
    )
    DB_MAX_OVERFLOW: int = Field(
        default=10,
        ge=0,
        description="Connections allowed beyond DB_POOL_SIZE under load"
    )
    DB_POOL_TIMEOUT: float = Field(
        default=30.0,
        gt=0,
        description="Seconds to wait for a free pooled connection"
    )
    DB_ECHO: bool = Field(
        default=False,
        description="Log every SQL statement (debugging only)"
    )
    RUN_MIGRATIONS: bool = Field(
        default=True,
        description="Apply pending migrations before accepting connections"
    )

    # Server Configuration
    HOST: str = Field(default="127.0.0.1", description="Listening host")
    PORT: int = Field(default=3000, ge=0, le=65535, description="Listening port")
    BASE_URL: Optional[str] = Field(
        default=None,
        description="Address prefixed to generated ids (defaults to HOST:PORT)"
    )
    LOG_LEVEL: str = Field(default="INFO", description="Log level name")

    # Short Id Configuration
    ID_ALPHABET: str = Field(
        default="1234567890abcdef",
        description="Symbols short ids are drawn from"
    )
    ID_LENGTH: int = Field(
        default=10,
        ge=1,
        description="Fixed length of every short id"
    )
    ID_GENERATION_ATTEMPTS: int = Field(
        default=3,
        ge=1,
        description="Insert attempts per short URL when a generated id collides"
    )

    @field_validator("ID_ALPHABET")
    @classmethod
    def _check_alphabet(cls, value: str) -> str:
        if not value:
            raise ValueError("ID_ALPHABET must not be empty")
        if len(set(value)) != len(value):
            raise ValueError("ID_ALPHABET must not repeat symbols")
        return value

    @property
    def service_address(self) -> str:
        """Address used as the prefix of generated short URLs."""
        if self.BASE_URL:
            return self.BASE_URL.rstrip("/")
        return f"{self.HOST}:{self.PORT}"


@lru_cache
def get_settings() -> Settings:
    """
    Build the process-wide settings once.

    Raises:
        pydantic.ValidationError: If required settings (DATABASE_URL) are missing
    """
    return Settings()
