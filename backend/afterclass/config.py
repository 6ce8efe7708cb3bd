"""
Afterclass API: Application Configuration
==========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or a .env file),
       validates types, and provides a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time.

Environment overrides:
    MONGODB_URI      Connection string for the document store
    MONGODB_DB       Database holding the `lessons` and `orders` collections
    PORT / NODE_PORT HTTP listen port
"""

from pathlib import Path
from typing import List

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

# backend/ directory; bundled images and seed data live beneath it
BACKEND_ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have local-development defaults, so the service starts against
    a MongoDB instance on localhost without any configuration.
    """

    # ── Document Store ────────────────────────────────────────────────────
    mongodb_uri: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB connection string",
    )
    mongodb_db: str = Field(default="cst3144", description="MongoDB database name")

    # Bounds how long the startup ping waits for a reachable server
    mongodb_timeout_ms: int = Field(default=5000, ge=100, le=120_000)

    # ── Static Files ──────────────────────────────────────────────────────
    images_dir: str = Field(default=str(BACKEND_ROOT / "public" / "images"))

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated list; "*" allows every origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("port", "node_port", "backend_port"),
    )

    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "populate_by_name": True,
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
