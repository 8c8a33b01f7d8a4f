"""
NoteKeeper Backend - Application Configuration
===============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads environment variables (or a .env file),
       validates types/ranges, and exposes a module-level `settings` object.
Who:   Imported by main.py (logging, CORS) and __main__.py (bind address).
When:  Loaded once at import time.

The service has no persistent state, so the bind address is the only
operational knob; the rest controls logging and CORS.
"""

from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development.
    """

    # ── Server ────────────────────────────────────────────────────────────
    # Same address the original service listened on
    backend_host: str = Field(default="127.0.0.1")
    backend_port: int = Field(default=3000, ge=1, le=65535)

    # Valid: DEBUG, INFO, WARNING, ERROR, CRITICAL
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

    # ── CORS ──────────────────────────────────────────────────────────────
    # Format: comma-separated origins
    cors_origins: str = Field(default="http://localhost:3000")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


settings = Settings()
