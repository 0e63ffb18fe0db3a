"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields, so the
application starts without any configuration at all.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User Management API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Path or connection string for the SQLite database.  Relative paths
    # are resolved against the package root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "users.db")

    # Which repository backs the API: ``sqlite`` (default) or ``memory``.
    # The in‑memory store loses all data on restart.
    user_storage: str = os.getenv("USER_STORAGE", "sqlite").lower()

    # Shortest local part (before the "@") accepted by the e‑mail rule.
    email_min_local_length: int = int(os.getenv("EMAIL_MIN_LOCAL_LENGTH", "2"))


# Environment variables must be set before this module is imported.
settings = Settings()
