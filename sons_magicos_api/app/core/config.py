"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so that
the API starts without any configuration; in a production deployment
you should at least override the Basic authentication credentials.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Sons Mágicos API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Host and port used by ``run.py`` when launching uvicorn.
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))

    # Account accepted by the Basic authentication guard on mutating
    # routes.  The password is stored as a PBKDF2 ``salt$hash`` string
    # produced by ``create_password_hash.py``.  When the hash is empty
    # every mutating request is rejected.
    basic_auth_username: str = os.getenv("BASIC_AUTH_USERNAME", "admin")
    basic_auth_password_hash: str = os.getenv("BASIC_AUTH_PASSWORD_HASH", "")

    # Path to the SQLite database file.  A relative path is resolved
    # relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "sons_magicos.db")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
