"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; in a deployment you should
override them via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Subway Line API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the versioned router is mounted.  Clients of the
    # line API expect ``/lines`` at the root, so the default is empty.
    # Set e.g. API_PREFIX="/api/v1" to nest the routes.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Path to the SQLite database.  If a relative path is provided, it
    # will be resolved relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "subway.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
