"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any environment at all; in a deployment you
override them via the environment or a ``.env`` loader of your choice.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Records API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional file to duplicate log output into.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path prefix under which the versioned router is mounted.  Empty by
    # default so that records live at ``/records``; set e.g. ``/api/v1``
    # when the service sits behind a gateway that expects versioned paths.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Which storage adapter ``create_app`` builds when none is passed in:
    # ``sqlite`` (persistent, default) or ``memory`` (lost on restart).
    storage_backend: str = os.getenv("STORAGE_BACKEND", "sqlite").lower()

    # Path to the SQLite database file.  If a relative path is provided,
    # it is resolved relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "records.db")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
