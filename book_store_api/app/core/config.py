"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all.  Override the listening
address with ``HOST``/``PORT`` or with the command line flags accepted
by ``run.py``.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Book Store API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3000"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs go to the console
    # only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Whether a freshly created store starts with the three sample
    # books (ids "1", "2" and "3").  Set SEED_BOOKS=false to start with
    # an empty collection.
    seed_books: bool = _env_flag("SEED_BOOKS", "true")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables
# must be set before importing this module.
settings = Settings()
