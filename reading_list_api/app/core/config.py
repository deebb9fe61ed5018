"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with an empty book list and no extra setup.
"""

import os
from dataclasses import dataclass
from typing import Optional

ID_STRATEGIES = ("length", "counter")


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Reading List API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    log_format: str = os.getenv("LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    log_date_format: str = os.getenv("LOG_DATE_FORMAT", "%Y-%m-%d %H:%M:%S")

    # Prefix under which the versioned router is mounted.  Empty by
    # default so the books collection lives at ``/books``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))

    # Optional JSON file with an array of books loaded once at startup.
    books_seed_file: Optional[str] = os.getenv("BOOKS_SEED_FILE") or None

    # How new ids are chosen.  ``length`` assigns ``len(collection) + 1``
    # and can reuse an id after a deletion; ``counter`` never reuses one.
    book_id_strategy: str = os.getenv("BOOK_ID_STRATEGY", "length").lower()


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
