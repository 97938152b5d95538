"""Centralized configuration loading.

Loads environment variables once and provides a typed Settings object
for the rest of the codebase. Entry points call get_settings() after
import so a local .env is respected.
"""

import os
from dataclasses import dataclass, field
from dotenv import load_dotenv


# Load .env once at import time
load_dotenv()

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))


def _default_database_url() -> str:
    return "sqlite:///" + os.path.join(PROJECT_ROOT, "data", "notes.db")


@dataclass
class Settings:
    # Database (root-level data directory by default)
    database_url: str = field(
        default_factory=lambda: os.getenv("DATABASE_URL", _default_database_url())
    )

    # Window
    window_title: str = field(default_factory=lambda: os.getenv("NT_WINDOW_TITLE", "Notes"))

    # Logging
    log_level: str = field(default_factory=lambda: os.getenv("NT_LOG_LEVEL", "INFO"))


def get_settings() -> Settings:
    """Return a new Settings instance reading the current environment."""
    return Settings()
