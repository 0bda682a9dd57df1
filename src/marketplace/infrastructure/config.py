"""Runtime settings, read once from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def _get_bool(env_name: str, default: bool = False) -> bool:
    val = os.getenv(env_name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "y", "on"}


@dataclass
class Settings:
    # Database
    DB_URL: str = os.getenv("MARKETPLACE_DB_URL", f"sqlite:///{_DATA_DIR / 'marketplace.db'}")
    DB_ECHO: bool = _get_bool("MARKETPLACE_DB_ECHO", False)

    # Logging
    LOG_LEVEL: str = os.getenv("MARKETPLACE_LOG_LEVEL", "INFO")
    LOG_JSON: bool = _get_bool("MARKETPLACE_LOG_JSON", False)

    # Listings
    DEFAULT_PAGE_SIZE: int = int(os.getenv("MARKETPLACE_DEFAULT_PAGE_SIZE", "10"))


settings = Settings()
