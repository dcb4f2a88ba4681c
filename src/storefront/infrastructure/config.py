"""Runtime settings, read from the environment.

A ``.env`` file in the working directory is loaded first (without
overriding variables that are already set).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"
_DEV_SECRET_KEY = "dev-secret-change-me"


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    secret_key: str
    cookie_jar: Path
    log_level: str = "WARNING"


def load_settings() -> Settings:
    load_dotenv()

    data_dir = Path(os.getenv("STOREFRONT_DATA_DIR") or _DEFAULT_DATA_DIR)
    cookie_jar = os.getenv("STOREFRONT_COOKIE_JAR")
    return Settings(
        data_dir=data_dir,
        secret_key=os.getenv("STOREFRONT_SECRET_KEY") or _DEV_SECRET_KEY,
        cookie_jar=Path(cookie_jar) if cookie_jar else data_dir / "cookies.json",
        log_level=(os.getenv("LOG_LEVEL") or "WARNING").upper(),
    )
