from __future__ import annotations

import os
from pathlib import Path

# Base data dir: repository_root/data (we are in backend/smartnotes/)
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


def data_dir() -> Path:
    return Path(os.getenv("APP_DATA_DIR", str(DEFAULT_DATA_DIR)))


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
