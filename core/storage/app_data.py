# Path: core/storage/app_data.py
# Purpose: Prepare the per-user application data directory at process start.
# Layer: core/storage.
# Details: Called once by start-up code; callers check the returned path or handle AppDataInitError.

from __future__ import annotations

import logging
from pathlib import Path

from core.errors import AppDataInitError

logger = logging.getLogger(__name__)

APP_DATA_SUBDIRECTORIES = ("cache", "index")


def initialize_app_data(base_dir: Path | str) -> Path:
    """Create the application data directory and its fixed subdirectories.

    Safe to call repeatedly; existing directories are left untouched.

    Raises:
        AppDataInitError: If any directory cannot be created.
    """

    base = Path(base_dir).expanduser()
    try:
        base.mkdir(parents=True, exist_ok=True)
        for name in APP_DATA_SUBDIRECTORIES:
            (base / name).mkdir(exist_ok=True)
    except OSError as exc:
        raise AppDataInitError(f"Cannot initialize app data structure at {base}") from exc

    logger.info("App data directory ready at %s", base)
    return base
