# Path: config/settings.py
# Purpose: Provide typed application configuration models and their persistence.
# Layer: config.
# Details: Centralizes vault location, file names, cache staleness policy, and logging level.

from __future__ import annotations

import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

SETTINGS_FILENAME = "sermon-vault-settings.json"


class AppSettings(BaseModel):
    """Top-level application settings shared across services and interfaces."""

    vault_path: Optional[Path] = Field(default=None, description="Root folder of the year-per-folder sermon vault.")
    app_data_dir: Path = Field(
        default=Path("~/.sermon-vault").expanduser(),
        description="Per-user directory holding settings and vault vocabularies.",
    )
    metadata_suffix: str = Field(default=".md", description="Extension appended to artifact names for sidecar files.")
    index_filename: str = Field(default="sermon-index.json", description="Cache file written at the vault root.")
    vault_data_filename: str = Field(default="vault-data.json", description="Vocabularies file in the app data dir.")
    stale_after_seconds: int = Field(default=3600, description="Age after which callers rebuild the cached index.")
    show_progress: bool = Field(default=False, description="Flag indicating if scans should render a progress bar.")
    log_level: str = Field(default="INFO", description="Verbosity level for application logs.")
    theme: str = Field(default="system", description="UI theme preference: light, dark, or system.")
    last_opened: Optional[str] = Field(default=None, description="ISO timestamp of the last vault selection.")

    @property
    def vault_data_path(self) -> Path:
        return self.app_data_dir / self.vault_data_filename

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Instantiate settings, applying environment overrides when available."""

        overrides = {}
        if os.environ.get("SERMON_VAULT_PATH"):
            overrides["vault_path"] = Path(os.environ["SERMON_VAULT_PATH"]).expanduser()
        if os.environ.get("SERMON_VAULT_APP_DATA"):
            overrides["app_data_dir"] = Path(os.environ["SERMON_VAULT_APP_DATA"]).expanduser()
        if os.environ.get("SERMON_VAULT_LOG_LEVEL"):
            overrides["log_level"] = os.environ["SERMON_VAULT_LOG_LEVEL"]
        return cls(**overrides)


class SettingsStore:
    """Load and save AppSettings as JSON inside the application data directory."""

    def __init__(self, app_data_dir: Path | str, filename: str = SETTINGS_FILENAME) -> None:
        self.path = Path(app_data_dir) / filename

    def load(self) -> Optional[AppSettings]:
        """Return stored settings, or None when absent or unreadable."""

        if not self.path.exists():
            return None
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
            return AppSettings.model_validate(payload)
        except (OSError, ValueError, ValidationError) as exc:
            logger.error("Failed to load settings %s: %s", self.path, exc)
            return None

    def save(self, settings: AppSettings) -> None:
        """Overwrite the settings file, creating the directory when needed."""

        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(settings.model_dump(mode="json"), indent=2), encoding="utf-8")

    def update_vault_path(self, vault_path: Path | str) -> AppSettings:
        """Persist a newly selected vault and stamp the selection time."""

        settings = self.load() or AppSettings(app_data_dir=self.path.parent)
        settings.vault_path = Path(vault_path)
        settings.last_opened = datetime.now().isoformat()
        self.save(settings)
        return settings


__all__ = ["AppSettings", "SettingsStore", "SETTINGS_FILENAME"]
