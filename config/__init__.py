# Path: config/__init__.py
# Purpose: Package initializer for configuration module.
# Layer: config.
# Details: Exposes settings models and their JSON store for application-wide configuration.

from .settings import SETTINGS_FILENAME, AppSettings, SettingsStore

__all__ = ["AppSettings", "SettingsStore", "SETTINGS_FILENAME"]
