# Path: core/errors.py
# Purpose: Define the exception hierarchy raised by the core layer.
# Layer: core.
# Details: Structural failures surface to callers; per-file problems never reach this module.

from __future__ import annotations


class SermonVaultError(Exception):
    """Base class for all Sermon Vault failures."""


class IndexBuildError(SermonVaultError):
    """Raised when a scan cannot proceed at the vault root level."""


class VaultDataError(SermonVaultError):
    """Raised when the tag/location/service vocabularies cannot be persisted."""


class SermonImportError(SermonVaultError):
    """Raised when a sermon artifact or its sidecar cannot be written."""


class AppDataInitError(SermonVaultError):
    """Raised when the application data directory cannot be prepared."""


__all__ = [
    "SermonVaultError",
    "IndexBuildError",
    "VaultDataError",
    "SermonImportError",
    "AppDataInitError",
]
