# Path: core/storage/__init__.py
# Purpose: Package initializer for file-system collaborators.
# Layer: core/storage.
# Details: Exposes the abstract file-system contract, the local implementation, and app-data setup.

from .app_data import initialize_app_data
from .base import VaultFileSystem
from .local_fs import LocalFileSystem

__all__ = ["VaultFileSystem", "LocalFileSystem", "initialize_app_data"]
