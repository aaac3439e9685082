# Path: core/vault/__init__.py
# Purpose: Package initializer for vault-level services.
# Layer: core/vault.
# Details: Exposes the sermon library and the vocabulary store.

from .library import SermonLibrary
from .vault_data import VAULT_DATA_FILENAME, VOCABULARIES, VaultDataStore, default_vault_data

__all__ = ["SermonLibrary", "VaultDataStore", "VAULT_DATA_FILENAME", "VOCABULARIES", "default_vault_data"]
