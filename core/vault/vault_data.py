# Path: core/vault/vault_data.py
# Purpose: Persist the tag, location, and service vocabularies offered when tagging sermons.
# Layer: core/vault.
# Details: Stored as vault-data.json in the application data directory; every mutation re-sorts and rewrites the file.

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Optional

from core.errors import VaultDataError
from core.models.domain import VaultData
from core.storage.base import VaultFileSystem
from core.storage.local_fs import LocalFileSystem

logger = logging.getLogger(__name__)

VAULT_DATA_FILENAME = "vault-data.json"

DEFAULT_TAGS = ["Kasih", "Iman", "Pengharapan", "Natal", "Paskah", "Keluarga"]
DEFAULT_LOCATIONS = ["GBI Haleluya", "GBI Kristus"]
DEFAULT_SERVICES = ["Raya 1", "Raya 2", "Raya 3", "Raya 4", "Youth Service", "Kids Service"]

VOCABULARIES = ("tags", "locations", "services")


def default_vault_data() -> VaultData:
    return VaultData(
        tags=sorted(DEFAULT_TAGS),
        locations=sorted(DEFAULT_LOCATIONS),
        services=sorted(DEFAULT_SERVICES),
    )


class VaultDataStore:
    """Load and mutate the vocabularies file.

    Reads fall back to the default vocabularies; writes raise VaultDataError so
    callers can surface the failure.
    """

    def __init__(self, path: Path | str, fs: Optional[VaultFileSystem] = None) -> None:
        self.path = Path(path)
        self.fs = fs or LocalFileSystem()

    def load(self) -> VaultData:
        """Return the stored vocabularies, or the defaults when missing or unreadable."""

        try:
            if not self.fs.exists(self.path):
                return default_vault_data()
            payload = json.loads(self.fs.read_text(self.path))
            if not isinstance(payload, dict):
                raise ValueError("vault data must be a JSON object")
            return VaultData.from_dict(payload)
        except (OSError, UnicodeDecodeError, ValueError, TypeError) as exc:
            logger.error("Failed to load vault data %s: %s", self.path, exc)
            return default_vault_data()

    def save(self, data: VaultData) -> None:
        """Overwrite the vocabularies file."""

        try:
            self.fs.write_text(self.path, json.dumps(data.to_dict(), indent=2, ensure_ascii=False))
        except OSError as exc:
            logger.error("Failed to save vault data %s: %s", self.path, exc)
            raise VaultDataError("Cannot save vault data") from exc

    def add(self, vocabulary: str, value: str) -> VaultData:
        """Add a value to one vocabulary; duplicates and blank values are ignored."""

        value = value.strip()
        data = self.load()
        items = self._items(data, vocabulary)
        if value and value not in items:
            items.append(value)
            items.sort()
            self.save(data)
        return data

    def remove(self, vocabulary: str, value: str) -> VaultData:
        """Remove every occurrence of a value from one vocabulary."""

        data = self.load()
        remaining = sorted(item for item in self._items(data, vocabulary) if item != value)
        setattr(data, vocabulary, remaining)
        self.save(data)
        return data

    def add_tag(self, tag: str) -> VaultData:
        return self.add("tags", tag)

    def remove_tag(self, tag: str) -> VaultData:
        return self.remove("tags", tag)

    def add_location(self, location: str) -> VaultData:
        return self.add("locations", location)

    def remove_location(self, location: str) -> VaultData:
        return self.remove("locations", location)

    def add_service(self, service: str) -> VaultData:
        return self.add("services", service)

    def remove_service(self, service: str) -> VaultData:
        return self.remove("services", service)

    @staticmethod
    def _items(data: VaultData, vocabulary: str) -> List[str]:
        if vocabulary not in VOCABULARIES:
            raise ValueError(f"Unknown vocabulary: {vocabulary}")
        return getattr(data, vocabulary)
