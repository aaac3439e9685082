# Path: core/storage/base.py
# Purpose: Define the file-system collaborator consumed by scanning, caching, and vault services.
# Layer: core/storage.
# Details: Provides abstract methods for tree listing, UTF-8 text I/O, existence checks, and artifact copies.

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import List


class VaultFileSystem(ABC):
    """Abstract base class for pluggable file-system backends."""

    name: str

    @abstractmethod
    def list_files(self, root: Path, recursive: bool = True) -> List[Path]:
        """Return regular files under root; raise OSError when root cannot be read."""

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """Return the UTF-8 content of a file."""

    @abstractmethod
    def write_text(self, path: Path, content: str) -> None:
        """Overwrite a file with UTF-8 content, creating parent directories as needed."""

    @abstractmethod
    def exists(self, path: Path) -> bool:
        """Return True if a file or directory exists at path."""

    @abstractmethod
    def copy_file(self, source: Path, target: Path) -> None:
        """Copy a file byte-for-byte, creating parent directories as needed."""
