# Path: core/storage/local_fs.py
# Purpose: Provide the local-disk implementation of the file-system collaborator.
# Layer: core/storage.
# Details: Implements listing and text I/O with pathlib so the core stays testable against tmp directories.

from __future__ import annotations

import shutil
from pathlib import Path
from typing import List

from .base import VaultFileSystem


class LocalFileSystem(VaultFileSystem):
    """File-system backend operating directly on local paths."""

    def __init__(self, name: str = "local") -> None:
        self.name = name

    def list_files(self, root: Path, recursive: bool = True) -> List[Path]:
        """Return regular files under root, sorted within each directory.

        Symlinked directories are not descended into.
        """

        root = Path(root)
        if not root.is_dir():
            raise NotADirectoryError(f"Cannot read directory: {root}")

        files: List[Path] = []
        for entry in sorted(root.iterdir(), key=lambda item: item.name):
            if entry.is_dir():
                if recursive and not entry.is_symlink():
                    files.extend(self.list_files(entry, recursive=True))
            elif entry.is_file():
                files.append(entry)
        return files

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        target = Path(path)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def copy_file(self, source: Path, target: Path) -> None:
        target = Path(target)
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
