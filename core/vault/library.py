# Path: core/vault/library.py
# Purpose: Import sermon artifacts into the year-folder vault and maintain their sidecar files.
# Layer: core/vault.
# Details: Artifacts land in <vault>/<year>/<filename> with a sidecar <filename>.md written next to them.

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date
from pathlib import Path
from typing import Optional

from core.errors import SermonImportError
from core.models.domain import SermonRecord
from core.records.naming import (
    DEFAULT_METADATA_SUFFIX,
    file_format_for,
    generate_sermon_id,
    is_supported_file,
    metadata_file_name,
)
from core.records.parser import Skip, parse_sermon
from core.records.serializer import serialize_sermon
from core.storage.base import VaultFileSystem

logger = logging.getLogger(__name__)


class SermonLibrary:
    """Create, import, and update sermons stored in a vault.

    Responsibilities:
    - Build metadata templates with fresh identifiers.
    - Copy artifacts into the year folder of their primary date.
    - Write and rewrite sidecar files via the serializer.
    """

    def __init__(self, fs: VaultFileSystem, metadata_suffix: str = DEFAULT_METADATA_SUFFIX) -> None:
        self.fs = fs
        self.metadata_suffix = metadata_suffix

    def create_metadata_template(self, title: str, primary_date: Optional[date] = None) -> SermonRecord:
        """Return an unsaved record with a fresh id; paths are assigned on import."""

        return SermonRecord(
            id=generate_sermon_id(),
            title=title,
            primary_date=primary_date or date.today(),
            metadata_file_path=Path(),
            source_file_path=Path(),
            file_name="",
        )

    def import_sermon(self, vault_root: Path, source_file: Path, record: SermonRecord) -> SermonRecord:
        """
        Copy an artifact into the vault and write its sidecar.

        External calls:
        - core/storage/base.py::VaultFileSystem.copy_file - copy the artifact into its year folder.
        - core/records/serializer.py::serialize_sermon - render the sidecar text.

        Raises:
            SermonImportError: If the artifact or the sidecar cannot be written.
        """

        source_file = Path(source_file)
        year = record.primary_date.year
        year_dir = Path(vault_root) / str(year)
        file_name = source_file.name
        if not is_supported_file(file_name):
            logger.warning("Importing %s with an unrecognised format", file_name)

        imported = replace(
            record,
            file_name=file_name,
            file_format=file_format_for(file_name),
            source_file_path=year_dir / file_name,
            metadata_file_path=year_dir / metadata_file_name(file_name, self.metadata_suffix),
            year=year,
        )

        try:
            self.fs.copy_file(source_file, imported.source_file_path)
            self.fs.write_text(imported.metadata_file_path, serialize_sermon(imported))
        except OSError as exc:
            logger.error("Failed to import sermon %s: %s", source_file, exc)
            raise SermonImportError(f"Cannot import sermon file: {source_file}") from exc

        logger.info("Imported %s into %s", file_name, year_dir)
        return imported

    def update_metadata(self, record: SermonRecord) -> None:
        """Rewrite the sidecar of an existing record."""

        try:
            self.fs.write_text(record.metadata_file_path, serialize_sermon(record))
        except OSError as exc:
            logger.error("Failed to update metadata %s: %s", record.metadata_file_path, exc)
            raise SermonImportError("Cannot update sermon metadata") from exc

    def load_sermon(self, metadata_path: Path) -> Optional[SermonRecord]:
        """Read and parse one sidecar; return None when it cannot be admitted."""

        try:
            content = self.fs.read_text(metadata_path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to load sermon %s: %s", metadata_path, exc)
            return None

        result = parse_sermon(content, metadata_path, suffix=self.metadata_suffix)
        if isinstance(result, Skip):
            logger.warning("Skipping invalid metadata file %s: %s", result.path, result.reason)
            return None
        return result
