# Path: core/indexing/scanner.py
# Purpose: Scan a sermon vault and collect parsed sermon records from sidecar files.
# Layer: core/indexing.
# Details: Per-file failures are logged and skipped; only a root-level listing failure aborts the scan.

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional

from tqdm import tqdm

from core.errors import IndexBuildError
from core.models.domain import SermonRecord
from core.records.naming import DEFAULT_METADATA_SUFFIX
from core.records.parser import Skip, parse_sermon
from core.storage.base import VaultFileSystem

logger = logging.getLogger(__name__)


@dataclass
class ScanReport:
    scanned: int = 0
    indexed: int = 0
    skipped: int = 0
    failed: int = 0


class VaultScanner:
    """Scan a vault root for sidecar metadata files and parse each one."""

    def __init__(
        self,
        fs: VaultFileSystem,
        metadata_suffix: str = DEFAULT_METADATA_SUFFIX,
        show_progress: bool = False,
    ) -> None:
        self.fs = fs
        self.metadata_suffix = metadata_suffix
        self.show_progress = show_progress
        self.last_report: Optional[ScanReport] = None

    def scan(self, root: Path) -> List[SermonRecord]:
        """
        Return the records of every valid sidecar under root, in discovery order.

        External calls:
        - core/storage/base.py::VaultFileSystem.list_files - enumerate the vault tree.
        - core/records/parser.py::parse_sermon - validate and normalize each sidecar.

        Raises:
            IndexBuildError: If the vault root itself cannot be listed.
        """

        root = Path(root)
        report = ScanReport()
        self.last_report = report
        candidates = list(self._iter_metadata_files(root))
        logger.info("Found %d metadata files under %s", len(candidates), root)

        records: List[SermonRecord] = []
        for path in tqdm(candidates, desc="Scanning sermons", unit="file", disable=not self.show_progress):
            report.scanned += 1
            try:
                content = self.fs.read_text(path)
            except (OSError, UnicodeDecodeError) as exc:
                report.failed += 1
                logger.warning("Skipping unreadable metadata file %s: %s", path, exc)
                continue

            result = parse_sermon(content, path, suffix=self.metadata_suffix)
            if isinstance(result, Skip):
                report.skipped += 1
                logger.warning("Skipping invalid metadata file %s: %s", result.path, result.reason)
                continue

            records.append(result)
            report.indexed += 1

        logger.info(
            "Scan of %s finished: %d indexed, %d skipped, %d failed",
            root,
            report.indexed,
            report.skipped,
            report.failed,
        )
        return records

    def _iter_metadata_files(self, root: Path) -> Iterable[Path]:
        """Yield sidecar files under the root directory."""

        try:
            paths = self.fs.list_files(root, recursive=True)
        except OSError as exc:
            logger.error("Failed to list vault root %s: %s", root, exc)
            raise IndexBuildError("Cannot build sermon index") from exc

        for path in paths:
            if path.name.endswith(self.metadata_suffix):
                yield path
