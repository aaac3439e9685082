# Path: core/indexing/index_cache.py
# Purpose: Build, persist, and reload sermon index snapshots for a vault.
# Layer: core/indexing.
# Details: Coordinates scanning and aggregation, then writes sermon-index.json at the vault root.

from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, Optional

from core.models.domain import SermonIndexSnapshot, Stats
from core.records.parser import record_from_payload
from core.storage.base import VaultFileSystem
from .scanner import VaultScanner
from .stats import aggregate

logger = logging.getLogger(__name__)

INDEX_FILENAME = "sermon-index.json"
DEFAULT_STALE_AFTER_SECONDS = 3600


def snapshot_from_payload(payload: Dict[str, Any]) -> SermonIndexSnapshot:
    """Rebuild a snapshot from the cache file's JSON object.

    Raises:
        ValueError, KeyError, TypeError, AttributeError: If the payload does not have the cache shape.
    """

    if not isinstance(payload, dict):
        raise ValueError("sermon index must be a JSON object")

    sermons = payload.get("sermons", [])
    stats = payload.get("stats") or {}
    if not isinstance(sermons, list) or not isinstance(stats, dict):
        raise ValueError("sermon index has malformed sermons or stats")

    records = [record_from_payload(item) for item in sermons]
    return SermonIndexSnapshot(
        records=records,
        scanned_at_epoch_ms=int(payload["lastScanned"]),
        stats=Stats.from_dict(stats),
        total_count=int(payload.get("totalCount", len(records))),
    )


class IndexCache:
    """Own the cached index snapshot of a vault.

    The cache never expires snapshots on its own; callers apply a staleness
    policy with :meth:`is_stale` or :meth:`load_or_rebuild`. Rebuilds are not
    coordinated, so concurrent rebuilds of one vault are last-writer-wins.
    """

    def __init__(
        self,
        fs: VaultFileSystem,
        scanner: VaultScanner,
        index_filename: str = INDEX_FILENAME,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.fs = fs
        self.scanner = scanner
        self.index_filename = index_filename
        self._clock = clock
        self._last_stamp_ms = 0

    def index_path(self, root: Path) -> Path:
        return Path(root) / self.index_filename

    def load(self, root: Path) -> Optional[SermonIndexSnapshot]:
        """Return the persisted snapshot, or None when it is absent or cannot be decoded."""

        path = self.index_path(root)
        try:
            if not self.fs.exists(path):
                return None
            payload = json.loads(self.fs.read_text(path))
            snapshot = snapshot_from_payload(payload)
        except (OSError, UnicodeDecodeError, ValueError, KeyError, TypeError, AttributeError) as exc:
            logger.error("Failed to load sermon index %s: %s", path, exc)
            return None

        self._last_stamp_ms = max(self._last_stamp_ms, snapshot.scanned_at_epoch_ms)
        return snapshot

    def save(self, root: Path, snapshot: SermonIndexSnapshot) -> None:
        """Overwrite the cache file with the given snapshot."""

        # core/storage/base.py::VaultFileSystem.write_text - creates the vault root if needed.
        self.fs.write_text(self.index_path(root), json.dumps(snapshot.to_dict(), indent=2, ensure_ascii=False))

    def rebuild(self, root: Path) -> SermonIndexSnapshot:
        """
        Scan the vault, aggregate statistics, and persist a fresh snapshot.

        External calls:
        - core/indexing/scanner.py::VaultScanner.scan - collect valid records.
        - core/indexing/stats.py::aggregate - compute grouped counts.

        Raises:
            IndexBuildError: If the vault root cannot be listed. Persist failures are only logged.
        """

        logger.info("Building sermon index for %s", root)
        records = self.scanner.scan(root)
        snapshot = SermonIndexSnapshot(
            records=records,
            scanned_at_epoch_ms=self._stamp(),
            stats=aggregate(records),
        )

        try:
            self.save(root, snapshot)
        except OSError as exc:
            logger.error("Failed to save sermon index for %s: %s", root, exc)
        return snapshot

    def is_stale(
        self,
        snapshot: SermonIndexSnapshot,
        max_age_seconds: float = DEFAULT_STALE_AFTER_SECONDS,
        now_ms: Optional[int] = None,
    ) -> bool:
        """Return True when the snapshot is older than ``max_age_seconds``."""

        now_ms = self._now_ms() if now_ms is None else now_ms
        return now_ms - snapshot.scanned_at_epoch_ms > max_age_seconds * 1000

    def load_or_rebuild(
        self, root: Path, max_age_seconds: float = DEFAULT_STALE_AFTER_SECONDS
    ) -> SermonIndexSnapshot:
        """Return the cached snapshot, rebuilding it when absent or stale."""

        snapshot = self.load(root)
        if snapshot is None or self.is_stale(snapshot, max_age_seconds):
            return self.rebuild(root)
        return snapshot

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def _stamp(self) -> int:
        self._last_stamp_ms = max(self._now_ms(), self._last_stamp_ms)
        return self._last_stamp_ms
