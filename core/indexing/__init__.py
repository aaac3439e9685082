# Path: core/indexing/__init__.py
# Purpose: Package initializer for vault scanning, aggregation, and index caching.
# Layer: core/indexing.
# Details: Exposes the scanner, statistics helpers, and the snapshot cache.

from .index_cache import INDEX_FILENAME, IndexCache, snapshot_from_payload
from .scanner import ScanReport, VaultScanner
from .stats import aggregate, extract_filter_options

__all__ = [
    "INDEX_FILENAME",
    "IndexCache",
    "ScanReport",
    "VaultScanner",
    "aggregate",
    "extract_filter_options",
    "snapshot_from_payload",
]
