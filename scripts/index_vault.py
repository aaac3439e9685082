# Path: scripts/index_vault.py
# Purpose: CLI tool to scan a sermon vault and build or refresh its cached index.
# Layer: scripts.
# Details: Demonstrates how to wire the file system, scanner, and index cache together.

from __future__ import annotations

import argparse
import sys
from pathlib import Path

# Ensure project root is on sys.path when running as a script.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from config import AppSettings
from core.errors import IndexBuildError
from core.indexing import IndexCache, VaultScanner
from core.logging_utils import configure_logging
from core.storage import LocalFileSystem


def main() -> int:
    """Load the cached index of a vault, rebuilding it when forced, missing, or stale."""

    settings = AppSettings.from_env()
    parser = argparse.ArgumentParser(description="Index a Sermon Vault folder")
    parser.add_argument("--vault", type=Path, default=settings.vault_path, help="Root folder of the sermon vault")
    parser.add_argument("--force", action="store_true", help="Rebuild even when the cached index is fresh")
    parser.add_argument(
        "--max-age",
        type=int,
        default=settings.stale_after_seconds,
        help="Seconds after which the cached index is considered stale",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="Logging verbosity")
    args = parser.parse_args()

    if args.vault is None:
        parser.error("--vault is required when SERMON_VAULT_PATH is not set")

    configure_logging(args.log_level)
    fs = LocalFileSystem()
    scanner = VaultScanner(fs, metadata_suffix=settings.metadata_suffix, show_progress=True)
    cache = IndexCache(fs, scanner, index_filename=settings.index_filename)

    try:
        snapshot = cache.rebuild(args.vault) if args.force else cache.load_or_rebuild(args.vault, args.max_age)
    except IndexBuildError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Indexed {snapshot.total_count} sermons in {args.vault}")
    for year, count in sorted(snapshot.stats.by_year.items()):
        print(f"  {year}: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
