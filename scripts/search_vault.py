# Path: scripts/search_vault.py
# Purpose: Simple CLI to run a filtered search against a sermon vault index.
# Layer: scripts.
# Details: Loads the cached index (rebuilding when stale) and prints matches newest first.

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
from core.models.domain import FileFormat, SearchFilter
from core.search import SearchPipeline, sort_by_date
from core.storage import LocalFileSystem


def main() -> int:
    """Execute a search from the command line."""

    settings = AppSettings.from_env()
    parser = argparse.ArgumentParser(description="Search a Sermon Vault index")
    parser.add_argument("--vault", type=Path, default=settings.vault_path, help="Root folder of the sermon vault")
    parser.add_argument("--text", type=str, default=None, help="Case-insensitive text to look for")
    parser.add_argument(
        "--format",
        dest="formats",
        action="append",
        choices=[item.value for item in FileFormat],
        help="Artifact format to keep (repeatable)",
    )
    parser.add_argument("--tag", dest="tags", action="append", help="Tag to keep (repeatable)")
    parser.add_argument("--location", dest="locations", action="append", help="Delivery location (repeatable)")
    parser.add_argument("--service", dest="services", action="append", help="Delivery service (repeatable)")
    parser.add_argument("--series", dest="series", action="append", help="Series name (repeatable)")
    parser.add_argument("--year-from", type=int, default=None, help="First year to include")
    parser.add_argument("--year-to", type=int, default=None, help="Last year to include")
    parser.add_argument("--log-level", default="WARNING", help="Logging verbosity")
    args = parser.parse_args()

    if args.vault is None:
        parser.error("--vault is required when SERMON_VAULT_PATH is not set")

    configure_logging(args.log_level)
    fs = LocalFileSystem()
    cache = IndexCache(fs, VaultScanner(fs, metadata_suffix=settings.metadata_suffix), index_filename=settings.index_filename)

    try:
        snapshot = cache.load_or_rebuild(args.vault, settings.stale_after_seconds)
    except IndexBuildError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    search_filter = SearchFilter(
        query_text=args.text,
        file_formats=args.formats,
        locations=args.locations,
        services=args.services,
        series=args.series,
        tags=args.tags,
        year_from=args.year_from,
        year_to=args.year_to,
    )
    results = sort_by_date(SearchPipeline().search(snapshot.records, search_filter))

    for record in results:
        print(f"{record.primary_date.isoformat()}  [{record.file_format.value}]  {record.title}  ({record.source_file_path})")
    print(f"{len(results)} of {snapshot.total_count} sermons matched")
    return 0


if __name__ == "__main__":
    sys.exit(main())
