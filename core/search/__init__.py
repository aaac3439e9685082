# Path: core/search/__init__.py
# Purpose: Package initializer for search clauses and pipeline orchestration.
# Layer: core/search.
# Details: Exposes clause interfaces and the main search entrypoints.

from .clauses import (
    FileFormatClause,
    LocationClause,
    SearchClause,
    SeriesClause,
    ServiceClause,
    TagClause,
    TextQueryClause,
    YearRangeClause,
)
from .pipeline import SearchPipeline, group_by_year, search, sort_by_date

__all__ = [
    "SearchPipeline",
    "SearchClause",
    "TextQueryClause",
    "FileFormatClause",
    "LocationClause",
    "ServiceClause",
    "SeriesClause",
    "TagClause",
    "YearRangeClause",
    "search",
    "sort_by_date",
    "group_by_year",
]
