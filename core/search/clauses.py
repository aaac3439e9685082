# Path: core/search/clauses.py
# Purpose: Define search clauses that each test one filter criterion against a sermon record.
# Layer: core/search.
# Details: Clauses are AND-combined by the pipeline; collection clauses pass when any value intersects.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import FrozenSet, Iterable, Optional

from core.models.domain import FileFormat, SermonRecord


class SearchClause(ABC):
    """Interface for a single record predicate."""

    id: str
    description: str

    @abstractmethod
    def matches(self, record: SermonRecord) -> bool:
        """Return True if the record satisfies this clause."""


class TextQueryClause(SearchClause):
    """Case-insensitive substring match over the record's searchable text."""

    id = "query_text"
    description = "Match text in title, deliveries, tags, references, and notes."

    def __init__(self, query: str) -> None:
        self.query = query.lower()

    @staticmethod
    def searchable_text(record: SermonRecord) -> str:
        parts = [
            record.title,
            *record.locations(),
            *record.services(),
            *record.tags,
            *record.references,
            record.notes or "",
        ]
        return " ".join(parts).lower()

    def matches(self, record: SermonRecord) -> bool:
        return self.query in self.searchable_text(record)


class FileFormatClause(SearchClause):
    id = "file_formats"
    description = "Keep records whose artifact format is in the set."

    def __init__(self, formats: Iterable[FileFormat | str]) -> None:
        self.formats: FrozenSet[FileFormat] = frozenset(FileFormat.coerce(item) for item in formats)

    def matches(self, record: SermonRecord) -> bool:
        return record.file_format in self.formats


class LocationClause(SearchClause):
    id = "locations"
    description = "Keep records delivered at any of the given locations."

    def __init__(self, locations: Iterable[str]) -> None:
        self.locations = frozenset(locations)

    def matches(self, record: SermonRecord) -> bool:
        return any(location in self.locations for location in record.locations())


class ServiceClause(SearchClause):
    id = "services"
    description = "Keep records delivered in any of the given services."

    def __init__(self, services: Iterable[str]) -> None:
        self.services = frozenset(services)

    def matches(self, record: SermonRecord) -> bool:
        return any(service in self.services for service in record.services())


class SeriesClause(SearchClause):
    id = "series"
    description = "Keep records belonging to one of the given series."

    def __init__(self, series: Iterable[str]) -> None:
        self.series = frozenset(series)

    def matches(self, record: SermonRecord) -> bool:
        return record.series is not None and record.series in self.series


class TagClause(SearchClause):
    id = "tags"
    description = "Keep records carrying any of the given tags."

    def __init__(self, tags: Iterable[str]) -> None:
        self.tags = frozenset(tags)

    def matches(self, record: SermonRecord) -> bool:
        return any(tag in self.tags for tag in record.tags)


class YearRangeClause(SearchClause):
    """Inclusive bounds on the directory-derived year; a missing bound is open."""

    id = "year_range"
    description = "Keep records whose year lies within the inclusive bounds."

    def __init__(self, year_from: Optional[int] = None, year_to: Optional[int] = None) -> None:
        self.year_from = year_from
        self.year_to = year_to

    def matches(self, record: SermonRecord) -> bool:
        if self.year_from is not None and record.year < self.year_from:
            return False
        if self.year_to is not None and record.year > self.year_to:
            return False
        return True
