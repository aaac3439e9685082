# Path: core/search/pipeline.py
# Purpose: Orchestrate in-memory sermon search by composing filter clauses.
# Layer: core/search.
# Details: Builds one clause per present filter field and keeps records that satisfy all of them.

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List

from core.models.domain import SearchFilter, SermonRecord
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


class SearchPipeline:
    """High-level service bridging API/CLI layers with the record collection."""

    def build_clauses(self, search_filter: SearchFilter) -> List[SearchClause]:
        """Translate a filter into clauses; ``None`` fields produce no clause."""

        clauses: List[SearchClause] = []
        if search_filter.query_text:
            clauses.append(TextQueryClause(search_filter.query_text))
        if search_filter.file_formats is not None:
            clauses.append(FileFormatClause(search_filter.file_formats))
        if search_filter.locations is not None:
            clauses.append(LocationClause(search_filter.locations))
        if search_filter.services is not None:
            clauses.append(ServiceClause(search_filter.services))
        if search_filter.series is not None:
            clauses.append(SeriesClause(search_filter.series))
        if search_filter.tags is not None:
            clauses.append(TagClause(search_filter.tags))
        if search_filter.year_from is not None or search_filter.year_to is not None:
            clauses.append(YearRangeClause(search_filter.year_from, search_filter.year_to))
        return clauses

    def search(self, records: Iterable[SermonRecord], search_filter: SearchFilter) -> List[SermonRecord]:
        """
        Return the records matching every clause, preserving input order.

        External calls:
        - core/search/clauses.py::SearchClause.matches - evaluates each criterion.
        """

        clauses = self.build_clauses(search_filter)
        return [record for record in records if all(clause.matches(record) for clause in clauses)]


def search(records: Iterable[SermonRecord], search_filter: SearchFilter) -> List[SermonRecord]:
    """Convenience wrapper around :meth:`SearchPipeline.search`."""

    return SearchPipeline().search(records, search_filter)


def sort_by_date(records: Iterable[SermonRecord], descending: bool = True) -> List[SermonRecord]:
    return sorted(records, key=lambda record: record.primary_date, reverse=descending)


def group_by_year(records: Iterable[SermonRecord]) -> Dict[int, List[SermonRecord]]:
    grouped: Dict[int, List[SermonRecord]] = defaultdict(list)
    for record in records:
        grouped[record.year].append(record)
    return dict(grouped)
