# Path: core/indexing/stats.py
# Purpose: Reduce sermon records into grouped counts and distinct filter values.
# Layer: core/indexing.
# Details: Deliveries are the only source of location and service counts.

from __future__ import annotations

from collections import Counter
from typing import Iterable, Set

from core.models.domain import FilterOptions, SermonRecord, Stats


def aggregate(records: Iterable[SermonRecord]) -> Stats:
    """Count records by year and format, and deliveries by location and service, in one pass."""

    by_year: Counter = Counter()
    by_format: Counter = Counter()
    by_location: Counter = Counter()
    by_service: Counter = Counter()

    for record in records:
        by_year[record.year] += 1
        by_format[record.file_format.value] += 1
        for delivery in record.deliveries:
            if delivery.location:
                by_location[delivery.location] += 1
            for service in delivery.services:
                by_service[service] += 1

    return Stats(
        by_year=dict(by_year),
        by_file_format=dict(by_format),
        by_location=dict(by_location),
        by_service=dict(by_service),
    )


def extract_filter_options(records: Iterable[SermonRecord]) -> FilterOptions:
    """Return the sorted distinct locations, services, series, tags, and years."""

    locations: Set[str] = set()
    services: Set[str] = set()
    series: Set[str] = set()
    tags: Set[str] = set()
    years: Set[int] = set()

    for record in records:
        locations.update(record.locations())
        services.update(record.services())
        if record.series:
            series.add(record.series)
        tags.update(record.tags)
        years.add(record.year)

    return FilterOptions(
        locations=sorted(locations),
        services=sorted(services),
        series=sorted(series),
        tags=sorted(tags),
        years=sorted(years),
    )
