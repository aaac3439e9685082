# Path: core/models/domain.py
# Purpose: Define domain models shared across parsing, indexing, search, and vault services.
# Layer: core/models.
# Details: Lightweight dataclasses simplify serialization between API, CLI, and core services.

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple


class FileFormat(str, Enum):
    """Closed set of sermon artifact formats recognised by extension."""

    KEYNOTE = "keynote"
    PAGES = "pages"
    PDF = "pdf"
    WORD = "word"
    POWERPOINT = "powerpoint"
    NOTES = "notes"
    MARKDOWN = "markdown"
    UNKNOWN = "unknown"

    @classmethod
    def coerce(cls, value: Any) -> "FileFormat":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            return cls.UNKNOWN


def _clean_items(items: Iterable[str], container):
    return container(text for text in (item.strip() for item in items) if text)


@dataclass(frozen=True)
class DeliverySession:
    """One occasion a sermon was preached."""

    date: str
    location: str = ""
    services: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "date", self.date.strip())
        object.__setattr__(self, "location", self.location.strip())
        object.__setattr__(self, "services", _clean_items(self.services, tuple))

    def to_dict(self) -> Dict[str, Any]:
        return {"date": self.date, "location": self.location, "services": list(self.services)}


@dataclass
class SermonRecord:
    """A sermon artifact together with the metadata read from its sidecar file."""

    id: str
    title: str
    primary_date: date
    metadata_file_path: Path
    source_file_path: Path
    file_name: str
    file_format: FileFormat = FileFormat.UNKNOWN
    year: int = 0
    deliveries: List[DeliverySession] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    series: Optional[str] = None
    references: List[str] = field(default_factory=list)
    notes: Optional[str] = None

    def __post_init__(self) -> None:
        # Text fields hold trimmed values, the same form the parser produces.
        self.id = self.id.strip()
        self.title = self.title.strip()
        self.series = (self.series or "").strip() or None
        self.notes = (self.notes or "").strip() or None
        self.tags = _clean_items(self.tags, list)
        self.references = _clean_items(self.references, list)
        self.deliveries = list(self.deliveries)

    def locations(self) -> List[str]:
        """Return the non-empty venue names of every delivery, in order."""

        return [delivery.location for delivery in self.deliveries if delivery.location]

    def services(self) -> List[str]:
        """Return every service name of every delivery, in order."""

        return [service for delivery in self.deliveries for service in delivery.services if service]

    def metadata_dict(self) -> Dict[str, Any]:
        """Return the user-editable metadata block in its persisted JSON shape."""

        payload: Dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "date": self.primary_date.isoformat(),
        }
        if self.deliveries:
            payload["deliveries"] = [delivery.to_dict() for delivery in self.deliveries]
        if self.tags:
            payload["tags"] = list(self.tags)
        if self.series:
            payload["series"] = self.series
        if self.references:
            payload["references"] = list(self.references)
        if self.notes:
            payload["notes"] = self.notes
        return payload

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "metadata": self.metadata_dict(),
            "fileType": self.file_format.value,
            "fileName": self.file_name,
            "filePath": str(self.source_file_path),
            "metadataPath": str(self.metadata_file_path),
            "year": self.year,
        }


@dataclass
class Stats:
    """Grouped counts computed over a full set of sermon records."""

    by_year: Dict[int, int] = field(default_factory=dict)
    by_file_format: Dict[str, int] = field(default_factory=dict)
    by_location: Dict[str, int] = field(default_factory=dict)
    by_service: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "byYear": {str(year): count for year, count in self.by_year.items()},
            "byType": dict(self.by_file_format),
            "byLocation": dict(self.by_location),
            "byService": dict(self.by_service),
        }

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Stats":
        return cls(
            by_year={int(year): int(count) for year, count in (payload.get("byYear") or {}).items()},
            by_file_format={str(key): int(count) for key, count in (payload.get("byType") or {}).items()},
            by_location={str(key): int(count) for key, count in (payload.get("byLocation") or {}).items()},
            by_service={str(key): int(count) for key, count in (payload.get("byService") or {}).items()},
        )


@dataclass
class SermonIndexSnapshot:
    """Result of one full vault scan; replaced wholesale by the next scan."""

    records: List[SermonRecord]
    scanned_at_epoch_ms: int
    stats: Stats
    total_count: int = -1

    def __post_init__(self) -> None:
        if self.total_count < 0:
            self.total_count = len(self.records)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sermons": [record.to_dict() for record in self.records],
            "lastScanned": self.scanned_at_epoch_ms,
            "totalCount": self.total_count,
            "stats": self.stats.to_dict(),
        }


@dataclass
class FilterOptions:
    """Sorted distinct values offered by filter pickers."""

    locations: List[str] = field(default_factory=list)
    services: List[str] = field(default_factory=list)
    series: List[str] = field(default_factory=list)
    tags: List[str] = field(default_factory=list)
    years: List[int] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "locations": list(self.locations),
            "services": list(self.services),
            "series": list(self.series),
            "tags": list(self.tags),
            "years": list(self.years),
        }


@dataclass
class SearchFilter:
    """Composable search criteria.

    ``None`` leaves a field unconstrained. An empty collection is a present
    constraint that no record can satisfy.
    """

    query_text: Optional[str] = None
    file_formats: Optional[Iterable[FileFormat | str]] = None
    locations: Optional[Iterable[str]] = None
    services: Optional[Iterable[str]] = None
    series: Optional[Iterable[str]] = None
    tags: Optional[Iterable[str]] = None
    year_from: Optional[int] = None
    year_to: Optional[int] = None


@dataclass
class VaultData:
    """Controlled vocabularies offered when tagging new sermons."""

    tags: List[str] = field(default_factory=list)
    locations: List[str] = field(default_factory=list)
    services: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, List[str]]:
        return {"tags": list(self.tags), "locations": list(self.locations), "services": list(self.services)}

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "VaultData":
        return cls(
            tags=[str(item) for item in payload.get("tags", [])],
            locations=[str(item) for item in payload.get("locations", [])],
            services=[str(item) for item in payload.get("services", [])],
        )
