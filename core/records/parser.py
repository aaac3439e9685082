# Path: core/records/parser.py
# Purpose: Turn raw sidecar text into validated, normalized sermon records.
# Layer: core/records.
# Details: Two stages: decode frontmatter into a loose mapping, then coerce it into a SermonRecord or a Skip.

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

import frontmatter
import yaml
from frontmatter.default_handlers import YAMLHandler

from core.models.domain import DeliverySession, FileFormat, SermonRecord
from .naming import DEFAULT_METADATA_SUFFIX, file_format_for, strip_metadata_suffix, year_from_directory

logger = logging.getLogger(__name__)

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class _SidecarLoader(yaml.SafeLoader):
    """SafeLoader that leaves timestamps as text; dates are validated by the parser."""


_SidecarLoader.yaml_implicit_resolvers = {
    first_char: [(tag, pattern) for tag, pattern in resolvers if tag != _TIMESTAMP_TAG]
    for first_char, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


class _SidecarHandler(YAMLHandler):
    def load(self, fm: str, **kwargs: Any) -> Any:
        return yaml.load(fm, Loader=_SidecarLoader)


_HANDLER = _SidecarHandler()


@dataclass(frozen=True)
class Skip:
    """A sidecar that cannot be admitted into the index."""

    path: Path
    reason: str


ParseResult = Union[SermonRecord, Skip]


def decode_frontmatter(content: str) -> Tuple[Dict[str, Any], str]:
    """Split sidecar text into a loose metadata mapping and the body text.

    Raises:
        yaml.YAMLError: If a frontmatter block exists but is not valid YAML.
    """

    post = frontmatter.loads(content.lstrip("\ufeff"), handler=_HANDLER)
    metadata = dict(post.metadata or {})
    body = post.content if post.content is not None else ""
    return metadata, body


def normalize_deliveries(raw: Any) -> List[DeliverySession]:
    """Coerce any historical ``deliveries`` shape into a list of DeliverySession.

    Accepted shapes:
    - a JSON-encoded string (decoded first; undecodable text yields ``[]``),
    - a list of mappings carrying ``services`` as a list,
    - a list of mappings carrying a legacy singular ``service`` string.
    """

    if raw is None:
        return []
    if isinstance(raw, str):
        try:
            raw = json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.warning("Failed to decode deliveries JSON, treating as empty: %s", exc)
            return []
    if not isinstance(raw, list):
        return []

    sessions: List[DeliverySession] = []
    for entry in raw:
        if not isinstance(entry, Mapping):
            continue
        services = entry.get("services")
        if services is None and entry.get("service"):
            services = [entry["service"]]
        elif not isinstance(services, (list, tuple)):
            services = []
        sessions.append(
            DeliverySession(
                date=_as_text(entry.get("date")),
                location=_as_text(entry.get("location")),
                services=tuple(name for name in (_as_text(item) for item in services) if name),
            )
        )
    return sessions


def parse_primary_date(value: Any) -> Optional[date]:
    """Return a calendar date from a YAML-decoded or ISO text value, or None."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value.strip():
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            return None
    return None


def coerce_string_list(value: Any) -> List[str]:
    """Return a list of non-empty strings from a YAML list or a comma-separated scalar."""

    if isinstance(value, (list, tuple)):
        items = [_as_text(item) for item in value]
    elif isinstance(value, str):
        items = [part.strip() for part in value.split(",")]
    else:
        return []
    return [item for item in items if item]


def parse_sermon(
    content: str,
    metadata_path: Path | str,
    suffix: str = DEFAULT_METADATA_SUFFIX,
    today: Optional[date] = None,
) -> ParseResult:
    """Parse one sidecar file into a SermonRecord, or return a Skip explaining the rejection."""

    metadata_path = Path(metadata_path)
    try:
        raw, body = decode_frontmatter(content)
    except (yaml.YAMLError, ValueError, TypeError, RecursionError) as exc:
        return Skip(metadata_path, f"invalid frontmatter: {exc}")
    return record_from_metadata(raw, body, metadata_path, suffix=suffix, today=today)


def record_from_metadata(
    raw: Mapping[str, Any],
    body: str,
    metadata_path: Path,
    suffix: str = DEFAULT_METADATA_SUFFIX,
    today: Optional[date] = None,
) -> ParseResult:
    """Validate a decoded metadata mapping and build the typed record."""

    sermon_id = _as_text(raw.get("id"))
    if not sermon_id:
        return Skip(metadata_path, "missing id")

    title = _as_text(raw.get("title"))
    if not title:
        return Skip(metadata_path, "missing title")

    primary_date = parse_primary_date(raw.get("date"))
    if primary_date is None:
        primary_date = today or date.today()
        logger.warning("Missing or invalid date in %s, using %s", metadata_path, primary_date.isoformat())

    notes = body.strip() or _as_text(raw.get("notes"))
    series = _as_text(raw.get("series"))
    file_name = strip_metadata_suffix(metadata_path.name, suffix)

    return SermonRecord(
        id=sermon_id,
        title=title,
        primary_date=primary_date,
        metadata_file_path=metadata_path,
        source_file_path=metadata_path.with_name(file_name),
        file_name=file_name,
        file_format=file_format_for(file_name),
        year=year_from_directory(metadata_path),
        deliveries=normalize_deliveries(raw.get("deliveries")),
        tags=coerce_string_list(raw.get("tags")),
        series=series or None,
        references=coerce_string_list(raw.get("references")),
        notes=notes or None,
    )


def record_from_payload(payload: Mapping[str, Any]) -> SermonRecord:
    """Rebuild a record from its cached JSON form.

    Raises:
        ValueError: If the payload is not an object or lacks the metadata block or a required field.
        KeyError: If ``metadataPath`` is absent.
    """

    if not isinstance(payload, Mapping):
        raise ValueError("cached sermon must be a JSON object")
    metadata = payload.get("metadata")
    if not isinstance(metadata, Mapping):
        raise ValueError("cached sermon has no metadata block")

    metadata_path = Path(str(payload["metadataPath"]))
    outcome = record_from_metadata(metadata, "", metadata_path)
    if isinstance(outcome, Skip):
        raise ValueError(f"cached sermon {metadata_path} rejected: {outcome.reason}")

    if payload.get("fileType"):
        outcome.file_format = FileFormat.coerce(payload["fileType"])
    if payload.get("fileName"):
        outcome.file_name = str(payload["fileName"])
    if payload.get("filePath"):
        outcome.source_file_path = Path(str(payload["filePath"]))
    if payload.get("year") is not None:
        outcome.year = max(int(payload["year"]), 0)
    return outcome


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    return str(value).strip()


__all__ = [
    "ParseResult",
    "Skip",
    "coerce_string_list",
    "decode_frontmatter",
    "normalize_deliveries",
    "parse_primary_date",
    "parse_sermon",
    "record_from_metadata",
    "record_from_payload",
]
