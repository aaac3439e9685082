# Path: core/records/serializer.py
# Purpose: Render sermon records back into sidecar text.
# Layer: core/records.
# Details: Output is deterministic: fixed field order, JSON-escaped scalars, optional fields omitted when empty.

from __future__ import annotations

import json
import re
from typing import Any, Iterable, List

from core.models.domain import SermonRecord

FRONTMATTER_DELIMITER = "---"

_PLAIN_ID = re.compile(r"^[A-Za-z][A-Za-z0-9._-]*$")
_YAML_KEYWORDS = {"true", "false", "yes", "no", "on", "off", "null"}


def quote(value: str) -> str:
    """Return a YAML double-quoted scalar; JSON escapes are a subset of YAML's."""

    return json.dumps(value, ensure_ascii=False)


def format_id(sermon_id: str) -> str:
    """Write plain identifiers bare and quote anything YAML could reinterpret."""

    if _PLAIN_ID.match(sermon_id) and sermon_id.lower() not in _YAML_KEYWORDS:
        return sermon_id
    return quote(sermon_id)


def format_list(items: Iterable[str]) -> str:
    return "[" + ", ".join(quote(item) for item in items) + "]"


def _json_flow(value: Any) -> str:
    return json.dumps(value, ensure_ascii=False)


def serialize_sermon(record: SermonRecord) -> str:
    """Return the sidecar text for a record; parsing it back yields an equal record."""

    lines: List[str] = [
        FRONTMATTER_DELIMITER,
        f"id: {format_id(record.id)}",
        f"title: {quote(record.title)}",
        f"date: {record.primary_date.isoformat()}",
    ]

    if record.deliveries:
        lines.append(f"deliveries: {_json_flow([delivery.to_dict() for delivery in record.deliveries])}")
    if record.series:
        lines.append(f"series: {quote(record.series)}")
    if record.tags:
        lines.append(f"tags: {format_list(record.tags)}")
    if record.references:
        lines.append(f"references: {format_list(record.references)}")

    lines.append(FRONTMATTER_DELIMITER)
    lines.append("")
    lines.append(record.notes or "")
    return "\n".join(lines)


__all__ = ["FRONTMATTER_DELIMITER", "format_id", "format_list", "quote", "serialize_sermon"]
