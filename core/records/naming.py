# Path: core/records/naming.py
# Purpose: Map sermon filenames to formats, years, titles, and identifiers.
# Layer: core/records.
# Details: Sidecar files are named "<original-filename><suffix>"; stripping the suffix recovers the artifact.

from __future__ import annotations

import random
import re
import string
import time
from pathlib import Path, PurePath

from core.models.domain import FileFormat

DEFAULT_METADATA_SUFFIX = ".md"

EXTENSION_FORMATS = {
    "key": FileFormat.KEYNOTE,
    "keynote": FileFormat.KEYNOTE,
    "pages": FileFormat.PAGES,
    "pdf": FileFormat.PDF,
    "doc": FileFormat.WORD,
    "docx": FileFormat.WORD,
    "ppt": FileFormat.POWERPOINT,
    "pptx": FileFormat.POWERPOINT,
    "txt": FileFormat.NOTES,
    "rtf": FileFormat.NOTES,
    "md": FileFormat.MARKDOWN,
    "markdown": FileFormat.MARKDOWN,
}

_ID_ALPHABET = string.ascii_lowercase + string.digits


def file_format_for(file_name: str) -> FileFormat:
    """Return the format of an artifact filename based on its last extension."""

    if "." not in file_name:
        return FileFormat.UNKNOWN
    extension = file_name.rsplit(".", 1)[-1].lower()
    return EXTENSION_FORMATS.get(extension, FileFormat.UNKNOWN)


def is_supported_file(file_name: str) -> bool:
    return file_format_for(file_name) is not FileFormat.UNKNOWN


def metadata_file_name(file_name: str, suffix: str = DEFAULT_METADATA_SUFFIX) -> str:
    """Return the sidecar name for an artifact, e.g. ``Sermon.key`` -> ``Sermon.key.md``."""

    return f"{file_name}{suffix}"


def strip_metadata_suffix(metadata_name: str, suffix: str = DEFAULT_METADATA_SUFFIX) -> str:
    """Recover the artifact filename from a sidecar filename."""

    if suffix and metadata_name.endswith(suffix):
        return metadata_name[: -len(suffix)]
    return metadata_name


def year_from_directory(metadata_path: PurePath) -> int:
    """Return the year bucket encoded by the sidecar's parent directory name, or 0."""

    match = re.match(r"^\s*[+-]?\d+", metadata_path.parent.name)
    if match is None:
        return 0
    return max(int(match.group(0)), 0)


def title_from_path(file_path: PurePath | str) -> str:
    """Derive a display title from a filename: ``grace-and_truth.key`` -> ``Grace And Truth``."""

    name = PurePath(file_path).name or "Untitled"
    stem = re.sub(r"\.[^/.]+$", "", name)
    spaced = re.sub(r"[-_]", " ", stem)
    return re.sub(r"\b\w", lambda match: match.group(0).upper(), spaced)


def generate_sermon_id() -> str:
    """Return a fresh identifier of the form ``sermon-<epoch ms>-<9 chars>``."""

    token = "".join(random.choice(_ID_ALPHABET) for _ in range(9))
    return f"sermon-{int(time.time() * 1000)}-{token}"


def slugify_id(title: str, date_text: str) -> str:
    """Return a readable identifier built from an ISO date and the title."""

    slug = re.sub(r"[^a-z0-9]+", "-", title.lower()).strip("-")
    return f"{date_text}-{slug}" if slug else date_text


def artifact_path_for(metadata_path: Path, suffix: str = DEFAULT_METADATA_SUFFIX) -> Path:
    """Return the artifact path that sits next to a sidecar file."""

    return metadata_path.with_name(strip_metadata_suffix(metadata_path.name, suffix))
