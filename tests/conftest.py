from __future__ import annotations

import sys
from datetime import date
from pathlib import Path
from typing import Callable

import pytest

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from core.models.domain import DeliverySession, FileFormat, SermonRecord
from core.storage import LocalFileSystem


SIDECAR_A = """---
id: s1
title: "Grace"
date: 2024-01-05
tags: [grace, faith]
---
"""

SIDECAR_B_NO_ID = """---
title: "Missing identifier"
date: 2025-03-01
---
"""


@pytest.fixture
def fs() -> LocalFileSystem:
    return LocalFileSystem()


@pytest.fixture
def write_sidecar(tmp_path: Path) -> Callable[[str, str, str], Path]:
    """Write ``<tmp>/vault/<year>/<name>`` and return its path."""

    def _write(year: str, name: str, content: str) -> Path:
        path = tmp_path / "vault" / year / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def example_vault(write_sidecar) -> Path:
    write_sidecar("2024", "Sermon-A.key.md", SIDECAR_A)
    write_sidecar("2025", "Sermon-B.pdf.md", SIDECAR_B_NO_ID)
    return write_sidecar("2024", "Sermon-A.key", "binary keynote placeholder").parents[1]


def make_record(sermon_id: str, year: int = 2024, **overrides) -> SermonRecord:
    """Build an in-memory record filed under ``/vault/<year>/``."""

    file_name = overrides.pop("file_name", f"{sermon_id}.key")
    metadata_path = Path("/vault") / str(year) / f"{file_name}.md"
    values = dict(
        id=sermon_id,
        title=f"Sermon {sermon_id}",
        primary_date=overrides.pop("primary_date", None) or date(max(year, 1), 1, 1),
        metadata_file_path=metadata_path,
        source_file_path=metadata_path.with_name(file_name),
        file_name=file_name,
        file_format=FileFormat.KEYNOTE,
        year=year,
    )
    values.update(overrides)
    return SermonRecord(**values)


def delivery(location: str = "", *services: str, when: str = "2024-01-01") -> DeliverySession:
    return DeliverySession(date=when, location=location, services=tuple(services))
