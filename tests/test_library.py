from datetime import date
from pathlib import Path

import pytest

from core.errors import SermonImportError
from core.indexing import VaultScanner
from core.models.domain import DeliverySession, FileFormat
from core.vault import SermonLibrary


def _source(tmp_path: Path, name: str = "Kasih Karunia.key") -> Path:
    source = tmp_path / "incoming" / name
    source.parent.mkdir(parents=True, exist_ok=True)
    source.write_bytes(b"keynote bytes")
    return source


def test_template_has_fresh_id_and_defaults(fs) -> None:
    library = SermonLibrary(fs)
    first = library.create_metadata_template("Kasih", date(2024, 3, 1))
    second = library.create_metadata_template("Kasih")

    assert first.id.startswith("sermon-")
    assert first.id != second.id
    assert first.primary_date == date(2024, 3, 1)
    assert second.primary_date == date.today()
    assert first.deliveries == [] and first.tags == []


def test_import_copies_artifact_and_writes_sidecar(fs, tmp_path: Path) -> None:
    vault = tmp_path / "vault"
    library = SermonLibrary(fs)
    record = library.create_metadata_template("Kasih Karunia", date(2023, 12, 24))
    record.tags = ["Kasih"]
    record.deliveries = [DeliverySession("2023-12-24", "GBI Haleluya", ("Raya 1",))]

    imported = library.import_sermon(vault, _source(tmp_path), record)

    assert imported.source_file_path == vault / "2023" / "Kasih Karunia.key"
    assert imported.metadata_file_path == vault / "2023" / "Kasih Karunia.key.md"
    assert imported.file_format is FileFormat.KEYNOTE
    assert imported.year == 2023
    assert imported.source_file_path.read_bytes() == b"keynote bytes"
    assert record.file_name == ""

    assert library.load_sermon(imported.metadata_file_path) == imported
    assert VaultScanner(fs).scan(vault) == [imported]


def test_update_metadata_rewrites_sidecar(fs, tmp_path: Path) -> None:
    library = SermonLibrary(fs)
    imported = library.import_sermon(
        tmp_path / "vault",
        _source(tmp_path, "Iman.pdf"),
        library.create_metadata_template("Iman", date(2024, 5, 5)),
    )

    imported.series = "Faith Series"
    imported.notes = "Updated notes."
    library.update_metadata(imported)

    reloaded = library.load_sermon(imported.metadata_file_path)
    assert reloaded.series == "Faith Series"
    assert reloaded.notes == "Updated notes."


def test_import_of_missing_source_raises(fs, tmp_path: Path) -> None:
    library = SermonLibrary(fs)
    record = library.create_metadata_template("Ghost", date(2024, 1, 1))
    with pytest.raises(SermonImportError):
        library.import_sermon(tmp_path / "vault", tmp_path / "nowhere.pdf", record)


def test_load_sermon_returns_none_for_bad_input(fs, tmp_path: Path) -> None:
    library = SermonLibrary(fs)
    invalid = tmp_path / "2024" / "Bad.pdf.md"
    invalid.parent.mkdir()
    invalid.write_text('---\ntitle: "No id"\n---\n', encoding="utf-8")

    assert library.load_sermon(invalid) is None
    assert library.load_sermon(tmp_path / "2024" / "absent.md") is None
