from pathlib import Path

import pytest

from conftest import SIDECAR_A
from core.errors import IndexBuildError
from core.indexing.scanner import VaultScanner
from core.models.domain import FileFormat


def test_scan_example_vault_keeps_only_valid_records(fs, example_vault: Path) -> None:
    scanner = VaultScanner(fs)
    records = scanner.scan(example_vault)

    assert [record.id for record in records] == ["s1"]
    record = records[0]
    assert record.year == 2024
    assert record.file_format is FileFormat.KEYNOTE
    assert record.file_name == "Sermon-A.key"
    assert record.source_file_path == example_vault / "2024" / "Sermon-A.key"
    assert scanner.last_report.scanned == 2
    assert scanner.last_report.indexed == 1
    assert scanner.last_report.skipped == 1


def test_scan_ignores_non_sidecar_files(fs, write_sidecar) -> None:
    write_sidecar("2024", "Sermon-A.key.md", SIDECAR_A)
    write_sidecar("2024", "Sermon-A.key", "artifact bytes")
    root = write_sidecar("2024", "notes.txt", "loose text").parents[1]
    (root / "sermon-index.json").write_text("{}", encoding="utf-8")

    records = VaultScanner(fs).scan(root)
    assert [record.id for record in records] == ["s1"]


def test_unreadable_and_invalid_files_are_skipped(fs, write_sidecar) -> None:
    write_sidecar("2024", "Sermon-A.key.md", SIDECAR_A)
    write_sidecar("2024", "Broken.pdf.md", '---\nid: x\ntitle: "oops\n---\n')
    binary = write_sidecar("2023", "Binary.pdf.md", "")
    binary.write_bytes(b"\xff\xfe\xfa not utf-8")

    scanner = VaultScanner(fs)
    records = scanner.scan(binary.parents[1])

    assert [record.id for record in records] == ["s1"]
    assert scanner.last_report.failed == 1
    assert scanner.last_report.skipped == 1


def test_custom_metadata_suffix(fs, write_sidecar) -> None:
    write_sidecar("2024", "Sermon-A.key.meta", SIDECAR_A)
    root = write_sidecar("2024", "Sermon-B.key.md", SIDECAR_A.replace("s1", "s2")).parents[1]

    records = VaultScanner(fs, metadata_suffix=".meta").scan(root)
    assert [record.id for record in records] == ["s1"]
    assert records[0].file_name == "Sermon-A.key"


def test_missing_root_raises_index_build_error(fs, tmp_path: Path) -> None:
    with pytest.raises(IndexBuildError, match="Cannot build sermon index"):
        VaultScanner(fs).scan(tmp_path / "does-not-exist")


def test_empty_vault_yields_no_records(fs, tmp_path: Path) -> None:
    assert VaultScanner(fs).scan(tmp_path) == []


def test_deeply_nested_yaml_does_not_abort_scan(fs, write_sidecar) -> None:
    write_sidecar("2024", "Sermon-A.key.md", SIDECAR_A)
    depth = 5000
    nested = "---\nid: deep\ntitle: \"Deep\"\ntags: " + "[" * depth + "]" * depth + "\n---\n"
    root = write_sidecar("2024", "Deep.pdf.md", nested).parents[1]

    scanner = VaultScanner(fs)
    assert [record.id for record in scanner.scan(root)] == ["s1"]
    assert scanner.last_report.skipped == 1


def test_sidecar_with_byte_order_mark_is_indexed(fs, write_sidecar) -> None:
    root = write_sidecar("2024", "Sermon-A.key.md", "\ufeff" + SIDECAR_A).parents[1]

    records = VaultScanner(fs).scan(root)
    assert [record.id for record in records] == ["s1"]
    assert records[0].title == "Grace"


def test_symlinked_directories_are_not_followed(fs, write_sidecar) -> None:
    sidecar = write_sidecar("2024", "Sermon-A.key.md", SIDECAR_A)
    root = sidecar.parents[1]
    (sidecar.parent / "loop").symlink_to(root, target_is_directory=True)

    assert [record.id for record in VaultScanner(fs).scan(root)] == ["s1"]
