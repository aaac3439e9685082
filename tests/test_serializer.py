from datetime import date
from pathlib import Path

from core.models.domain import DeliverySession, FileFormat, SermonRecord
from core.records.parser import parse_sermon
from core.records.serializer import format_id, serialize_sermon

METADATA_PATH = Path("/vault/2024/Grace.key.md")


def _record(**overrides) -> SermonRecord:
    values = dict(
        id="s1",
        title='Grace: "Amazing" #1',
        primary_date=date(2024, 1, 5),
        metadata_file_path=METADATA_PATH,
        source_file_path=METADATA_PATH.with_name("Grace.key"),
        file_name="Grace.key",
        file_format=FileFormat.KEYNOTE,
        year=2024,
        deliveries=[
            DeliverySession("2024-01-05", "GBI Haleluya", ("Raya 1", "Raya 2")),
            DeliverySession("2024-02-11", "GBI Kristus: Hall B", ()),
        ],
        tags=["grace", "faith, hope"],
        series="Advent [2024]",
        references=["John 3:16", "Ephesians 2:8-9"],
        notes="First line.\n\nSecond line with --- dashes.",
    )
    values.update(overrides)
    return SermonRecord(**values)


def test_round_trip_preserves_every_field() -> None:
    record = _record()
    parsed = parse_sermon(serialize_sermon(record), METADATA_PATH)
    assert parsed == record


def test_round_trip_with_only_required_fields() -> None:
    record = _record(deliveries=[], tags=[], series=None, references=[], notes=None)
    text = serialize_sermon(record)
    assert "deliveries" not in text
    assert "tags" not in text
    assert parse_sermon(text, METADATA_PATH) == record


def test_output_is_deterministic_and_ordered() -> None:
    record = _record()
    first = serialize_sermon(record)
    assert first == serialize_sermon(record)
    keys = [line.split(":", 1)[0] for line in first.splitlines()[1:7]]
    assert keys == ["id", "title", "date", "deliveries", "series", "tags"]


def test_ids_that_yaml_could_reinterpret_are_quoted() -> None:
    assert format_id("s1") == "s1"
    assert format_id("sermon-1700000000000-abc123xyz") == "sermon-1700000000000-abc123xyz"
    assert format_id("2024-01-05-grace") == '"2024-01-05-grace"'
    assert format_id("yes") == '"yes"'
    assert format_id("a: b") == '"a: b"'

    for sermon_id in ("2024-01-05-grace", "yes", "123", "a: b"):
        parsed = parse_sermon(serialize_sermon(_record(id=sermon_id)), METADATA_PATH)
        assert parsed.id == sermon_id


def test_whitespace_around_values_is_trimmed_on_construction() -> None:
    record = _record(
        title="  Grace  ",
        notes="    indented verse\n",
        tags=[" grace", "faith ", "   "],
        references=[" John 1:1 "],
        series="  ",
        deliveries=[DeliverySession(" 2024-01-05 ", " GBI Haleluya ", (" Raya 1 ", ""))],
    )

    assert record.title == "Grace"
    assert record.notes == "indented verse"
    assert record.tags == ["grace", "faith"]
    assert record.references == ["John 1:1"]
    assert record.series is None
    assert record.deliveries == [DeliverySession("2024-01-05", "GBI Haleluya", ("Raya 1",))]

    parsed = parse_sermon(serialize_sermon(record), METADATA_PATH)
    assert parsed == record
    assert serialize_sermon(parsed) == serialize_sermon(record)
