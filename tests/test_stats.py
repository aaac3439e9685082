from conftest import delivery, make_record
from core.indexing.stats import aggregate, extract_filter_options
from core.models.domain import FileFormat, Stats


def _records():
    return [
        make_record(
            "a",
            2024,
            deliveries=[delivery("GBI Haleluya", "Raya 1", "Raya 2"), delivery("GBI Kristus", "Raya 1")],
            tags=["grace"],
            series="Advent",
        ),
        make_record("b", 2024, file_format=FileFormat.PDF, deliveries=[delivery("", "Youth Service")], tags=["faith"]),
        make_record("c", 2023, deliveries=[delivery("GBI Haleluya")], tags=["grace", "hope"], series="Lent"),
        make_record("d", 0, file_format=FileFormat.UNKNOWN),
    ]


def test_aggregate_counts_records_and_deliveries() -> None:
    records = _records()
    stats = aggregate(records)

    assert stats.by_year == {2024: 2, 2023: 1, 0: 1}
    assert stats.by_file_format == {"keynote": 2, "pdf": 1, "unknown": 1}
    assert stats.by_location == {"GBI Haleluya": 2, "GBI Kristus": 1}
    assert stats.by_service == {"Raya 1": 2, "Raya 2": 1, "Youth Service": 1}
    assert sum(stats.by_year.values()) == len(records)
    assert sum(stats.by_file_format.values()) == len(records)


def test_aggregate_of_nothing_is_empty() -> None:
    assert aggregate([]) == Stats()


def test_stats_json_round_trip_uses_string_year_keys() -> None:
    stats = aggregate(_records())
    payload = stats.to_dict()
    assert payload["byYear"] == {"2024": 2, "2023": 1, "0": 1}
    assert Stats.from_dict(payload) == stats


def test_extract_filter_options_sorted_and_distinct() -> None:
    options = extract_filter_options(_records())

    assert options.locations == ["GBI Haleluya", "GBI Kristus"]
    assert options.services == ["Raya 1", "Raya 2", "Youth Service"]
    assert options.series == ["Advent", "Lent"]
    assert options.tags == ["faith", "grace", "hope"]
    assert options.years == [0, 2023, 2024]
