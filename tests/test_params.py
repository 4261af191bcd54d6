"""Tests for query parameter parsing and label selection."""
from datetime import datetime

from api.params import parse_date_param, parse_date_range
from database.models import Department
from processor.labels import label_field, localized_label


def test_parses_datetimes_and_dates():
    assert parse_date_param("2025-03-01T10:30:00") == datetime(2025, 3, 1, 10, 30)
    assert parse_date_param("2025-03-01") == datetime(2025, 3, 1)


def test_utc_suffix_is_normalized_to_naive_utc():
    assert parse_date_param("2025-03-01T10:30:00Z") == datetime(2025, 3, 1, 10, 30)
    assert parse_date_param("2025-03-01T19:30:00+09:00") == datetime(2025, 3, 1, 10, 30)


def test_malformed_values_are_ignored():
    assert parse_date_param("yesterday") is None
    assert parse_date_param("2025-13-45") is None
    assert parse_date_param("") is None
    assert parse_date_param(None) is None


def test_date_only_upper_bound_covers_whole_day():
    end = parse_date_param("2025-03-31", end_of_day=True)
    assert end == datetime(2025, 3, 31, 23, 59, 59, 999000)

    explicit = parse_date_param("2025-03-31T12:00:00", end_of_day=True)
    assert explicit == datetime(2025, 3, 31, 12, 0)


def test_range_needs_both_bounds():
    assert parse_date_range("2025-03-01", None) is None
    assert parse_date_range(None, "2025-03-31") is None
    assert parse_date_range("bad", "2025-03-31") is None


def test_new_names_win_over_legacy_names():
    date_range = parse_date_range("2025-03-01", "2025-03-31", "2024-01-01", "2024-12-31")
    assert date_range.start == datetime(2025, 3, 1)
    assert date_range.end.date().isoformat() == "2025-03-31"


def test_legacy_names_fill_in_for_malformed_new_ones():
    date_range = parse_date_range("garbage", None, "2024-01-01", "2024-12-31")
    assert date_range.start == datetime(2024, 1, 1)
    assert date_range.end == datetime(2024, 12, 31, 23, 59, 59, 999000)


def test_label_field_by_language():
    assert label_field("en") == "name"
    assert label_field("th") == "thai_label"
    assert label_field("ko") == "label"
    assert label_field("fr") == "label"
    assert label_field(None) == "label"


def test_thai_label_falls_back_to_korean():
    department = Department(id=2, name="Quality", label="품질관리부", thai_label=None)

    assert localized_label(department, "th") == "품질관리부"
    assert localized_label(department, "en") == "Quality"
    assert localized_label(None, "en", default="부서 없음") == "부서 없음"
