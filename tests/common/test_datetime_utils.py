from datetime import datetime, timezone

from src.school_attendance.school_attendance.common.datetime_utils import parse_timestamp_ms


def test_epoch_seconds_are_scaled_to_millis():
    assert parse_timestamp_ms("1700000000") == 1_700_000_000_000


def test_epoch_millis_are_kept():
    assert parse_timestamp_ms("1700000000123") == 1_700_000_000_123
    assert parse_timestamp_ms(1_700_000_000_123) == 1_700_000_000_123


def test_fractional_seconds():
    assert parse_timestamp_ms(" 1700000000.5 ") == 1_700_000_000_500


def test_iso_datetime_with_zulu():
    expected = int(datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc).timestamp() * 1000)
    assert parse_timestamp_ms("2024-03-01T08:30:00Z") == expected


def test_naive_datetime_is_utc():
    expected = int(datetime(2024, 3, 1, 8, 30, tzinfo=timezone.utc).timestamp() * 1000)
    assert parse_timestamp_ms("2024-03-01 08:30:00") == expected
    assert parse_timestamp_ms("03/01/2024 08:30") == expected


def test_unparseable_or_missing_is_zero():
    assert parse_timestamp_ms(None) == 0
    assert parse_timestamp_ms("") == 0
    assert parse_timestamp_ms("yesterday-ish") == 0
    assert parse_timestamp_ms("nan") == 0
    assert parse_timestamp_ms(True) == 0
