"""Timestamp Normalization — ISO-8601 UTC with milliseconds and trailing Z."""

from datetime import datetime, timedelta, timezone

from shopping_mall.core.timestamps import as_utc, to_iso


def test_aware_utc_renders_with_z_and_milliseconds():
    value = datetime(2024, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
    assert to_iso(value) == "2024-01-01T00:00:00.000Z"


def test_microseconds_truncate_to_milliseconds():
    value = datetime(2024, 5, 6, 7, 8, 9, 123456, tzinfo=timezone.utc)
    assert to_iso(value) == "2024-05-06T07:08:09.123Z"


def test_naive_is_treated_as_utc():
    assert to_iso(datetime(2024, 1, 1, 12, 30)) == "2024-01-01T12:30:00.000Z"


def test_offset_is_converted_to_utc():
    kst = timezone(timedelta(hours=9))
    value = datetime(2024, 1, 1, 9, 0, tzinfo=kst)
    assert to_iso(value) == "2024-01-01T00:00:00.000Z"
    assert as_utc(value).tzinfo == timezone.utc
