"""Tests for timestamp normalization."""

from datetime import date, datetime, timedelta, timezone

import pytest

from jobboardly.utils.timestamps import normalize_timestamp, utcnow


def test_naive_datetime_is_treated_as_utc():
    result = normalize_timestamp(datetime(2024, 5, 1, 10, 0))
    assert result == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)


def test_aware_datetime_is_converted_to_utc():
    ist = timezone(timedelta(hours=5, minutes=30))
    result = normalize_timestamp(datetime(2024, 5, 1, 15, 30, tzinfo=ist))
    assert result == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)
    assert result.tzinfo == timezone.utc


def test_iso_string_with_z_suffix():
    assert normalize_timestamp("2024-05-01T10:00:00Z") == datetime(2024, 5, 1, 10, 0, tzinfo=timezone.utc)


def test_epoch_seconds():
    assert normalize_timestamp(0) == datetime(1970, 1, 1, tzinfo=timezone.utc)


def test_date_becomes_midnight_utc():
    assert normalize_timestamp(date(2024, 5, 1)) == datetime(2024, 5, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("value", [None, ""])
def test_empty_values_are_none(value):
    assert normalize_timestamp(value) is None


@pytest.mark.parametrize("value", ["not a date", [2024, 5, 1], True])
def test_unsupported_values_raise(value):
    with pytest.raises(ValueError):
        normalize_timestamp(value)


def test_utcnow_is_aware():
    assert utcnow().tzinfo is not None
