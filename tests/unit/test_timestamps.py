"""Tests for persisted timestamp helpers."""

from datetime import datetime, timedelta, timezone

import pytest

from quota_warning.utils.timestamps import add_days, format_atom, parse_atom, utcnow


def test_format_atom_is_utc_without_microseconds():
    moment = datetime(2026, 1, 15, 12, 30, 45, 123456, tzinfo=timezone(timedelta(hours=2)))

    assert format_atom(moment) == "2026-01-15T10:30:45+00:00"


def test_format_atom_rejects_naive():
    with pytest.raises(ValueError):
        format_atom(datetime(2026, 1, 15))


@pytest.mark.parametrize(
    "value",
    ["2026-01-15T10:30:00+00:00", "2026-01-15T10:30:00Z", "2026-01-15T12:30:00+02:00", "2026-01-15T10:30:00"],
)
def test_parse_atom_variants(value):
    assert parse_atom(value) == datetime(2026, 1, 15, 10, 30, tzinfo=timezone.utc)


def test_parse_atom_invalid():
    with pytest.raises(ValueError):
        parse_atom("yesterday")


def test_add_days_crosses_month_end():
    moment = datetime(2026, 1, 28, 8, 0, tzinfo=timezone.utc)

    assert add_days(moment, 7) == datetime(2026, 2, 4, 8, 0, tzinfo=timezone.utc)


def test_utcnow_is_aware():
    assert utcnow().tzinfo is not None
