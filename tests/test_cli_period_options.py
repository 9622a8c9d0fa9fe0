"""Tests for CLI period option helper."""

from datetime import date

import click
import pytest

from ledgerbook.cli.period_options import describe_range, resolve_cli_date_range
from ledgerbook.domain.entities import DateRange
from ledgerbook.utils.date_parser import resolve_period


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def test_resolve_cli_date_range_rejects_period_with_start_end(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(
            _ctx(),
            period="current-month",
            start_date="2024-01-01",
            end_date=None,
        )

    assert excinfo.value.exit_code == 1
    err = capsys.readouterr().err
    assert "cannot be combined" in err


def test_resolve_cli_date_range_returns_period_range():
    today = date(2024, 5, 15)

    result = resolve_cli_date_range(
        _ctx(), period="current-quarter", start_date=None, end_date=None, today=today
    )

    assert result == resolve_period("current-quarter", today=today)


def test_resolve_cli_date_range_defaults_to_current_month():
    today = date(2024, 2, 10)

    result = resolve_cli_date_range(
        _ctx(), period=None, start_date=None, end_date=None, today=today
    )

    assert result == DateRange(date(2024, 2, 1), date(2024, 2, 29))


def test_resolve_cli_date_range_unknown_period_falls_back():
    today = date(2024, 2, 10)

    result = resolve_cli_date_range(
        _ctx(), period="fortnight", start_date=None, end_date=None, today=today
    )

    assert result == DateRange(date(2024, 2, 1), date(2024, 2, 29))


def test_resolve_cli_date_range_all_is_unbounded():
    result = resolve_cli_date_range(_ctx(), period="all", start_date=None, end_date=None)

    assert result.is_unbounded


def test_resolve_cli_date_range_explicit_dates():
    result = resolve_cli_date_range(
        _ctx(), period=None, start_date="2024-01-01", end_date="2024-01-31"
    )

    assert result == DateRange(date(2024, 1, 1), date(2024, 1, 31))


def test_resolve_cli_date_range_open_start():
    result = resolve_cli_date_range(_ctx(), period=None, start_date=None, end_date="2024-01-31")

    assert result == DateRange(None, date(2024, 1, 31))


def test_resolve_cli_date_range_invalid_start_date(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        resolve_cli_date_range(_ctx(), period=None, start_date="not-a-date", end_date=None)

    assert excinfo.value.exit_code == 1
    assert "Invalid start date" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_reversed_range(capsys):
    with pytest.raises(click.exceptions.Exit):
        resolve_cli_date_range(
            _ctx(), period=None, start_date="2024-02-01", end_date="2024-01-01"
        )

    assert "must not be after" in capsys.readouterr().err


def test_describe_range():
    assert describe_range(DateRange()) == "All time"
    assert describe_range(DateRange(date(2024, 1, 1), date(2024, 1, 31))) == (
        "2024-01-01 to 2024-01-31"
    )
    assert describe_range(DateRange(None, date(2024, 1, 31))) == "beginning to 2024-01-31"
