"""CLI helpers for reporting period resolution."""

from datetime import date

import click

from ledgerbook.domain.entities import DateRange
from ledgerbook.utils.date_parser import DEFAULT_PERIOD, PERIOD_TOKENS, parse_date, resolve_period


def period_options(command):
    """Attach --period, --start-date and --end-date options to a command."""
    command = click.option(
        "--end-date", help="End date (YYYY-MM-DD or 'today'); overrides --period"
    )(command)
    command = click.option(
        "--start-date", help="Start date (YYYY-MM-DD or 'today'); overrides --period"
    )(command)
    command = click.option(
        "--period",
        help=f"Reporting period: {', '.join(PERIOD_TOKENS)} (default: {DEFAULT_PERIOD})",
    )(command)
    return command


def resolve_cli_date_range(
    ctx,
    *,
    period: str | None,
    start_date: str | None,
    end_date: str | None,
    today: date | None = None,
) -> DateRange:
    """Resolve CLI date range from a period token or explicit dates.

    Unknown period tokens fall back to the current month, matching the
    period resolver.
    """
    if period and (start_date or end_date):
        click.echo(
            "Error: --period cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if not start_date and not end_date:
        return resolve_period(period or DEFAULT_PERIOD, today=today)

    start = None
    end = None
    if start_date:
        try:
            start = parse_date(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_date(end_date)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    if start is not None and end is not None and start > end:
        click.echo("Error: --start-date must not be after --end-date.", err=True)
        ctx.exit(1)

    return DateRange(start, end)


def describe_range(date_range: DateRange) -> str:
    """Human-readable label for a date range."""
    if date_range.is_unbounded:
        return "All time"
    start = date_range.start_date.isoformat() if date_range.start_date else "beginning"
    end = date_range.end_date.isoformat() if date_range.end_date else "today"
    return f"{start} to {end}"
