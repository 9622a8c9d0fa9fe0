"""Journal entry commands."""

from decimal import Decimal

import click
from ledgerbook.cli.business_resolution import (
    require_business_or_exit,
    resolve_business_or_exit,
)
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.period_options import describe_range, period_options, resolve_cli_date_range
from ledgerbook.domain.business import BusinessService
from ledgerbook.domain.journal import JournalService
from ledgerbook.utils.amount_parser import parse_amount, to_amount
from ledgerbook.utils.date_parser import parse_date
from ledgerbook.utils.serialization import report_to_json


def parse_line_spec(spec: str) -> tuple[str, Decimal]:
    """Parse an ACCOUNT=AMOUNT line option.

    Raises:
        ValueError: If the option value is malformed
    """
    code, sep, amount = spec.partition("=")
    if not sep or not code.strip():
        raise ValueError(f"Expected ACCOUNT=AMOUNT, got '{spec}'")
    return code.strip(), parse_amount(amount)


@click.group()
def entry_group():
    """Record and list journal entries."""
    pass


@entry_group.command("add")
@click.option("--business", required=True, help="Business name or ID")
@click.option(
    "--date",
    "entry_date",
    required=True,
    help="Entry date (YYYY-MM-DD or 'today', 'yesterday')",
)
@click.option("--description", default="", help="Entry description")
@click.option("--debit", "debits", multiple=True, help="Debit line as ACCOUNT=AMOUNT (repeatable)")
@click.option("--credit", "credits", multiple=True, help="Credit line as ACCOUNT=AMOUNT (repeatable)")
@click.option("--transaction-id", help="Reference to the source document, e.g. transaction:<id>")
@click.pass_context
def add_entry(
    ctx,
    business: str,
    entry_date: str,
    description: str,
    debits: tuple[str, ...],
    credits: tuple[str, ...],
    transaction_id: str | None,
):
    """Record a journal entry.

    Examples:
        ledgerbook entry add --business 1 --date 2024-03-15 --debit 1010=500 --credit 4100=500
        ledgerbook entry add --business "Corner Bakery" --date today \\
            --debit 6100=200 --credit 1010=200 --description "March rent"
    """
    db = ctx.obj["db"]
    business_id = require_business_or_exit(ctx, BusinessService(db), business)

    try:
        parsed_date = parse_date(entry_date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    lines = []
    try:
        for spec in debits:
            code, amount = parse_line_spec(spec)
            lines.append((code, amount, Decimal("0")))
        for spec in credits:
            code, amount = parse_line_spec(spec)
            lines.append((code, Decimal("0"), amount))
    except ValueError as e:
        click.echo(f"Error: Invalid line: {e}", err=True)
        ctx.exit(1)

    try:
        entry_id = JournalService(db).record_entry(
            date=parsed_date,
            business_id=business_id,
            description=description,
            lines=lines,
            transaction_id=transaction_id,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    total_debit = sum((line[1] for line in lines), Decimal("0"))
    total_credit = sum((line[2] for line in lines), Decimal("0"))
    click.echo(f"Created entry {entry_id}")
    click.echo(f"  Date: {parsed_date}")
    click.echo(f"  Debits: {total_debit:,.2f}  Credits: {total_credit:,.2f}")
    if total_debit != total_credit:
        click.echo("Warning: entry is not balanced (debits != credits)", err=True)


@entry_group.command("list")
@click.option("--business", default="all", help="Business name or ID (default: all)")
@period_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_entries(
    ctx,
    business: str,
    period: str | None,
    start_date: str | None,
    end_date: str | None,
    as_json: bool,
):
    """List journal entries with their lines and balance status."""
    db = ctx.obj["db"]
    business_id = resolve_business_or_exit(ctx, BusinessService(db), business)
    date_range = resolve_cli_date_range(
        ctx, period=period, start_date=start_date, end_date=end_date
    )

    try:
        listings = JournalService(db).list_entries(
            business_id=business_id,
            start_date=date_range.start_date,
            end_date=date_range.end_date,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    if as_json:
        click.echo(report_to_json(listings))
        return

    if not listings:
        click.echo("No entries found.")
        return

    click.echo(f"\nJournal Entries ({describe_range(date_range)}):")
    for listing in listings:
        entry = listing.entry
        status = "Balanced" if listing.balanced else "UNBALANCED"
        click.echo("-" * 80)
        click.echo(f"#{entry.id:<6} {entry.date}  {entry.description[:50]:<50} {status}")
        for line in listing.lines:
            debit = to_amount(line.debit)
            credit = to_amount(line.credit)
            debit_str = f"{debit:,.2f}" if debit else "-"
            credit_str = f"{credit:,.2f}" if credit else "-"
            click.echo(f"    {line.account_code:<10} {debit_str:>20} {credit_str:>20}")
        click.echo(
            f"    {'Totals':<10} {listing.total_debit:>20,.2f} {listing.total_credit:>20,.2f}"
        )


def register_commands(cli):
    """Register journal entry commands with main CLI."""
    cli.add_command(entry_group, name="entry")
