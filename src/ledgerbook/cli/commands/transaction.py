"""Categorized transaction commands."""

import click
from ledgerbook.cli.business_resolution import (
    require_business_or_exit,
    resolve_business_or_exit,
)
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.period_options import describe_range, period_options, resolve_cli_date_range
from ledgerbook.domain.business import BusinessService
from ledgerbook.domain.entities import TransactionType
from ledgerbook.domain.transaction import TransactionService
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.date_parser import parse_date
from ledgerbook.utils.serialization import report_to_json

TRANSACTION_TYPE_CHOICES = [t.value for t in TransactionType]


@click.group()
def transaction_group():
    """Record and list categorized transactions."""
    pass


@transaction_group.command("category-create")
@click.argument("name")
@click.option(
    "--type",
    "transaction_type",
    required=True,
    type=click.Choice(TRANSACTION_TYPE_CHOICES, case_sensitive=False),
    help="Whether the category holds income or expenses",
)
@click.pass_context
def create_category(ctx, name: str, transaction_type: str):
    """Create a transaction category."""
    try:
        category_id = TransactionService(ctx.obj["db"]).create_category(name, transaction_type)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created category '{name.strip()}' (ID: {category_id})")


@transaction_group.command("categories")
@click.option(
    "--type",
    "transaction_type",
    type=click.Choice(TRANSACTION_TYPE_CHOICES, case_sensitive=False),
    help="Only show income or expense categories",
)
@click.pass_context
def list_categories(ctx, transaction_type: str | None):
    """List transaction categories."""
    categories = TransactionService(ctx.obj["db"]).list_categories(transaction_type)

    if not categories:
        click.echo("No categories found.")
        return

    for category in categories:
        click.echo(f"{category.id:<6} {category.name:<30} {category.transaction_type.value}")


@transaction_group.command("add")
@click.option("--business", required=True, help="Business name or ID")
@click.option("--date", "transaction_date", required=True, help="Transaction date (YYYY-MM-DD or 'today')")
@click.option("--amount", required=True, help="Transaction amount")
@click.option("--description", default="", help="Transaction description")
@click.option("--category", help="Category name or ID")
@click.pass_context
def add_transaction(
    ctx,
    business: str,
    transaction_date: str,
    amount: str,
    description: str,
    category: str | None,
):
    """Record a categorized transaction.

    Examples:
        ledgerbook transaction add --business 1 --date 2024-03-15 \\
            --amount 45.90 --category Supplies --description "Flour"
    """
    db = ctx.obj["db"]
    business_id = require_business_or_exit(ctx, BusinessService(db), business)

    try:
        parsed_date = parse_date(transaction_date)
        parsed_amount = parse_amount(amount)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        transaction_id = TransactionService(db).record_transaction(
            business_id=business_id,
            date=parsed_date,
            amount=parsed_amount,
            description=description,
            category=category,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created transaction {transaction_id}")
    click.echo(f"  Date: {parsed_date}  Amount: {parsed_amount:,.2f}")


@transaction_group.command("list")
@click.option("--business", default="all", help="Business name or ID (default: all)")
@click.option("--category", help="Only show transactions in this category (name or ID)")
@period_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_transactions(
    ctx,
    business: str,
    category: str | None,
    period: str | None,
    start_date: str | None,
    end_date: str | None,
    as_json: bool,
):
    """List transactions with their categories, newest first."""
    db = ctx.obj["db"]
    business_id = resolve_business_or_exit(ctx, BusinessService(db), business)
    date_range = resolve_cli_date_range(
        ctx, period=period, start_date=start_date, end_date=end_date
    )

    try:
        transactions = TransactionService(db).list_transactions(
            business_id=business_id,
            start_date=date_range.start_date,
            end_date=date_range.end_date,
            category=category,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    if as_json:
        click.echo(report_to_json(transactions))
        return

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nTransactions ({describe_range(date_range)}):")
    click.echo("-" * 90)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Category':<20} {'Type':<8} {'Description':<30} {'Amount':>10}"
    )
    click.echo("-" * 90)
    for txn in transactions:
        category_name = txn.category.name if txn.category else "Uncategorized"
        type_name = txn.transaction_type.value if txn.transaction_type else "-"
        click.echo(
            f"{txn.id:<6} {str(txn.date):<12} {category_name[:20]:<20} {type_name:<8} "
            f"{txn.description[:30]:<30} {txn.amount:>10,.2f}"
        )


def register_commands(cli):
    """Register transaction commands with main CLI."""
    cli.add_command(transaction_group, name="transaction")
