"""Financial report commands."""

from decimal import Decimal

import click
from ledgerbook.cli.business_resolution import resolve_business_or_exit
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.period_options import describe_range, period_options, resolve_cli_date_range
from ledgerbook.domain.business import BusinessService
from ledgerbook.domain.entities import CategoryGroup
from ledgerbook.domain.ledger import GeneralLedgerService
from ledgerbook.domain.statements import StatementService
from ledgerbook.utils.serialization import report_to_json


def _money(amount: Decimal) -> str:
    return f"{amount:,.2f}"


def _side(balance: Decimal) -> str:
    """Render a raw balance as an amount with (D)ebit or (C)redit side."""
    return f"{_money(abs(balance))} {'(C)' if balance < 0 else '(D)'}"


def _echo_groups(title: str, groups: tuple[CategoryGroup, ...], empty_message: str) -> None:
    click.echo(title)
    click.echo("*" * 80)
    if not groups:
        click.echo(f"    {empty_message}")
        return
    for group in groups:
        click.echo(f"  {group.category}")
        for acc in group.accounts:
            label = f"{acc.code} - {acc.name}"
            click.echo(f"      {label:<52} {_money(acc.balance):>20}")


@click.group()
def report_group():
    """Build financial reports."""
    pass


@report_group.command("ledger")
@click.option("--business", default="all", help="Business name or ID (default: all)")
@click.option("--account", "account_code", help="Only this account code")
@period_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def general_ledger(
    ctx,
    business: str,
    account_code: str | None,
    period: str | None,
    start_date: str | None,
    end_date: str | None,
    as_json: bool,
):
    """Show the general ledger with running balances."""
    db = ctx.obj["db"]
    business_id = resolve_business_or_exit(ctx, BusinessService(db), business)
    date_range = resolve_cli_date_range(
        ctx, period=period, start_date=start_date, end_date=end_date
    )

    try:
        report = GeneralLedgerService(db).build_general_ledger(
            start_date=date_range.start_date,
            end_date=date_range.end_date,
            business_id=business_id,
            account_code=account_code,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    if as_json:
        click.echo(report_to_json(report))
        return

    if not report.accounts:
        click.echo("No ledger activity found.")
        return

    click.echo(f"\nGeneral Ledger ({describe_range(date_range)}):")
    for ledger in report.accounts:
        click.echo("=" * 100)
        click.echo(f"{ledger.code} - {ledger.name}")
        click.echo("-" * 100)
        click.echo(
            f"{'Date':<12} {'Entry':<8} {'Description':<30} "
            f"{'Debit':>14} {'Credit':>14} {'Balance':>18}"
        )
        click.echo("-" * 100)
        for row in ledger.rows:
            debit = _money(row.debit) if row.debit > 0 else "-"
            credit = _money(row.credit) if row.credit > 0 else "-"
            marker = "" if row.balanced else " !"
            click.echo(
                f"{str(row.date):<12} {row.entry_id:<8} {row.description[:30]:<30} "
                f"{debit:>14} {credit:>14} {_side(row.running_balance):>18}{marker}"
            )
        click.echo("-" * 100)
        click.echo(
            f"{'Period totals':<52} {_money(ledger.total_debit):>14} "
            f"{_money(ledger.total_credit):>14} {_side(ledger.final_balance):>18}"
        )

    if any(not row.balanced for ledger in report.accounts for row in ledger.rows):
        click.echo("\n! entry debits and credits do not match")


@report_group.command("income-statement")
@click.option("--business", default="all", help="Business name or ID (default: all)")
@period_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def income_statement(
    ctx,
    business: str,
    period: str | None,
    start_date: str | None,
    end_date: str | None,
    as_json: bool,
):
    """Show income and expenses for a period."""
    db = ctx.obj["db"]
    business_id = resolve_business_or_exit(ctx, BusinessService(db), business)
    date_range = resolve_cli_date_range(
        ctx, period=period, start_date=start_date, end_date=end_date
    )

    try:
        report = StatementService(db).build_income_statement(
            start_date=date_range.start_date,
            end_date=date_range.end_date,
            business_id=business_id,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    if as_json:
        click.echo(report_to_json(report))
        return

    click.echo(f"\nIncome Statement ({describe_range(date_range)}):")
    click.echo("-" * 80)
    _echo_groups("Income", report.income, "No income recorded")
    click.echo("-" * 80)
    click.echo(f"{'Total Income':<58} {_money(report.total_income):>20}")
    click.echo("=" * 80)
    click.echo()
    _echo_groups("Expenses", report.expenses, "No expenses recorded")
    click.echo("-" * 80)
    click.echo(f"{'Total Expenses':<58} {_money(report.total_expenses):>20}")
    click.echo("=" * 80)
    click.echo(f"{'NET INCOME':<58} {_money(report.net_income):>20}")


@report_group.command("balance-sheet")
@click.option("--business", default="all", help="Business name or ID (default: all)")
@period_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def balance_sheet(
    ctx,
    business: str,
    period: str | None,
    start_date: str | None,
    end_date: str | None,
    as_json: bool,
):
    """Show assets, liabilities and equity as of the period end."""
    db = ctx.obj["db"]
    business_id = resolve_business_or_exit(ctx, BusinessService(db), business)
    date_range = resolve_cli_date_range(
        ctx, period=period, start_date=start_date, end_date=end_date
    )

    try:
        report = StatementService(db).build_balance_sheet(
            end_date=date_range.end_date, business_id=business_id
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    if as_json:
        click.echo(report_to_json(report))
        return

    as_of = report.as_of.isoformat() if report.as_of else "all dates"
    click.echo(f"\nBalance Sheet (as of {as_of}):")
    click.echo("-" * 80)
    _echo_groups("Assets", report.assets, "No assets recorded")
    click.echo("-" * 80)
    click.echo(f"{'Total Assets':<58} {_money(report.total_assets):>20}")
    click.echo("=" * 80)
    click.echo()
    _echo_groups("Liabilities", report.liabilities, "No liabilities recorded")
    click.echo("-" * 80)
    click.echo(f"{'Total Liabilities':<58} {_money(report.total_liabilities):>20}")
    click.echo()
    _echo_groups("Equity", report.equity, "No equity recorded")
    click.echo("-" * 80)
    click.echo(f"{'Total Equity':<58} {_money(report.total_equity):>20}")
    click.echo("=" * 80)
    click.echo(
        f"{'Total Liabilities + Equity':<58} {_money(report.total_liabilities_and_equity):>20}"
    )
    click.echo()
    status = "Balanced" if report.balanced else "NOT BALANCED"
    click.echo(
        f"Assets = Liabilities + Equity: {_money(report.total_assets)} = "
        f"{_money(report.total_liabilities_and_equity)} ({status})"
    )


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
