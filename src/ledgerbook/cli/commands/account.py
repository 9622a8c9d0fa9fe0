"""Chart of accounts commands."""

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.chart import ChartOfAccountsService, DEFAULT_CHART
from ledgerbook.domain.entities import AccountType

ACCOUNT_TYPE_CHOICES = [t.value for t in AccountType]


@click.group()
def account_group():
    """Manage the chart of accounts."""
    pass


@account_group.command("create")
@click.argument("code", metavar="CODE")
@click.argument("name", metavar="NAME")
@click.option(
    "--type",
    "account_type",
    required=True,
    type=click.Choice(ACCOUNT_TYPE_CHOICES, case_sensitive=False),
    help="Account type",
)
@click.option("--category", required=True, help="Category label (e.g., 'Current Assets')")
@click.pass_context
def create_account(ctx, code: str, name: str, account_type: str, category: str):
    """Add an account to the chart of accounts.

    Examples:
        ledgerbook account create 1020 "Bank" --type asset --category "Current Assets"
        ledgerbook account create 6400 "Marketing" --type expense --category "Operating Expenses"
    """
    service = ChartOfAccountsService(ctx.obj["db"])

    try:
        service.create_account(
            code=code, name=name, account_type=account_type, category=category
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created account {code} - {name} ({account_type.lower()})")


@account_group.command("list")
@click.option(
    "--type",
    "account_types",
    multiple=True,
    type=click.Choice(ACCOUNT_TYPE_CHOICES, case_sensitive=False),
    help="Only show accounts of this type (repeatable)",
)
@click.pass_context
def list_accounts(ctx, account_types: tuple[str, ...]):
    """List the chart of accounts ordered by code."""
    service = ChartOfAccountsService(ctx.obj["db"])

    accounts = service.list_accounts(list(account_types) if account_types else None)
    if not accounts:
        click.echo("No accounts found.")
        return

    click.echo("\nChart of Accounts:")
    click.echo("-" * 80)
    click.echo(f"{'Code':<8} {'Name':<30} {'Type':<10} {'Category':<30}")
    click.echo("-" * 80)
    for acc in accounts:
        click.echo(
            f"{acc.code:<8} {acc.name:<30} {acc.account_type.value:<10} {acc.category:<30}"
        )


@click.command("init-chart")
@click.pass_context
def init_chart(ctx):
    """Seed the chart of accounts with a default small-business chart.

    Accounts whose code already exists are left untouched.
    """
    service = ChartOfAccountsService(ctx.obj["db"])

    created = service.initialize_default_chart()
    skipped = len(DEFAULT_CHART) - created
    if created == 0:
        click.echo("Default chart of accounts already present.")
        return
    click.echo(f"Created {created} accounts.")
    if skipped:
        click.echo(f"Skipped {skipped} existing accounts.")


def register_commands(cli):
    """Register chart of accounts commands with main CLI."""
    cli.add_command(account_group, name="account")
    cli.add_command(init_chart)
