"""Business management commands."""

import click
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.domain.business import BusinessService


@click.group()
def business_group():
    """Manage businesses."""
    pass


@business_group.command("create")
@click.argument("name", metavar="BUSINESS_NAME")
@click.option("--tax-id", help="Tax identification number")
@click.pass_context
def create_business(ctx, name: str, tax_id: str | None):
    """Create a new business.

    Examples:
        ledgerbook business create "Corner Bakery"
        ledgerbook business create "Corner Bakery" --tax-id 20123456789
    """
    service = BusinessService(ctx.obj["db"])

    try:
        business_id = service.create_business(name=name, tax_id=tax_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created business '{name}' (ID: {business_id})")


@business_group.command("list")
@click.pass_context
def list_businesses(ctx):
    """List all businesses."""
    service = BusinessService(ctx.obj["db"])

    businesses = service.list_businesses()
    if not businesses:
        click.echo("No businesses found.")
        return

    click.echo("\nBusinesses:")
    click.echo("-" * 60)
    for business in businesses:
        click.echo(f"ID: {business.id:3d} | {business.name:30s} | Tax ID: {business.tax_id or '-'}")


def register_commands(cli):
    """Register business commands with main CLI."""
    cli.add_command(business_group, name="business")
