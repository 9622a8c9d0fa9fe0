"""Invoice commands."""

import click
from ledgerbook.cli.business_resolution import (
    require_business_or_exit,
    resolve_business_or_exit,
)
from ledgerbook.cli.error_handling import handle_domain_error
from ledgerbook.cli.period_options import describe_range, period_options, resolve_cli_date_range
from ledgerbook.domain.business import BusinessService
from ledgerbook.domain.entities import InvoiceType
from ledgerbook.domain.invoice import DEFAULT_TAX_RATE, InvoiceService
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.date_parser import parse_date
from ledgerbook.utils.serialization import report_to_json

INVOICE_TYPE_CHOICES = [t.value for t in InvoiceType]


@click.group()
def invoice_group():
    """Record, list and post invoices."""
    pass


@invoice_group.command("add")
@click.option("--business", required=True, help="Business name or ID")
@click.option(
    "--type",
    "invoice_type",
    required=True,
    type=click.Choice(INVOICE_TYPE_CHOICES, case_sensitive=False),
    help="Invoice type",
)
@click.option("--number", "invoice_number", required=True, help="Invoice number")
@click.option("--date", "invoice_date", required=True, help="Invoice date (YYYY-MM-DD or 'today')")
@click.option("--party", "client_supplier", required=True, help="Client (sale) or supplier (purchase)")
@click.option("--party-tax-id", help="Client or supplier tax ID")
@click.option("--subtotal", required=True, help="Amount before tax")
@click.option("--tax", help="Explicit tax amount (default: subtotal x tax rate)")
@click.option(
    "--tax-rate",
    default=str(DEFAULT_TAX_RATE),
    show_default=True,
    help="Tax rate used when --tax is not given",
)
@click.option("--post", is_flag=True, help="Also record the journal entry")
@click.pass_context
def add_invoice(
    ctx,
    business: str,
    invoice_type: str,
    invoice_number: str,
    invoice_date: str,
    client_supplier: str,
    party_tax_id: str | None,
    subtotal: str,
    tax: str | None,
    tax_rate: str,
    post: bool,
):
    """Record an invoice.

    Examples:
        ledgerbook invoice add --business 1 --type sale --number F001-1 \\
            --date 2024-03-15 --party "ACME" --subtotal 1000 --post
    """
    db = ctx.obj["db"]
    business_id = require_business_or_exit(ctx, BusinessService(db), business)
    service = InvoiceService(db)

    try:
        parsed_date = parse_date(invoice_date)
        parsed_subtotal = parse_amount(subtotal)
        parsed_tax = parse_amount(tax) if tax is not None else None
        parsed_rate = parse_amount(tax_rate)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    try:
        invoice_id = service.create_invoice(
            business_id=business_id,
            date=parsed_date,
            invoice_number=invoice_number,
            invoice_type=invoice_type.lower(),
            client_supplier=client_supplier,
            subtotal=parsed_subtotal,
            tax=parsed_tax,
            tax_rate=parsed_rate,
            tax_id=party_tax_id,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    invoice = service.get_invoice(invoice_id)
    click.echo(f"Created invoice {invoice_id} ({invoice.invoice_number})")
    click.echo(f"  Subtotal: {invoice.subtotal:,.2f}")
    click.echo(f"  Tax: {invoice.tax:,.2f}")
    click.echo(f"  Total: {invoice.total:,.2f}")

    if post:
        try:
            entry_id = service.post_invoice(invoice_id)
        except ValueError as e:
            handle_domain_error(ctx, e)
        click.echo(f"Posted as entry {entry_id}")


@invoice_group.command("list")
@click.option("--business", default="all", help="Business name or ID (default: all)")
@click.option(
    "--type",
    "invoice_type",
    type=click.Choice(INVOICE_TYPE_CHOICES, case_sensitive=False),
    help="Only show sale or purchase invoices",
)
@period_options
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def list_invoices(
    ctx,
    business: str,
    invoice_type: str | None,
    period: str | None,
    start_date: str | None,
    end_date: str | None,
    as_json: bool,
):
    """List invoices, newest first."""
    db = ctx.obj["db"]
    business_id = resolve_business_or_exit(ctx, BusinessService(db), business)
    date_range = resolve_cli_date_range(
        ctx, period=period, start_date=start_date, end_date=end_date
    )

    invoices = InvoiceService(db).list_invoices(
        business_id=business_id,
        start_date=date_range.start_date,
        end_date=date_range.end_date,
        invoice_type=invoice_type.lower() if invoice_type else None,
    )

    if as_json:
        click.echo(report_to_json(invoices))
        return

    if not invoices:
        click.echo("No invoices found.")
        return

    click.echo(f"\nInvoices ({describe_range(date_range)}):")
    click.echo("-" * 100)
    click.echo(
        f"{'ID':<6} {'Date':<12} {'Type':<9} {'Number':<14} {'Party':<25} "
        f"{'Subtotal':>10} {'Tax':>9} {'Total':>10}"
    )
    click.echo("-" * 100)
    for inv in invoices:
        click.echo(
            f"{inv.id:<6} {str(inv.date):<12} {inv.invoice_type.value:<9} "
            f"{inv.invoice_number[:14]:<14} {inv.client_supplier[:25]:<25} "
            f"{inv.subtotal:>10,.2f} {inv.tax:>9,.2f} {inv.total:>10,.2f}"
        )


@invoice_group.command("post")
@click.argument("invoice_id", type=int)
@click.pass_context
def post_invoice(ctx, invoice_id: int):
    """Record the journal entry for an invoice."""
    try:
        entry_id = InvoiceService(ctx.obj["db"]).post_invoice(invoice_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Posted invoice {invoice_id} as entry {entry_id}")


def register_commands(cli):
    """Register invoice commands with main CLI."""
    cli.add_command(invoice_group, name="invoice")
