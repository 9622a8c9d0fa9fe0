"""CLI helpers for business resolution and error handling."""

from __future__ import annotations

import click
from ledgerbook.domain.business import BusinessService
from ledgerbook.utils.business_resolver import resolve_business


def resolve_business_or_exit(
    ctx: click.Context, business_service: BusinessService, business: str | int | None
) -> int | None:
    """Resolve business name or ID, or exit with a CLI error.

    Returns None for "all" so reports run across every business.
    """
    try:
        return resolve_business(business_service, business)
    except ValueError as exc:
        click.echo(f"Error: {exc}", err=True)
        ctx.exit(1)


def require_business_or_exit(
    ctx: click.Context, business_service: BusinessService, business: str | int
) -> int:
    """Resolve a single business; "all" is rejected."""
    business_id = resolve_business_or_exit(ctx, business_service, business)
    if business_id is None:
        click.echo("Error: A specific business is required here.", err=True)
        ctx.exit(1)
    return business_id
