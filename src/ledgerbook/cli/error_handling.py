"""CLI error handling helpers."""

import logging

import click

from ledgerbook.domain.errors import DomainError, FetchError

LOGGER = logging.getLogger(__name__)

# Exit code when the data store could not answer; bad input exits with 1
FETCH_FAILURE_EXIT_CODE = 2


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error on stderr and exit with failure.

    A FetchError means the report was abandoned, so nothing partial has been
    printed; it exits with FETCH_FAILURE_EXIT_CODE.
    """
    if isinstance(error, FetchError):
        LOGGER.debug("Report aborted", exc_info=error)
        click.echo(f"Error: report aborted: {error}", err=True)
        ctx.exit(FETCH_FAILURE_EXIT_CODE)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
