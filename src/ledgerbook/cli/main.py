"""Main CLI entry point."""

import logging

import click
from ledgerbook.database.factories import DB_PATH_ENV_VAR, create_sqlite_database

# Import and register all commands at module level
from ledgerbook.cli.commands import (
    account,
    business,
    entry,
    invoice,
    report,
    transaction,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help=f"Path to database file (overrides {DB_PATH_ENV_VAR} environment variable)",
    envvar=DB_PATH_ENV_VAR,
)
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, debug: bool):
    """Ledgerbook - Small-business bookkeeping.

    Record invoices and double-entry journal entries, then derive the
    general ledger, income statement and balance sheet per business and
    period.
    """
    logging.basicConfig(level=logging.DEBUG if debug else logging.WARNING)
    ctx.ensure_object(dict)

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
business.register_commands(cli)
account.register_commands(cli)
entry.register_commands(cli)
invoice.register_commands(cli)
report.register_commands(cli)
transaction.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
