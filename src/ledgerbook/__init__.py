"""Ledgerbook: small-business bookkeeping and financial statements."""

__version__ = "0.1.0"


def __getattr__(name):
    # cli.main imports click and the database layer; load it on first use
    if name == "main":
        from ledgerbook.cli.main import main
        return main
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
