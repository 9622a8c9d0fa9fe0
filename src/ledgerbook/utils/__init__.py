"""Utility functions for ledgerbook."""

from ledgerbook.utils.date_parser import parse_date, resolve_period
from ledgerbook.utils.amount_parser import parse_amount, to_amount

__all__ = ["parse_date", "resolve_period", "parse_amount", "to_amount"]
