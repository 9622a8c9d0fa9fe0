"""Amount parsing utilities."""

import logging
import re
from decimal import Decimal, InvalidOperation
from typing import Any

LOGGER = logging.getLogger(__name__)

ZERO = Decimal("0")


def parse_amount(amount_str: str) -> Decimal:
    """Parse a user-supplied amount string into a Decimal.

    Handles "123.45", "$123.45", "S/ 1,234.56" and similar. Journal amounts
    are never negative, so a leading minus sign is rejected.

    Args:
        amount_str: Amount string

    Returns:
        Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed or is negative
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    cleaned = re.sub(r"[$€£¥]|S/", "", amount_str.strip())
    cleaned = cleaned.replace(",", "").strip()

    try:
        amount = Decimal(cleaned)
    except InvalidOperation as e:
        raise ValueError(f"Could not parse amount '{amount_str}': {e}")

    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str}'")
    if amount < 0:
        raise ValueError(f"Amount must not be negative: '{amount_str}'")
    return amount


def to_amount(value: Any) -> Decimal:
    """Coerce a stored debit/credit value to Decimal.

    Missing or non-numeric values become zero instead of failing, so a bad
    row never blocks a report.
    """
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value if value.is_finite() else ZERO
    if isinstance(value, bool):
        LOGGER.debug("Treating boolean amount %r as zero", value)
        return ZERO
    try:
        # via str() so floats keep their printed value
        amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError):
        LOGGER.debug("Treating malformed amount %r as zero", value)
        return ZERO
    if not amount.is_finite():
        LOGGER.debug("Treating non-finite amount %r as zero", value)
        return ZERO
    return amount
