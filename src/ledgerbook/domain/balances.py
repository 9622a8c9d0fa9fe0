"""Balance accumulation over journal lines."""

from collections import defaultdict
from decimal import Decimal
from typing import Iterable, Optional

from ledgerbook.domain.entities import EntryListing, JournalEntry, JournalLine
from ledgerbook.utils.amount_parser import ZERO, to_amount

BALANCE_TOLERANCE = Decimal("0.01")


def line_movement(line: JournalLine) -> Decimal:
    """Raw debit minus credit for one line."""
    return to_amount(line.debit) - to_amount(line.credit)


def accumulate(
    lines: Iterable[JournalLine], entry_ids: Optional[Iterable[int]] = None
) -> dict[str, Decimal]:
    """Fold journal lines into net movement per account code.

    Only lines whose entry is in ``entry_ids`` are counted (every line when
    ``entry_ids`` is None). No sign normalization is applied here.

    Args:
        lines: Journal lines
        entry_ids: Candidate entry IDs already scoped by business and date

    Returns:
        Mapping of account code to debit minus credit
    """
    allowed = None if entry_ids is None else set(entry_ids)
    movements: dict[str, Decimal] = defaultdict(lambda: ZERO)
    for line in lines:
        if allowed is not None and line.entry_id not in allowed:
            continue
        movements[line.account_code] += line_movement(line)
    return dict(movements)


def is_balanced(total_debit: Decimal, total_credit: Decimal) -> bool:
    """Check the double-entry equality within the reporting tolerance."""
    return abs(total_debit - total_credit) < BALANCE_TOLERANCE


def entry_balance_flags(lines: Iterable[JournalLine]) -> dict[int, bool]:
    """Map each entry ID seen in ``lines`` to whether its debits equal its credits."""
    debits: dict[int, Decimal] = defaultdict(lambda: ZERO)
    credits: dict[int, Decimal] = defaultdict(lambda: ZERO)
    for line in lines:
        debits[line.entry_id] += to_amount(line.debit)
        credits[line.entry_id] += to_amount(line.credit)
    return {
        entry_id: is_balanced(debits[entry_id], credits[entry_id])
        for entry_id in debits
    }


def build_entry_listings(
    entries: Iterable[JournalEntry], lines: Iterable[JournalLine]
) -> list[EntryListing]:
    """Attach lines and double-entry totals to entry headers, keeping entry order."""
    lines_by_entry: dict[int, list[JournalLine]] = defaultdict(list)
    for line in lines:
        lines_by_entry[line.entry_id].append(line)

    listings = []
    for entry in entries:
        entry_lines = sorted(lines_by_entry.get(entry.id, []), key=lambda l: l.id)
        total_debit = sum((to_amount(l.debit) for l in entry_lines), ZERO)
        total_credit = sum((to_amount(l.credit) for l in entry_lines), ZERO)
        listings.append(
            EntryListing(
                entry=entry,
                lines=tuple(entry_lines),
                total_debit=total_debit,
                total_credit=total_credit,
                balanced=is_balanced(total_debit, total_credit),
            )
        )
    return listings
