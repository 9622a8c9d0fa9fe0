"""General ledger domain service."""

import logging
from datetime import date
from typing import Iterable, Optional, Sequence

from ledgerbook.database.base import Database
from ledgerbook.domain.accounting import is_stock
from ledgerbook.domain.balances import entry_balance_flags
from ledgerbook.domain.entities import (
    Account,
    AccountLedger,
    GeneralLedger,
    JournalEntry,
    JournalLine,
    LedgerRow,
)
from ledgerbook.domain.errors import NotFoundError, account_not_found
from ledgerbook.utils.amount_parser import ZERO, to_amount

LOGGER = logging.getLogger(__name__)


def _in_scope(account: Account, entry: JournalEntry, start_date: Optional[date]) -> bool:
    # Entries are already bounded by end date; only flow accounts honor the start.
    if start_date is None or is_stock(account.account_type):
        return True
    return entry.date >= start_date


def build_account_ledger(
    account: Account,
    entries_by_id: dict[int, JournalEntry],
    lines: Iterable[JournalLine],
    balance_flags: dict[int, bool],
    start_date: Optional[date] = None,
) -> AccountLedger:
    """Build the chronological ledger of one account.

    Lines are ordered by entry date, then entry ID, then line ID. The running
    balance is the raw debit-minus-credit prefix sum starting at zero, so a
    negative value denotes a credit-side balance.
    """
    selected = []
    for line in lines:
        if line.account_code != account.code:
            continue
        entry = entries_by_id.get(line.entry_id)
        if entry is None or not _in_scope(account, entry, start_date):
            continue
        selected.append((entry, line))

    selected.sort(key=lambda pair: (pair[0].date, pair[0].id, pair[1].id))

    rows = []
    running = ZERO
    total_debit = ZERO
    total_credit = ZERO
    for entry, line in selected:
        debit = to_amount(line.debit)
        credit = to_amount(line.credit)
        running += debit - credit
        total_debit += debit
        total_credit += credit
        rows.append(
            LedgerRow(
                date=entry.date,
                entry_id=entry.id,
                line_id=line.id,
                description=entry.description,
                debit=debit,
                credit=credit,
                running_balance=running,
                balanced=balance_flags.get(entry.id, True),
            )
        )

    return AccountLedger(
        code=account.code,
        name=account.name,
        account_type=account.account_type,
        rows=tuple(rows),
        total_debit=total_debit,
        total_credit=total_credit,
        final_balance=total_debit - total_credit,
    )


def build_account_ledgers(
    accounts: Sequence[Account],
    entries: Iterable[JournalEntry],
    lines: Iterable[JournalLine],
    start_date: Optional[date] = None,
    keep_inactive: bool = False,
) -> tuple[AccountLedger, ...]:
    """Build ledgers for each account, in the order the accounts are given.

    Args:
        accounts: Accounts to report on
        entries: Entry headers bounded by business and end date
        lines: All lines of those entries
        start_date: Period start, applied to flow accounts only
        keep_inactive: If True, accounts without lines in scope are kept

    Returns:
        Tuple of account ledgers
    """
    entries_by_id = {entry.id: entry for entry in entries}
    lines = list(lines)
    balance_flags = entry_balance_flags(lines)

    ledgers = []
    for account in accounts:
        ledger = build_account_ledger(
            account, entries_by_id, lines, balance_flags, start_date=start_date
        )
        if ledger.rows or keep_inactive:
            ledgers.append(ledger)
    return tuple(ledgers)


class GeneralLedgerService:
    """Service for building general ledger reports."""

    def __init__(self, db: Database):
        """Initialize general ledger service.

        Args:
            db: Database instance
        """
        self.db = db

    def build_general_ledger(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        business_id: Optional[int] = None,
        account_code: Optional[str] = None,
    ) -> GeneralLedger:
        """Build the general ledger for a period.

        Args:
            start_date: Optional inclusive period start
            end_date: Optional inclusive period end
            business_id: Optional business filter
            account_code: Optional single account to report; when given the
                account is returned even without activity

        Returns:
            GeneralLedger report

        Raises:
            NotFoundError: If account_code is not in the chart of accounts
            FetchError: If the data store cannot be queried
        """
        LOGGER.debug(
            "Building general ledger %s..%s business=%s account=%s",
            start_date,
            end_date,
            business_id,
            account_code,
        )
        accounts = self.db.fetch_accounts()
        if account_code is not None:
            accounts = [acc for acc in accounts if acc.code == account_code]
            if not accounts:
                raise NotFoundError(account_not_found(account_code))

        # Stock accounts need everything up to the end date; flow accounts
        # are narrowed to the period while building each ledger.
        needs_history = any(is_stock(acc.account_type) for acc in accounts)
        entries = self.db.fetch_entries(
            business_id=business_id,
            date_from=None if needs_history else start_date,
            date_to=end_date,
        )
        lines = self.db.fetch_lines([entry.id for entry in entries])

        ledgers = build_account_ledgers(
            accounts,
            entries,
            lines,
            start_date=start_date,
            keep_inactive=account_code is not None,
        )
        return GeneralLedger(
            start_date=start_date,
            end_date=end_date,
            business_id=business_id,
            accounts=ledgers,
        )

    def get_account_ledger(
        self,
        account_code: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        business_id: Optional[int] = None,
    ) -> AccountLedger:
        """Build the ledger of a single account."""
        report = self.build_general_ledger(
            start_date=start_date,
            end_date=end_date,
            business_id=business_id,
            account_code=account_code,
        )
        return report.accounts[0]
