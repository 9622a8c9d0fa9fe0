"""Journal entry domain service."""

from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Optional, Sequence

from ledgerbook.database.base import Database
from ledgerbook.domain.balances import build_entry_listings
from ledgerbook.domain.entities import EntryListing
from ledgerbook.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    business_not_found,
    transaction_not_found,
)
from ledgerbook.domain.transaction import parse_transaction_reference
from ledgerbook.utils.amount_parser import ZERO


def coerce_line_amount(account_code: str, value) -> Decimal:
    """Convert a debit or credit argument to Decimal for storage.

    None and empty strings mean zero. Floats go through ``str()`` so 0.1
    stays 0.1.

    Raises:
        ValidationError: If the value is not a finite number
    """
    if value is None or value == "":
        return ZERO
    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise ValidationError(
            f"Line for account '{account_code}' has an invalid amount: {value!r}"
        )
    if not amount.is_finite():
        raise ValidationError(
            f"Line for account '{account_code}' has a non-finite amount: {value!r}"
        )
    return amount


class JournalService:
    """Service for recording and listing journal entries."""

    def __init__(self, db: Database):
        """Initialize journal service.

        Args:
            db: Database instance
        """
        self.db = db

    def record_entry(
        self,
        date: date,
        business_id: int,
        description: str,
        lines: Sequence[tuple[str, Decimal, Decimal]],
        transaction_id: Optional[str] = None,
    ) -> int:
        """Record a journal entry.

        Debits and credits are not required to balance; the listing reports
        unbalanced entries instead.

        Args:
            date: Entry date
            business_id: Owning business ID
            description: Entry description
            lines: (account_code, debit, credit) tuples
            transaction_id: Optional back-reference to a source document

        Returns:
            Entry ID

        Raises:
            ValidationError: If lines are missing or amounts are invalid
            NotFoundError: If the business, an account or a referenced
                transaction does not exist
        """
        if self.db.get_business(business_id) is None:
            raise NotFoundError(business_not_found(business_id))

        if transaction_id is not None:
            self._check_transaction_reference(business_id, transaction_id)

        if not lines:
            raise ValidationError("A journal entry needs at least one line")

        normalized = []
        for account_code, debit, credit in lines:
            if self.db.get_account(account_code) is None:
                raise NotFoundError(account_not_found(account_code))
            debit = coerce_line_amount(account_code, debit)
            credit = coerce_line_amount(account_code, credit)
            if debit < 0 or credit < 0:
                raise ValidationError(
                    f"Line for account '{account_code}' has a negative amount"
                )
            if debit == 0 and credit == 0:
                raise ValidationError(
                    f"Line for account '{account_code}' needs a debit or a credit"
                )
            normalized.append((account_code, debit, credit))

        return self.db.create_entry(
            date=date,
            business_id=business_id,
            description=description,
            lines=normalized,
            transaction_id=transaction_id,
        )

    def _check_transaction_reference(self, business_id: int, reference: str) -> None:
        linked_id = parse_transaction_reference(reference)
        if linked_id is None:
            return
        transaction = self.db.get_transaction(linked_id)
        if transaction is None:
            raise NotFoundError(transaction_not_found(linked_id))
        if transaction.business_id != business_id:
            raise ValidationError(
                f"Transaction {linked_id} belongs to another business"
            )

    def list_entries(
        self,
        business_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[EntryListing]:
        """List entries newest first with their lines and balance flag.

        Raises:
            FetchError: If the data store cannot be queried
        """
        entries = self.db.fetch_entries(
            business_id=business_id, date_from=start_date, date_to=end_date
        )
        if not entries:
            return []
        lines = self.db.fetch_lines([entry.id for entry in entries])
        return build_entry_listings(entries, lines)
