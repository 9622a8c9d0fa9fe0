"""Categorized transaction domain service."""

import logging
from datetime import date
from decimal import Decimal
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import (
    JournalEntry,
    Transaction,
    TransactionCategory,
    TransactionType,
)
from ledgerbook.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    business_not_found,
    transaction_category_not_found,
    transaction_not_found,
)

LOGGER = logging.getLogger(__name__)

TRANSACTION_REFERENCE_PREFIX = "transaction:"


def transaction_reference(transaction_id: int) -> str:
    """Back-reference stored on a journal entry recorded for a transaction."""
    return f"{TRANSACTION_REFERENCE_PREFIX}{transaction_id}"


def parse_transaction_reference(reference: str) -> Optional[int]:
    """Return the transaction ID named by a reference, or None for other sources."""
    if not reference.startswith(TRANSACTION_REFERENCE_PREFIX):
        return None
    try:
        return int(reference[len(TRANSACTION_REFERENCE_PREFIX):])
    except ValueError:
        raise ValidationError(f"Malformed transaction reference '{reference}'")


def parse_transaction_type(value: str | TransactionType) -> TransactionType:
    """Parse a transaction type name.

    Raises:
        ValidationError: If the value is not income or expense
    """
    try:
        return TransactionType(value.strip().lower() if isinstance(value, str) else value)
    except ValueError:
        raise ValidationError(
            f"Unknown transaction type '{value}'. Expected 'income' or 'expense'"
        )


class TransactionService:
    """Service for categorized business transactions."""

    def __init__(self, db: Database):
        """Initialize transaction service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_category(self, name: str, transaction_type: str | TransactionType) -> int:
        """Create a transaction category.

        Args:
            name: Unique category name
            transaction_type: income or expense

        Returns:
            Category ID

        Raises:
            ValidationError: If name or type is invalid
            ConflictError: If the name is already used
        """
        name = name.strip()
        if not name:
            raise ValidationError("Category name must not be empty")
        parsed_type = parse_transaction_type(transaction_type)
        if self.db.get_transaction_category_by_name(name) is not None:
            raise ConflictError(f"Transaction category '{name}' already exists")
        return self.db.create_transaction_category(name, parsed_type)

    def list_categories(
        self, transaction_type: Optional[str | TransactionType] = None
    ) -> list[TransactionCategory]:
        """List categories ordered by name, optionally of one type."""
        parsed = None if transaction_type is None else parse_transaction_type(transaction_type)
        return self.db.list_transaction_categories(parsed)

    def resolve_category(self, category: str | int) -> TransactionCategory:
        """Find a category by ID or exact name.

        Raises:
            NotFoundError: If no category matches
        """
        found = None
        if isinstance(category, int) or str(category).isdigit():
            found = self.db.get_transaction_category(int(category))
        if found is None:
            found = self.db.get_transaction_category_by_name(str(category))
        if found is None:
            raise NotFoundError(transaction_category_not_found(category))
        return found

    def record_transaction(
        self,
        business_id: int,
        date: date,
        amount: Decimal,
        description: str = "",
        category: Optional[str | int] = None,
    ) -> int:
        """Record a categorized transaction.

        Args:
            business_id: Owning business ID
            date: Transaction date
            amount: Non-negative amount; the category gives the direction
            description: Free text
            category: Category name or ID, or None for uncategorized

        Returns:
            Transaction ID

        Raises:
            ValidationError: If the amount is negative or not finite
            NotFoundError: If the business or category does not exist
        """
        if not amount.is_finite() or amount < 0:
            raise ValidationError("Transaction amount must be a non-negative number")
        if self.db.get_business(business_id) is None:
            raise NotFoundError(business_not_found(business_id))
        category_id = None if category is None else self.resolve_category(category).id

        transaction_id = self.db.create_transaction(
            business_id=business_id,
            date=date,
            amount=amount,
            description=description.strip(),
            category_id=category_id,
        )
        LOGGER.debug("Recorded transaction %s for business %s", transaction_id, business_id)
        return transaction_id

    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID."""
        return self.db.get_transaction(transaction_id)

    def require_transaction(self, transaction_id: int) -> Transaction:
        """Get transaction by ID or raise NotFoundError."""
        transaction = self.db.get_transaction(transaction_id)
        if transaction is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        return transaction

    def list_transactions(
        self,
        business_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category: Optional[str | int] = None,
    ) -> list[Transaction]:
        """List transactions newest first with their categories.

        Raises:
            NotFoundError: If the category filter does not exist
            FetchError: If the data store cannot be queried
        """
        category_id = None if category is None else self.resolve_category(category).id
        return self.db.list_transactions(
            business_id=business_id,
            start_date=start_date,
            end_date=end_date,
            category_id=category_id,
        )

    def find_journal_entry(self, transaction_id: int) -> Optional[JournalEntry]:
        """Journal entry recorded for a transaction, if any."""
        return self.db.find_entry_by_transaction(transaction_reference(transaction_id))
