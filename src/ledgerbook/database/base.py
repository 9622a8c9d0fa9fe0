"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional, Sequence
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerbook.domain.entities import (
    Account,
    AccountType,
    Business,
    Invoice,
    InvoiceType,
    JournalEntry,
    JournalLine,
    Transaction,
    TransactionCategory,
    TransactionType,
)


class Database(ABC):
    """Abstract database interface for ledgerbook.

    The ``fetch_*`` methods are the read-only query surface the report
    engine consumes. Implementations raise ``FetchError`` when the store
    cannot answer one of them.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Business operations
    @abstractmethod
    def create_business(self, name: str, tax_id: Optional[str] = None) -> int:
        """Create a business. Returns business ID."""
        pass

    @abstractmethod
    def get_business(self, business_id: int) -> Optional[Business]:
        """Get business by ID."""
        pass

    @abstractmethod
    def list_businesses(self) -> list[Business]:
        """List all businesses ordered by name."""
        pass

    # Chart of accounts operations
    @abstractmethod
    def create_account(
        self, code: str, name: str, account_type: AccountType, category: str
    ) -> str:
        """Create a chart of accounts entry. Returns the account code."""
        pass

    @abstractmethod
    def get_account(self, code: str) -> Optional[Account]:
        """Get account by code."""
        pass

    @abstractmethod
    def fetch_accounts(
        self, types: Optional[Iterable[AccountType]] = None
    ) -> list[Account]:
        """Fetch accounts of the given types (all types if None), ordered by code."""
        pass

    # Journal operations
    @abstractmethod
    def create_entry(
        self,
        date: date,
        business_id: int,
        description: str,
        lines: Sequence[tuple[str, Decimal, Decimal]],
        transaction_id: Optional[str] = None,
    ) -> int:
        """Create a journal entry with its (account_code, debit, credit) lines.

        Returns entry ID.
        """
        pass

    @abstractmethod
    def fetch_entries(
        self,
        business_id: Optional[int] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> list[JournalEntry]:
        """Fetch entry headers, newest first.

        Args:
            business_id: Optional business filter
            date_from: Optional inclusive lower date bound
            date_to: Optional inclusive upper date bound
        """
        pass

    @abstractmethod
    def fetch_lines(self, entry_ids: Iterable[int]) -> list[JournalLine]:
        """Fetch all lines belonging to the given entries."""
        pass

    @abstractmethod
    def find_entry_by_transaction(self, transaction_id: str) -> Optional[JournalEntry]:
        """Find the entry that back-references a source transaction."""
        pass

    # Invoice operations
    @abstractmethod
    def create_invoice(
        self,
        business_id: int,
        date: date,
        invoice_number: str,
        invoice_type: InvoiceType,
        client_supplier: str,
        subtotal: Decimal,
        tax: Decimal,
        total: Decimal,
        tax_id: Optional[str] = None,
    ) -> int:
        """Create an invoice. Returns invoice ID."""
        pass

    @abstractmethod
    def get_invoice(self, invoice_id: int) -> Optional[Invoice]:
        """Get invoice by ID."""
        pass

    @abstractmethod
    def invoice_exists(self, business_id: int, invoice_number: str) -> bool:
        """Check if an invoice number is already used within a business."""
        pass

    @abstractmethod
    def list_invoices(
        self,
        business_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        invoice_type: Optional[InvoiceType] = None,
    ) -> list[Invoice]:
        """List invoices newest first with optional filters."""
        pass

    # Transaction operations
    @abstractmethod
    def create_transaction_category(self, name: str, transaction_type: TransactionType) -> int:
        """Create a transaction category. Returns category ID."""
        pass

    @abstractmethod
    def get_transaction_category(self, category_id: int) -> Optional[TransactionCategory]:
        """Get transaction category by ID."""
        pass

    @abstractmethod
    def get_transaction_category_by_name(self, name: str) -> Optional[TransactionCategory]:
        """Get transaction category by exact name."""
        pass

    @abstractmethod
    def list_transaction_categories(
        self, transaction_type: Optional[TransactionType] = None
    ) -> list[TransactionCategory]:
        """List transaction categories ordered by name."""
        pass

    @abstractmethod
    def create_transaction(
        self,
        business_id: int,
        date: date,
        amount: Decimal,
        description: str = "",
        category_id: Optional[int] = None,
    ) -> int:
        """Create a transaction. Returns transaction ID."""
        pass

    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get transaction by ID, with its category."""
        pass

    @abstractmethod
    def list_transactions(
        self,
        business_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        category_id: Optional[int] = None,
    ) -> list[Transaction]:
        """List transactions with their categories, newest first."""
        pass
