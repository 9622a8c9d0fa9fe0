"""Domain model entities for ledgerbook.

These are pure data classes representing bookkeeping concepts, independent of
the database schema. Reports built from them are plain values with no
references back into the source rows, so they can be rendered or exported
as-is.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class AccountType(str, Enum):
    """Account classification in the chart of accounts."""

    ASSET = "asset"
    LIABILITY = "liability"
    EQUITY = "equity"
    INCOME = "income"
    EXPENSE = "expense"


class InvoiceType(str, Enum):
    """Invoice direction."""

    SALE = "sale"
    PURCHASE = "purchase"


class TransactionType(str, Enum):
    """Direction of a categorized money movement."""

    INCOME = "income"
    EXPENSE = "expense"


@dataclass(frozen=True)
class Business:
    """Business entity that owns entries and invoices."""

    id: int
    name: str
    tax_id: Optional[str]
    created_at: datetime


@dataclass(frozen=True)
class Account:
    """Chart of accounts entry."""

    code: str
    name: str
    account_type: AccountType
    category: str


@dataclass(frozen=True)
class JournalEntry:
    """Journal entry header."""

    id: int
    date: date
    business_id: int
    description: str
    transaction_id: Optional[str] = None


@dataclass(frozen=True)
class JournalLine:
    """Single debit/credit line of a journal entry.

    Debit and credit come straight from the store and may be missing or
    malformed; read them through ``to_amount``.
    """

    id: int
    entry_id: int
    account_code: str
    debit: Any
    credit: Any


@dataclass(frozen=True)
class EntryListing:
    """Journal entry with its lines and double-entry totals."""

    entry: JournalEntry
    lines: tuple[JournalLine, ...]
    total_debit: Decimal
    total_credit: Decimal
    balanced: bool


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar-day bounds. ``None`` on both ends means unbounded."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None

    @property
    def is_unbounded(self) -> bool:
        return self.start_date is None and self.end_date is None


@dataclass(frozen=True)
class AccountBalance:
    """Normalized balance of one account over a report scope."""

    code: str
    name: str
    category: str
    balance: Decimal


@dataclass(frozen=True)
class CategoryGroup:
    """Accounts sharing a category label, in first-seen order."""

    category: str
    accounts: tuple[AccountBalance, ...]
    subtotal: Decimal


@dataclass(frozen=True)
class LedgerRow:
    """One journal line touching an account, with the running balance."""

    date: date
    entry_id: int
    line_id: int
    description: str
    debit: Decimal
    credit: Decimal
    running_balance: Decimal
    balanced: bool


@dataclass(frozen=True)
class AccountLedger:
    """Chronological ledger for a single account."""

    code: str
    name: str
    account_type: AccountType
    rows: tuple[LedgerRow, ...]
    total_debit: Decimal
    total_credit: Decimal
    final_balance: Decimal


@dataclass(frozen=True)
class GeneralLedger:
    """General ledger across accounts."""

    start_date: Optional[date]
    end_date: Optional[date]
    business_id: Optional[int]
    accounts: tuple[AccountLedger, ...] = ()


@dataclass(frozen=True)
class IncomeStatement:
    """Flow statement over a bounded period."""

    start_date: Optional[date]
    end_date: Optional[date]
    business_id: Optional[int]
    income: tuple[CategoryGroup, ...] = ()
    expenses: tuple[CategoryGroup, ...] = ()
    total_income: Decimal = Decimal("0")
    total_expenses: Decimal = Decimal("0")
    net_income: Decimal = Decimal("0")


@dataclass(frozen=True)
class BalanceSheet:
    """Stock statement as of a point in time."""

    as_of: Optional[date]
    business_id: Optional[int]
    assets: tuple[CategoryGroup, ...] = ()
    liabilities: tuple[CategoryGroup, ...] = ()
    equity: tuple[CategoryGroup, ...] = ()
    total_assets: Decimal = Decimal("0")
    total_liabilities: Decimal = Decimal("0")
    total_equity: Decimal = Decimal("0")
    total_liabilities_and_equity: Decimal = Decimal("0")
    balanced: bool = True


@dataclass(frozen=True)
class Invoice:
    """Commercial invoice."""

    id: int
    business_id: int
    date: date
    invoice_number: str
    invoice_type: InvoiceType
    client_supplier: str
    tax_id: Optional[str]
    subtotal: Decimal
    tax: Decimal
    total: Decimal
    created_at: datetime = field(compare=False)


@dataclass(frozen=True)
class TransactionCategory:
    """Label for business transactions, e.g. "Supplies" (expense)."""

    id: int
    name: str
    transaction_type: TransactionType


@dataclass(frozen=True)
class Transaction:
    """Categorized business income or expense, recorded outside the journal.

    A journal entry points back at it through ``transaction_reference``.
    """

    id: int
    business_id: int
    date: date
    amount: Decimal
    description: str
    category: Optional[TransactionCategory] = None
    created_at: Optional[datetime] = field(default=None, compare=False)

    @property
    def transaction_type(self) -> Optional[TransactionType]:
        return self.category.transaction_type if self.category else None
