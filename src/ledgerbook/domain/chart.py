"""Chart of accounts domain service."""

from typing import Iterable, Optional
from ledgerbook.database.base import Database
from ledgerbook.domain.entities import Account, AccountType
from ledgerbook.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    account_not_found,
    duplicate_account_code,
)

# Default small-business chart: (code, name, type, category)
DEFAULT_CHART = [
    ("1010", "Cash", AccountType.ASSET, "Current Assets"),
    ("1200", "Accounts Receivable", AccountType.ASSET, "Current Assets"),
    ("1400", "Tax Credit", AccountType.ASSET, "Current Assets"),
    ("1500", "Equipment", AccountType.ASSET, "Fixed Assets"),
    ("2100", "Accounts Payable", AccountType.LIABILITY, "Current Liabilities"),
    ("2200", "Taxes Payable", AccountType.LIABILITY, "Current Liabilities"),
    ("2500", "Long-term Loans", AccountType.LIABILITY, "Long-term Liabilities"),
    ("3100", "Owner's Capital", AccountType.EQUITY, "Capital"),
    ("3200", "Retained Earnings", AccountType.EQUITY, "Retained Earnings"),
    ("4100", "Sales", AccountType.INCOME, "Operating Income"),
    ("4900", "Other Income", AccountType.INCOME, "Other Income"),
    ("5100", "Purchases", AccountType.EXPENSE, "Cost of Sales"),
    ("6100", "Rent", AccountType.EXPENSE, "Operating Expenses"),
    ("6200", "Salaries", AccountType.EXPENSE, "Operating Expenses"),
    ("6300", "Utilities", AccountType.EXPENSE, "Operating Expenses"),
]


def parse_account_type(value: str | AccountType) -> AccountType:
    """Parse an account type name.

    Raises:
        ValidationError: If the value is not a known account type
    """
    try:
        return AccountType(value.strip().lower() if isinstance(value, str) else value)
    except ValueError:
        allowed = ", ".join(t.value for t in AccountType)
        raise ValidationError(f"Unknown account type '{value}'. Expected one of: {allowed}")


class ChartOfAccountsService:
    """Service for managing the chart of accounts."""

    def __init__(self, db: Database):
        """Initialize chart of accounts service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_account(
        self, code: str, name: str, account_type: str | AccountType, category: str
    ) -> str:
        """Create a chart of accounts entry.

        Args:
            code: Unique account code
            name: Display name
            account_type: One of asset, liability, equity, income, expense
            category: Grouping label within the type (e.g. "Current Assets")

        Returns:
            Account code

        Raises:
            ValidationError: If code, name or type is invalid
            ConflictError: If the code is already used
        """
        code = code.strip()
        if not code:
            raise ValidationError("Account code must not be empty")
        if not name.strip():
            raise ValidationError("Account name must not be empty")
        parsed_type = parse_account_type(account_type)

        if self.db.get_account(code) is not None:
            raise ConflictError(duplicate_account_code(code))

        return self.db.create_account(
            code=code,
            name=name.strip(),
            account_type=parsed_type,
            category=category.strip(),
        )

    def get_account(self, code: str) -> Optional[Account]:
        """Get account by code."""
        return self.db.get_account(code)

    def require_account(self, code: str) -> Account:
        """Get account by code or raise NotFoundError."""
        account = self.db.get_account(code)
        if account is None:
            raise NotFoundError(account_not_found(code))
        return account

    def list_accounts(self, types: Optional[Iterable[str | AccountType]] = None) -> list[Account]:
        """List accounts ordered by code, optionally filtered by type."""
        parsed = None if types is None else [parse_account_type(t) for t in types]
        return self.db.fetch_accounts(parsed)

    def initialize_default_chart(self) -> int:
        """Create the default chart entries that do not exist yet.

        Returns:
            Number of accounts created
        """
        created = 0
        for code, name, account_type, category in DEFAULT_CHART:
            if self.db.get_account(code) is not None:
                continue
            self.db.create_account(
                code=code, name=name, account_type=account_type, category=category
            )
            created += 1
        return created
