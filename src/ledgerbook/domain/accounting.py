"""Sign convention and reporting scope per account type.

Every report reads balances through this table. Debit-normal accounts
(asset, expense) keep debit minus credit as is; credit-normal accounts
(liability, equity, income) are negated so that a positive figure is always
growth in the account's expected direction.

Flow accounts only see entries inside the report period. Stock accounts see
every entry up to the period end.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from ledgerbook.domain.entities import AccountType


class ReportingScope(str, Enum):
    """How an account's lines are selected for a report."""

    FLOW = "flow"
    STOCK = "stock"


@dataclass(frozen=True)
class AccountBehavior:
    """Sign and scope facts for one account type."""

    sign: int
    scope: ReportingScope

    @property
    def debit_normal(self) -> bool:
        return self.sign > 0


ACCOUNT_BEHAVIOR: dict[AccountType, AccountBehavior] = {
    AccountType.ASSET: AccountBehavior(sign=1, scope=ReportingScope.STOCK),
    AccountType.EXPENSE: AccountBehavior(sign=1, scope=ReportingScope.FLOW),
    AccountType.LIABILITY: AccountBehavior(sign=-1, scope=ReportingScope.STOCK),
    AccountType.EQUITY: AccountBehavior(sign=-1, scope=ReportingScope.STOCK),
    AccountType.INCOME: AccountBehavior(sign=-1, scope=ReportingScope.FLOW),
}

FLOW_TYPES = tuple(t for t, b in ACCOUNT_BEHAVIOR.items() if b.scope is ReportingScope.FLOW)
STOCK_TYPES = tuple(t for t, b in ACCOUNT_BEHAVIOR.items() if b.scope is ReportingScope.STOCK)


def behavior_for(account_type: AccountType) -> AccountBehavior:
    """Look up sign and scope for an account type."""
    return ACCOUNT_BEHAVIOR[AccountType(account_type)]


def normalize_balance(account_type: AccountType, net_movement: Decimal) -> Decimal:
    """Convert raw debit-minus-credit movement to the normal-positive balance."""
    result = net_movement * behavior_for(account_type).sign
    # keep zero unsigned so -0 never shows up in output
    return result if result != 0 else abs(result)


def scope_for(account_type: AccountType) -> ReportingScope:
    """Return whether an account type is reported as flow or stock."""
    return behavior_for(account_type).scope


def is_stock(account_type: AccountType) -> bool:
    return scope_for(account_type) is ReportingScope.STOCK
