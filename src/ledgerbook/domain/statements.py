"""Financial statement domain service.

The income statement is a flow report: only entries dated inside the period
count. The balance sheet is a stock report: every entry up to the as-of date
counts, whatever the period start.
"""

import logging
from datetime import date
from decimal import Decimal
from typing import Iterable, Mapping, Optional, Sequence

from ledgerbook.database.base import Database
from ledgerbook.domain.accounting import FLOW_TYPES, STOCK_TYPES, normalize_balance
from ledgerbook.domain.balances import BALANCE_TOLERANCE, accumulate
from ledgerbook.domain.entities import (
    Account,
    AccountBalance,
    AccountType,
    BalanceSheet,
    CategoryGroup,
    IncomeStatement,
)
from ledgerbook.utils.amount_parser import ZERO

LOGGER = logging.getLogger(__name__)


def account_balances(
    accounts: Iterable[Account],
    movements: Mapping[str, Decimal],
    account_type: AccountType,
) -> list[AccountBalance]:
    """Normalized non-zero balances for accounts of one type, in input order."""
    balances = []
    for account in accounts:
        if account.account_type != account_type:
            continue
        balance = normalize_balance(account_type, movements.get(account.code, ZERO))
        if balance == 0:
            continue
        balances.append(
            AccountBalance(
                code=account.code,
                name=account.name,
                category=account.category,
                balance=balance,
            )
        )
    return balances


def group_by_category(balances: Iterable[AccountBalance]) -> dict[str, list[AccountBalance]]:
    """Group balances by category label, keeping first-seen category order."""
    grouped: dict[str, list[AccountBalance]] = {}
    for balance in balances:
        grouped.setdefault(balance.category, []).append(balance)
    return grouped


def build_category_groups(
    accounts: Sequence[Account],
    movements: Mapping[str, Decimal],
    account_type: AccountType,
) -> tuple[CategoryGroup, ...]:
    """Build category groups with subtotals for one account type."""
    grouped = group_by_category(account_balances(accounts, movements, account_type))
    return tuple(
        CategoryGroup(
            category=category,
            accounts=tuple(members),
            subtotal=sum((m.balance for m in members), ZERO),
        )
        for category, members in grouped.items()
    )


def _total(groups: Iterable[CategoryGroup]) -> Decimal:
    return sum((group.subtotal for group in groups), ZERO)


def compose_income_statement(
    accounts: Sequence[Account],
    movements: Mapping[str, Decimal],
    start_date: Optional[date] = None,
    end_date: Optional[date] = None,
    business_id: Optional[int] = None,
) -> IncomeStatement:
    """Compose an income statement from period-bounded net movements."""
    income = build_category_groups(accounts, movements, AccountType.INCOME)
    expenses = build_category_groups(accounts, movements, AccountType.EXPENSE)
    total_income = _total(income)
    total_expenses = _total(expenses)
    return IncomeStatement(
        start_date=start_date,
        end_date=end_date,
        business_id=business_id,
        income=income,
        expenses=expenses,
        total_income=total_income,
        total_expenses=total_expenses,
        net_income=total_income - total_expenses,
    )


def compose_balance_sheet(
    accounts: Sequence[Account],
    movements: Mapping[str, Decimal],
    as_of: Optional[date] = None,
    business_id: Optional[int] = None,
) -> BalanceSheet:
    """Compose a balance sheet from cumulative net movements."""
    assets = build_category_groups(accounts, movements, AccountType.ASSET)
    liabilities = build_category_groups(accounts, movements, AccountType.LIABILITY)
    equity = build_category_groups(accounts, movements, AccountType.EQUITY)
    total_assets = _total(assets)
    total_liabilities = _total(liabilities)
    total_equity = _total(equity)
    total_liabilities_and_equity = total_liabilities + total_equity
    return BalanceSheet(
        as_of=as_of,
        business_id=business_id,
        assets=assets,
        liabilities=liabilities,
        equity=equity,
        total_assets=total_assets,
        total_liabilities=total_liabilities,
        total_equity=total_equity,
        total_liabilities_and_equity=total_liabilities_and_equity,
        balanced=abs(total_assets - total_liabilities_and_equity) < BALANCE_TOLERANCE,
    )


class StatementService:
    """Service for building the income statement and balance sheet."""

    def __init__(self, db: Database):
        """Initialize statement service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_net_movements(
        self,
        business_id: Optional[int] = None,
        date_from: Optional[date] = None,
        date_to: Optional[date] = None,
    ) -> dict[str, Decimal]:
        """Fetch entries in scope and accumulate their lines per account."""
        entries = self.db.fetch_entries(
            business_id=business_id, date_from=date_from, date_to=date_to
        )
        if not entries:
            return {}
        entry_ids = [entry.id for entry in entries]
        lines = self.db.fetch_lines(entry_ids)
        return accumulate(lines, entry_ids)

    def build_income_statement(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        business_id: Optional[int] = None,
    ) -> IncomeStatement:
        """Build the income statement for a period.

        Args:
            start_date: Optional inclusive period start
            end_date: Optional inclusive period end
            business_id: Optional business filter

        Returns:
            IncomeStatement report

        Raises:
            FetchError: If the data store cannot be queried
        """
        LOGGER.debug(
            "Building income statement %s..%s business=%s", start_date, end_date, business_id
        )
        accounts = self.db.fetch_accounts(FLOW_TYPES)
        movements = self.get_net_movements(business_id, start_date, end_date)
        return compose_income_statement(
            accounts,
            movements,
            start_date=start_date,
            end_date=end_date,
            business_id=business_id,
        )

    def build_balance_sheet(
        self,
        end_date: Optional[date] = None,
        business_id: Optional[int] = None,
    ) -> BalanceSheet:
        """Build the balance sheet as of a date.

        Args:
            end_date: Optional as-of date; all history when None
            business_id: Optional business filter

        Returns:
            BalanceSheet report

        Raises:
            FetchError: If the data store cannot be queried
        """
        LOGGER.debug("Building balance sheet as of %s business=%s", end_date, business_id)
        accounts = self.db.fetch_accounts(STOCK_TYPES)
        movements = self.get_net_movements(business_id, None, end_date)
        sheet = compose_balance_sheet(
            accounts, movements, as_of=end_date, business_id=business_id
        )
        if not sheet.balanced:
            LOGGER.warning(
                "Balance sheet as of %s does not balance: assets %s vs liabilities+equity %s",
                end_date,
                sheet.total_assets,
                sheet.total_liabilities_and_equity,
            )
        return sheet
