"""Tests for the sign convention and reporting scope table."""

from decimal import Decimal

import pytest

from ledgerbook.domain.accounting import (
    ACCOUNT_BEHAVIOR,
    FLOW_TYPES,
    STOCK_TYPES,
    ReportingScope,
    behavior_for,
    is_stock,
    normalize_balance,
    scope_for,
)
from ledgerbook.domain.entities import AccountType


def test_every_account_type_has_behavior():
    assert set(ACCOUNT_BEHAVIOR) == set(AccountType)


@pytest.mark.parametrize(
    "account_type, scope",
    [
        (AccountType.ASSET, ReportingScope.STOCK),
        (AccountType.LIABILITY, ReportingScope.STOCK),
        (AccountType.EQUITY, ReportingScope.STOCK),
        (AccountType.INCOME, ReportingScope.FLOW),
        (AccountType.EXPENSE, ReportingScope.FLOW),
    ],
)
def test_scope_per_type(account_type, scope):
    assert scope_for(account_type) is scope
    assert is_stock(account_type) == (scope is ReportingScope.STOCK)


def test_flow_and_stock_partition():
    assert set(FLOW_TYPES) == {AccountType.INCOME, AccountType.EXPENSE}
    assert set(STOCK_TYPES) == {AccountType.ASSET, AccountType.LIABILITY, AccountType.EQUITY}


def test_asset_debit_balance_is_positive():
    assert normalize_balance(AccountType.ASSET, Decimal("100")) == Decimal("100")


def test_liability_credit_balance_is_positive():
    assert normalize_balance(AccountType.LIABILITY, Decimal("-100")) == Decimal("100")


@pytest.mark.parametrize(
    "account_type, raw, expected",
    [
        (AccountType.EXPENSE, Decimal("40"), Decimal("40")),
        (AccountType.INCOME, Decimal("-500"), Decimal("500")),
        (AccountType.EQUITY, Decimal("-1000"), Decimal("1000")),
        (AccountType.INCOME, Decimal("25"), Decimal("-25")),
        (AccountType.ASSET, Decimal("-10"), Decimal("-10")),
    ],
)
def test_normalize_balance(account_type, raw, expected):
    assert normalize_balance(account_type, raw) == expected


def test_normalize_zero_is_unsigned():
    result = normalize_balance(AccountType.INCOME, Decimal("0.00"))
    assert result == 0
    assert not result.is_signed()


def test_behavior_accepts_type_values():
    assert behavior_for("income").sign == -1
    assert behavior_for(AccountType.ASSET).debit_normal
