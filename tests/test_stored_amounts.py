"""Tests for reports over debit/credit values that were written outside the app."""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import text


def _overwrite_line(temp_db, column, value, account_code):
    session = temp_db._get_session()
    session.execute(
        text(f"UPDATE accounting_entry_lines SET {column} = :value WHERE account_code = :code"),
        {"value": value, "code": account_code},
    )
    session.commit()


@pytest.fixture
def garbled_sale(temp_db, march_entries):
    """March entries with the sale's credit to 4100 overwritten by text."""
    _overwrite_line(temp_db, "credit", "abc", "4100")
    return march_entries


def test_income_statement_reads_text_as_zero(statement_service, garbled_sale):
    statement = statement_service.build_income_statement(date(2024, 3, 1), date(2024, 3, 31))

    assert statement.total_income == Decimal("0")
    assert statement.total_expenses == Decimal("200")
    assert statement.net_income == Decimal("-200")


def test_balance_sheet_reads_text_as_zero(statement_service, garbled_sale):
    sheet = statement_service.build_balance_sheet(date(2024, 3, 31))

    (current,) = sheet.assets
    assert [(acc.code, acc.balance) for acc in current.accounts] == [("1010", Decimal("300"))]
    assert sheet.total_assets == Decimal("300")


def test_ledger_reads_text_as_zero(ledger_service, garbled_sale):
    sales = ledger_service.get_account_ledger("4100", date(2024, 3, 1), date(2024, 3, 31))

    (row,) = sales.rows
    assert row.credit == Decimal("0")
    assert row.balanced is False
    assert sales.final_balance == Decimal("0")


def test_entry_list_flags_garbled_entry(journal_service, garbled_sale):
    listings = {l.entry.id: l for l in journal_service.list_entries()}

    sale = listings[garbled_sale["sale"]]
    assert sale.total_debit == Decimal("500")
    assert sale.total_credit == Decimal("0")
    assert sale.balanced is False
    assert listings[garbled_sale["rent"]].balanced is True


def test_report_commands_survive_text_amounts(cli_runner, temp_db, garbled_sale):
    from ledgerbook.cli.main import cli

    for command in ("income-statement", "balance-sheet", "ledger"):
        result = cli_runner.invoke(
            cli, ["--db-path", temp_db.database_path, "report", command, "--period", "all"]
        )
        assert result.exit_code == 0, result.output

    result = cli_runner.invoke(
        cli, ["--db-path", temp_db.database_path, "entry", "list", "--period", "all"]
    )
    assert result.exit_code == 0
    assert "UNBALANCED" in result.output


@pytest.mark.parametrize(
    "stored, expected",
    [
        ("250", Decimal("250.00")),
        (0.1, Decimal("0.10")),
        ("", Decimal("0.00")),
    ],
)
def test_numeric_text_and_floats_are_read_as_amounts(temp_db, march_entries, stored, expected):
    _overwrite_line(temp_db, "debit", stored, "6100")

    (line,) = [l for l in temp_db.fetch_lines([march_entries["rent"]]) if l.account_code == "6100"]
    assert line.debit == expected
