"""Shared pytest fixtures for ledgerbook tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from ledgerbook.database.factories import create_sqlite_database
from ledgerbook.domain.business import BusinessService
from ledgerbook.domain.chart import ChartOfAccountsService
from ledgerbook.domain.invoice import InvoiceService
from ledgerbook.domain.journal import JournalService
from ledgerbook.domain.ledger import GeneralLedgerService
from ledgerbook.domain.statements import StatementService
from ledgerbook.domain.transaction import TransactionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def business_service(temp_db):
    """Create a BusinessService with a temporary database."""
    return BusinessService(temp_db)


@pytest.fixture
def chart_service(temp_db):
    """Create a ChartOfAccountsService with a temporary database."""
    return ChartOfAccountsService(temp_db)


@pytest.fixture
def journal_service(temp_db):
    """Create a JournalService with a temporary database."""
    return JournalService(temp_db)


@pytest.fixture
def invoice_service(temp_db):
    """Create an InvoiceService with a temporary database."""
    return InvoiceService(temp_db)


@pytest.fixture
def transaction_service(temp_db):
    """Create a TransactionService with a temporary database."""
    return TransactionService(temp_db)


@pytest.fixture
def ledger_service(temp_db):
    """Create a GeneralLedgerService with a temporary database."""
    return GeneralLedgerService(temp_db)


@pytest.fixture
def statement_service(temp_db):
    """Create a StatementService with a temporary database."""
    return StatementService(temp_db)


@pytest.fixture
def sample_business(business_service):
    """Create a sample business for testing."""
    business_id = business_service.create_business(name="Corner Bakery", tax_id="20111111111")
    return business_service.get_business(business_id)


@pytest.fixture
def other_business(business_service):
    """Create a second business for scoping tests."""
    business_id = business_service.create_business(name="Harbor Cafe")
    return business_service.get_business(business_id)


@pytest.fixture
def sample_chart(chart_service):
    """Seed the default chart of accounts."""
    chart_service.initialize_default_chart()
    return {acc.code: acc for acc in chart_service.list_accounts()}


@pytest.fixture
def march_entries(journal_service, sample_business, sample_chart):
    """Two March 2024 entries: a cash sale of 500 and rent of 200 paid in cash."""
    sale_id = journal_service.record_entry(
        date=date(2024, 3, 15),
        business_id=sample_business.id,
        description="Cash sale",
        lines=[
            ("1010", Decimal("500.00"), Decimal("0")),
            ("4100", Decimal("0"), Decimal("500.00")),
        ],
    )
    rent_id = journal_service.record_entry(
        date=date(2024, 3, 20),
        business_id=sample_business.id,
        description="March rent",
        lines=[
            ("6100", Decimal("200.00"), Decimal("0")),
            ("1010", Decimal("0"), Decimal("200.00")),
        ],
    )
    return {"sale": sale_id, "rent": rent_id}


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
