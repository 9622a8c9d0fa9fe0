"""SQLAlchemy models for ledgerbook database."""

from datetime import datetime, UTC
from decimal import Decimal
from sqlalchemy import (
    Column,
    Integer,
    String,
    ForeignKey,
    DateTime,
    Date,
    Numeric,
    UniqueConstraint,
    create_engine,
)
from sqlalchemy.orm import declarative_base, relationship, sessionmaker, Session
from sqlalchemy.types import TypeDecorator

from ledgerbook.utils.amount_parser import to_amount

Base = declarative_base()

CENTS = Decimal("0.01")


class LineAmount(TypeDecorator):
    """Debit/credit column that reads whatever the store holds.

    Values come back raw from the driver (``asdecimal=False`` skips the
    Decimal result processor) and are coerced through ``to_amount``, so a
    non-numeric value reads as zero instead of failing the whole query.
    NULL stays None.
    """

    impl = Numeric(14, 2, asdecimal=False)
    cache_ok = True

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        return to_amount(value).quantize(CENTS)


class Business(Base):
    """Business model."""

    __tablename__ = "businesses"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    tax_id = Column(String, nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    entries = relationship("AccountingEntry", back_populates="business")
    invoices = relationship("Invoice", back_populates="business")
    transactions = relationship("Transaction", back_populates="business")


class ChartAccount(Base):
    """Chart of accounts model."""

    __tablename__ = "chart_of_accounts"

    code = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    account_type = Column(String, nullable=False)
    category = Column(String, nullable=False)


class AccountingEntry(Base):
    """Journal entry header model."""

    __tablename__ = "accounting_entries"

    id = Column(Integer, primary_key=True)
    date = Column(Date, nullable=False, index=True)
    business_id = Column(Integer, ForeignKey("businesses.id"), nullable=False)
    description = Column(String, nullable=False, default="")
    transaction_id = Column(String, nullable=True, index=True)

    # Relationships
    business = relationship("Business", back_populates="entries")
    lines = relationship(
        "AccountingEntryLine", back_populates="entry", cascade="all, delete-orphan"
    )


class AccountingEntryLine(Base):
    """Journal entry line model.

    Debit and credit are nullable; readers treat NULL as zero.
    """

    __tablename__ = "accounting_entry_lines"

    id = Column(Integer, primary_key=True)
    entry_id = Column(Integer, ForeignKey("accounting_entries.id"), nullable=False, index=True)
    account_code = Column(String, ForeignKey("chart_of_accounts.code"), nullable=False)
    debit = Column(LineAmount, nullable=True)
    credit = Column(LineAmount, nullable=True)

    # Relationships
    entry = relationship("AccountingEntry", back_populates="lines")


class Invoice(Base):
    """Invoice model."""

    __tablename__ = "invoices"

    id = Column(Integer, primary_key=True)
    business_id = Column(Integer, ForeignKey("businesses.id"), nullable=False)
    date = Column(Date, nullable=False)
    invoice_number = Column(String, nullable=False)
    invoice_type = Column(String, nullable=False)
    client_supplier = Column(String, nullable=False)
    tax_id = Column(String, nullable=True)
    subtotal = Column(Numeric(14, 2), nullable=False)
    tax = Column(Numeric(14, 2), nullable=False)
    total = Column(Numeric(14, 2), nullable=False)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (
        UniqueConstraint("business_id", "invoice_number", name="uq_business_invoice_number"),
    )

    # Relationships
    business = relationship("Business", back_populates="invoices")


class TransactionCategory(Base):
    """Transaction category model."""

    __tablename__ = "transaction_categories"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    type = Column(String, nullable=False)

    # Relationships
    transactions = relationship("Transaction", back_populates="category")


class Transaction(Base):
    """Categorized business transaction model."""

    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True)
    business_id = Column(Integer, ForeignKey("businesses.id"), nullable=False, index=True)
    date = Column(Date, nullable=False, index=True)
    amount = Column(Numeric(14, 2), nullable=False)
    description = Column(String, nullable=False, default="")
    category_id = Column(Integer, ForeignKey("transaction_categories.id"), nullable=True)
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    # Relationships
    business = relationship("Business", back_populates="transactions")
    category = relationship("TransactionCategory", back_populates="transactions")


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
