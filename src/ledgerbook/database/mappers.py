"""Mapper functions to convert SQLAlchemy models into domain entities.

ORM rows never leave the database package; everything above it works on
the frozen domain dataclasses.
"""

from ledgerbook.domain import entities as domain
from ledgerbook.database.models import (
    Business as ORMBusiness,
    ChartAccount as ORMChartAccount,
    AccountingEntry as ORMAccountingEntry,
    AccountingEntryLine as ORMAccountingEntryLine,
    Invoice as ORMInvoice,
    Transaction as ORMTransaction,
    TransactionCategory as ORMTransactionCategory,
)


def business_to_domain(orm_business: ORMBusiness) -> domain.Business:
    """Convert SQLAlchemy Business model to domain Business entity."""
    return domain.Business(
        id=orm_business.id,
        name=orm_business.name,
        tax_id=orm_business.tax_id,
        created_at=orm_business.created_at,
    )


def account_to_domain(orm_account: ORMChartAccount) -> domain.Account:
    """Convert SQLAlchemy ChartAccount model to domain Account entity."""
    return domain.Account(
        code=orm_account.code,
        name=orm_account.name,
        account_type=domain.AccountType(orm_account.account_type),
        category=orm_account.category,
    )


def entry_to_domain(orm_entry: ORMAccountingEntry) -> domain.JournalEntry:
    """Convert SQLAlchemy AccountingEntry model to domain JournalEntry header."""
    return domain.JournalEntry(
        id=orm_entry.id,
        date=orm_entry.date,
        business_id=orm_entry.business_id,
        description=orm_entry.description or "",
        transaction_id=orm_entry.transaction_id,
    )


def line_to_domain(orm_line: ORMAccountingEntryLine) -> domain.JournalLine:
    """Convert SQLAlchemy AccountingEntryLine model to domain JournalLine entity.

    Amounts are passed through untouched, NULL included.
    """
    return domain.JournalLine(
        id=orm_line.id,
        entry_id=orm_line.entry_id,
        account_code=orm_line.account_code,
        debit=orm_line.debit,
        credit=orm_line.credit,
    )


def invoice_to_domain(orm_invoice: ORMInvoice) -> domain.Invoice:
    """Convert SQLAlchemy Invoice model to domain Invoice entity."""
    return domain.Invoice(
        id=orm_invoice.id,
        business_id=orm_invoice.business_id,
        date=orm_invoice.date,
        invoice_number=orm_invoice.invoice_number,
        invoice_type=domain.InvoiceType(orm_invoice.invoice_type),
        client_supplier=orm_invoice.client_supplier,
        tax_id=orm_invoice.tax_id,
        subtotal=orm_invoice.subtotal,
        tax=orm_invoice.tax,
        total=orm_invoice.total,
        created_at=orm_invoice.created_at,
    )


def transaction_category_to_domain(
    orm_category: ORMTransactionCategory,
) -> domain.TransactionCategory:
    """Convert SQLAlchemy TransactionCategory model to domain entity."""
    return domain.TransactionCategory(
        id=orm_category.id,
        name=orm_category.name,
        transaction_type=domain.TransactionType(orm_category.type),
    )


def transaction_to_domain(orm_transaction: ORMTransaction) -> domain.Transaction:
    """Convert SQLAlchemy Transaction model, with its category, to domain Transaction."""
    category = None
    if orm_transaction.category is not None:
        category = transaction_category_to_domain(orm_transaction.category)
    return domain.Transaction(
        id=orm_transaction.id,
        business_id=orm_transaction.business_id,
        date=orm_transaction.date,
        amount=orm_transaction.amount,
        description=orm_transaction.description or "",
        category=category,
        created_at=orm_transaction.created_at,
    )
