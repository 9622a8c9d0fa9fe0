"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class FetchError(DomainError):
    """The data store could not answer a report query.

    A report that hits this error is abandoned as a whole; no partial
    statement is returned.
    """


def business_not_found(business_id: int) -> str:
    """Return message for missing business."""
    return f"Business {business_id} not found"


def account_not_found(code: str) -> str:
    """Return message for missing chart of accounts entry."""
    return f"Account '{code}' not found in chart of accounts"


def invoice_not_found(invoice_id: int) -> str:
    """Return message for missing invoice."""
    return f"Invoice {invoice_id} not found"


def duplicate_account_code(code: str) -> str:
    """Return message for duplicate account code."""
    return f"Account with code '{code}' already exists"


def duplicate_invoice_number(invoice_number: str, business_id: int) -> str:
    """Return message for duplicate invoice number within a business."""
    return f"Invoice '{invoice_number}' already exists for business {business_id}"


def invoice_already_posted(invoice_id: int, entry_id: int) -> str:
    """Return message when an invoice already has a journal entry."""
    return f"Invoice {invoice_id} is already posted as entry {entry_id}"


def transaction_not_found(transaction_id: int) -> str:
    """Return message for missing transaction."""
    return f"Transaction {transaction_id} not found"


def transaction_category_not_found(category: str | int) -> str:
    """Return message for missing transaction category."""
    return f"Transaction category '{category}' not found"
