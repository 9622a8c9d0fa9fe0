"""Invoice domain service."""

import logging
from datetime import date
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import Invoice, InvoiceType
from ledgerbook.domain.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
    business_not_found,
    duplicate_invoice_number,
    invoice_already_posted,
    invoice_not_found,
)
from ledgerbook.domain.journal import JournalService

LOGGER = logging.getLogger(__name__)

DEFAULT_TAX_RATE = Decimal("0.18")
CENTS = Decimal("0.01")

# Account codes used when posting invoices, matching the default chart
SALE_ACCOUNTS = {"receivable": "1200", "revenue": "4100", "tax": "2200"}
PURCHASE_ACCOUNTS = {"payable": "2100", "expense": "5100", "tax": "1400"}


def invoice_transaction_id(invoice_id: int) -> str:
    """Back-reference stored on the journal entry of a posted invoice."""
    return f"invoice:{invoice_id}"


def compute_tax(subtotal: Decimal, rate: Decimal = DEFAULT_TAX_RATE) -> Decimal:
    """Tax on a subtotal, rounded half-up to cents."""
    return (subtotal * rate).quantize(CENTS, rounding=ROUND_HALF_UP)


class InvoiceService:
    """Service for recording, listing and posting invoices."""

    def __init__(self, db: Database):
        """Initialize invoice service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_invoice(
        self,
        business_id: int,
        date: date,
        invoice_number: str,
        invoice_type: InvoiceType | str,
        client_supplier: str,
        subtotal: Decimal,
        tax: Optional[Decimal] = None,
        tax_rate: Decimal = DEFAULT_TAX_RATE,
        tax_id: Optional[str] = None,
    ) -> int:
        """Record an invoice.

        Args:
            business_id: Issuing or receiving business
            date: Invoice date
            invoice_number: Number, unique within the business
            invoice_type: sale or purchase
            client_supplier: Counterparty name
            subtotal: Amount before tax
            tax: Explicit tax amount; computed from tax_rate when None
            tax_rate: Rate used when tax is not given
            tax_id: Counterparty tax identification number

        Returns:
            Invoice ID

        Raises:
            ValidationError: If amounts or fields are invalid
            NotFoundError: If the business does not exist
            ConflictError: If the invoice number is already used
        """
        try:
            parsed_type = InvoiceType(invoice_type)
        except ValueError:
            raise ValidationError(
                f"Unknown invoice type '{invoice_type}'. Expected 'sale' or 'purchase'"
            )
        invoice_number = invoice_number.strip()
        if not invoice_number:
            raise ValidationError("Invoice number must not be empty")
        if not client_supplier.strip():
            raise ValidationError("Client or supplier name must not be empty")
        if subtotal < 0:
            raise ValidationError("Invoice subtotal must not be negative")
        if tax is None:
            tax = compute_tax(subtotal, tax_rate)
        if tax < 0:
            raise ValidationError("Invoice tax must not be negative")

        if self.db.get_business(business_id) is None:
            raise NotFoundError(business_not_found(business_id))
        if self.db.invoice_exists(business_id, invoice_number):
            raise ConflictError(duplicate_invoice_number(invoice_number, business_id))

        return self.db.create_invoice(
            business_id=business_id,
            date=date,
            invoice_number=invoice_number,
            invoice_type=parsed_type,
            client_supplier=client_supplier.strip(),
            subtotal=subtotal,
            tax=tax,
            total=subtotal + tax,
            tax_id=tax_id,
        )

    def get_invoice(self, invoice_id: int) -> Optional[Invoice]:
        """Get invoice by ID."""
        return self.db.get_invoice(invoice_id)

    def list_invoices(
        self,
        business_id: Optional[int] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        invoice_type: Optional[InvoiceType | str] = None,
    ) -> list[Invoice]:
        """List invoices newest first."""
        parsed_type = None if invoice_type is None else InvoiceType(invoice_type)
        return self.db.list_invoices(
            business_id=business_id,
            start_date=start_date,
            end_date=end_date,
            invoice_type=parsed_type,
        )

    def post_invoice(self, invoice_id: int) -> int:
        """Record the journal entry for an invoice.

        A sale debits receivables for the total and credits sales and taxes
        payable. A purchase debits purchases and tax credit and credits
        payables for the total.

        Returns:
            Entry ID

        Raises:
            NotFoundError: If the invoice or a posting account does not exist
            ConflictError: If the invoice was already posted
        """
        invoice = self.db.get_invoice(invoice_id)
        if invoice is None:
            raise NotFoundError(invoice_not_found(invoice_id))

        transaction_id = invoice_transaction_id(invoice_id)
        existing = self.db.find_entry_by_transaction(transaction_id)
        if existing is not None:
            raise ConflictError(invoice_already_posted(invoice_id, existing.id))

        if invoice.invoice_type is InvoiceType.SALE:
            accounts = SALE_ACCOUNTS
            lines = [
                (accounts["receivable"], invoice.total, Decimal("0")),
                (accounts["revenue"], Decimal("0"), invoice.subtotal),
                (accounts["tax"], Decimal("0"), invoice.tax),
            ]
            description = f"Sale invoice {invoice.invoice_number} - {invoice.client_supplier}"
        else:
            accounts = PURCHASE_ACCOUNTS
            lines = [
                (accounts["expense"], invoice.subtotal, Decimal("0")),
                (accounts["tax"], invoice.tax, Decimal("0")),
                (accounts["payable"], Decimal("0"), invoice.total),
            ]
            description = f"Purchase invoice {invoice.invoice_number} - {invoice.client_supplier}"

        # Zero-tax invoices have no tax line
        lines = [line for line in lines if line[1] or line[2]]

        entry_id = JournalService(self.db).record_entry(
            date=invoice.date,
            business_id=invoice.business_id,
            description=description,
            lines=lines,
            transaction_id=transaction_id,
        )
        LOGGER.debug("Posted invoice %s as entry %s", invoice_id, entry_id)
        return entry_id
