"""
Invoice domain models and serialization helpers.

This module defines the invoice data structure shared by the PDF
renderer and the notes service. The hierarchy is flat:

    Invoice
    ├── identifiers and display dates (pre-formatted strings)
    ├── LineItem[] (description, quantity, unit price, line total)
    └── totals (subtotal, tax, total, balance due) and PaymentStatus

Totals are supplied by the caller and are never recomputed here.

Serialization functions convert between dataclasses and the camelCase
JSON dictionaries used by the rest of the invoicing application.
"""

from collections import Counter
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence

from benedict import benedict

from invoice_hub.lib import objects

CASH_SALE = "Cash Sale"


class PaymentStatus(str, Enum):
    """Payment state of an invoice."""

    PAID = "PAID"
    PARTIAL = "PARTIAL"
    UNPAID = "UNPAID"
    OVERDUE = "OVERDUE"

    @classmethod
    def parse(cls, value: "str | PaymentStatus | None") -> "PaymentStatus":
        """
        Convert a raw status value into a PaymentStatus.

        Missing values are treated as UNPAID.

        Raises:
            ValueError: If the value is not a known status.
        """
        if isinstance(value, cls):
            return value
        if not value:
            return cls.UNPAID
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            raise ValueError(f"Unknown payment status: {value}") from exc


@dataclass(slots=True)
class LineItem:
    """Represents an individual line item on the invoice."""

    description: str
    quantity: float
    unit_price: float
    total: float

    def formatted_quantity(self) -> str:
        """Return the quantity without a trailing '.0' for whole numbers."""
        if float(self.quantity).is_integer():
            return str(int(self.quantity))
        return str(self.quantity)


@dataclass(slots=True)
class Invoice:
    """Primary dataclass for invoices."""

    invoice_number: str
    customer_name: str
    date_issued: str
    due_date: str
    items: Sequence[LineItem]
    tax_rate: float
    subtotal: float
    tax_amount: float
    total: float
    balance_due: float
    status: PaymentStatus = PaymentStatus.UNPAID

    @property
    def is_paid(self) -> bool:
        """Return True when the invoice is marked paid or nothing is owed."""
        return self.status == PaymentStatus.PAID or self.balance_due == 0

    @property
    def display_customer_name(self) -> str:
        """Return the customer name, or the cash sale label when blank."""
        return self.customer_name.strip() or CASH_SALE

    def items_description(self) -> str:
        """Return a one-line summary of the ordered items."""
        return ", ".join(
            f"{item.formatted_quantity()} x {item.description}" for item in self.items
        )


def serialize_invoice(invoice: Invoice) -> dict:
    """Convert an Invoice dataclass into a JSON serializable dictionary."""
    return {
        "invoiceNumber": invoice.invoice_number,
        "customerName": invoice.customer_name,
        "dateIssued": invoice.date_issued,
        "dueDate": invoice.due_date,
        "items": [
            {
                "description": item.description,
                "quantity": item.quantity,
                "unitPrice": item.unit_price,
                "total": item.total,
            }
            for item in invoice.items
        ],
        "taxRate": invoice.tax_rate,
        "subtotal": invoice.subtotal,
        "taxAmount": invoice.tax_amount,
        "total": invoice.total,
        "balanceDue": invoice.balance_due,
        "status": invoice.status.value,
    }


def deserialize_invoice(payload: Mapping[str, Any]) -> Invoice:
    """
    Convert a camelCase dictionary back into an Invoice dataclass.

    Uses benedict for safe key access so that missing or null values
    fall back to empty strings and zeros instead of raising KeyError.

    Raises:
        ValueError: If the status is not a known PaymentStatus.
    """
    b = benedict(dict(payload), keyattr_dynamic=True)
    items = [
        LineItem(
            description=li.get("description") or "",
            quantity=float(li.get("quantity") or 0),
            unit_price=float(li.get("unitPrice") or 0),
            total=float(li.get("total") or 0),
        )
        for li in b.get("items") or []
    ]
    return Invoice(
        invoice_number=b.get("invoiceNumber") or "",
        customer_name=b.get("customerName") or "",
        date_issued=b.get("dateIssued") or "",
        due_date=b.get("dueDate") or "",
        items=items,
        tax_rate=float(b.get("taxRate") or 0),
        subtotal=float(b.get("subtotal") or 0),
        tax_amount=float(b.get("taxAmount") or 0),
        total=float(b.get("total") or 0),
        balance_due=float(b.get("balanceDue") or 0),
        status=PaymentStatus.parse(b.get("status")),
    )


def summarize_invoices(invoices: Sequence[Invoice]) -> str:
    """
    Build the compact JSON summary sent for trend analysis.

    Args:
        invoices: Invoices to summarize.

    Returns:
        JSON string with aggregate totals and a per-invoice digest.
    """
    status_counts = Counter(invoice.status.value for invoice in invoices)
    summary = {
        "invoiceCount": len(invoices),
        "totalInvoiced": round(sum(invoice.total for invoice in invoices), 2),
        "totalOutstanding": round(sum(invoice.balance_due for invoice in invoices), 2),
        "statusCounts": dict(sorted(status_counts.items())),
        "invoices": [
            {
                "invoiceNumber": invoice.invoice_number,
                "customer": invoice.display_customer_name,
                "dateIssued": invoice.date_issued,
                "dueDate": invoice.due_date,
                "total": invoice.total,
                "balanceDue": invoice.balance_due,
                "status": invoice.status.value,
            }
            for invoice in invoices
        ],
    }
    return objects.to_json(summary)
