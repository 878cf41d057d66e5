"""
Data models and serialization helpers for Invoice Hub.

This package provides:
- Invoice domain models (Invoice, LineItem, PaymentStatus)
- Serialization/deserialization for the camelCase JSON representation
- Invoice summaries for trend analysis

All models use Python dataclasses for type safety and IDE support.
"""

from invoice_hub.models.invoice import (
    CASH_SALE,
    Invoice,
    LineItem,
    PaymentStatus,
    deserialize_invoice,
    serialize_invoice,
    summarize_invoices,
)

__all__ = [
    "CASH_SALE",
    "Invoice",
    "LineItem",
    "PaymentStatus",
    "deserialize_invoice",
    "serialize_invoice",
    "summarize_invoices",
]
