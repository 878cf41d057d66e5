from __future__ import annotations

import json
from dataclasses import replace
from datetime import date

import pytest

from invoice_hub.data.demo_invoices import DEMO_INVOICES
from invoice_hub.models import (
    CASH_SALE,
    LineItem,
    PaymentStatus,
    deserialize_invoice,
    serialize_invoice,
    summarize_invoices,
)
from invoice_hub.utils import (
    days_until_due,
    format_amount,
    format_currency,
    format_symbol_amount,
    parse_date,
)


def test_display_customer_name(cash_sale_invoice) -> None:
    assert cash_sale_invoice.display_customer_name == CASH_SALE
    assert replace(cash_sale_invoice, customer_name="   ").display_customer_name == CASH_SALE
    assert replace(cash_sale_invoice, customer_name="Acme").display_customer_name == "Acme"


def test_is_paid(cash_sale_invoice) -> None:
    assert not cash_sale_invoice.is_paid
    assert replace(cash_sale_invoice, status=PaymentStatus.PAID).is_paid
    assert replace(cash_sale_invoice, balance_due=0).is_paid


def test_items_description(cash_sale_invoice) -> None:
    invoice = replace(
        cash_sale_invoice,
        items=[*cash_sale_invoice.items, LineItem("Fitting (hours)", 1.5, 40, 60)],
    )

    assert invoice.items_description() == "1 x Mirror 1200x800, 1.5 x Fitting (hours)"


def test_deserialize_camel_case_payload() -> None:
    payload = {
        "invoiceNumber": "INV-1001",
        "customerName": "",
        "dateIssued": "02/10/2026",
        "dueDate": "01/11/2026",
        "items": [
            {"description": "Mirror 1200x800", "quantity": 1, "unitPrice": 150, "total": 150}
        ],
        "taxRate": 23,
        "subtotal": 150,
        "taxAmount": 34.5,
        "total": 184.5,
        "balanceDue": 184.5,
        "status": "unpaid",
    }

    invoice = deserialize_invoice(payload)

    assert invoice.status is PaymentStatus.UNPAID
    assert invoice.items[0] == LineItem("Mirror 1200x800", 1.0, 150.0, 150.0)
    assert invoice.balance_due == 184.5
    assert serialize_invoice(invoice)["status"] == "UNPAID"


def test_deserialize_tolerates_missing_fields() -> None:
    invoice = deserialize_invoice({"invoiceNumber": "INV-2", "items": None, "total": None})

    assert invoice.invoice_number == "INV-2"
    assert invoice.customer_name == ""
    assert list(invoice.items) == []
    assert invoice.total == 0
    assert invoice.status is PaymentStatus.UNPAID


def test_deserialize_rejects_unknown_status() -> None:
    with pytest.raises(ValueError, match="Unknown payment status"):
        deserialize_invoice({"invoiceNumber": "INV-3", "status": "LOST"})


def test_serialize_is_json_compatible(cash_sale_invoice) -> None:
    data = json.loads(json.dumps(serialize_invoice(cash_sale_invoice)))

    assert data["invoiceNumber"] == "INV-1001"
    assert data["items"][0]["unitPrice"] == 150.0
    assert deserialize_invoice(data) == cash_sale_invoice


def test_summarize_invoices() -> None:
    summary = json.loads(summarize_invoices(DEMO_INVOICES))

    assert summary["invoiceCount"] == 3
    assert summary["statusCounts"] == {"PAID": 1, "PARTIAL": 1, "UNPAID": 1}
    assert summary["totalOutstanding"] == pytest.approx(184.50 + 327.73)
    assert summary["invoices"][0]["customer"] == CASH_SALE


@pytest.mark.parametrize(
    "value, expected",
    [
        ("01/11/2026", date(2026, 11, 1)),
        ("1/11/26", date(2026, 11, 1)),
        ("2026-11-01", date(2026, 11, 1)),
        ("", None),
        (None, None),
        ("next week", None),
    ],
)
def test_parse_date(value, expected) -> None:
    assert parse_date(value) == expected


def test_days_until_due() -> None:
    today = date(2026, 11, 1)

    assert days_until_due("27/10/2026", today) == -5
    assert days_until_due("01/11/2026", today) == 0
    assert days_until_due("08/11/2026", today) == 7
    assert days_until_due("soon", today) is None


def test_format_currency() -> None:
    assert format_currency(184.5) == "EUR 184.50"
    assert format_currency(1234.567) == "EUR 1234.57"


@pytest.mark.parametrize(
    "value, expected",
    [
        (6.125, "6.13"),
        (0.125, "0.13"),
        (1.005, "1.00"),
        (-6.125, "-6.13"),
        (23, "23.00"),
    ],
)
def test_format_amount_rounds_half_cents_up(value, expected) -> None:
    assert format_amount(value) == expected


def test_half_cent_balance_in_symbol_amount() -> None:
    assert format_symbol_amount(0.125) == "€0.13"
