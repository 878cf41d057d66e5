from __future__ import annotations

from types import SimpleNamespace

import pytest

from invoice_hub import config
from invoice_hub.models.invoice import Invoice, LineItem, PaymentStatus
from invoice_hub.services import get_notes_service


class FakeModels:
    """Stands in for ``genai.Client().models``."""

    def __init__(self, text: object = None, error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.calls: list[dict] = []

    def generate_content(self, *, model: str, contents: str) -> SimpleNamespace:
        self.calls.append({"model": model, "contents": contents})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


class FakeClient:
    def __init__(self, text: object = None, error: Exception | None = None) -> None:
        self.models = FakeModels(text=text, error=error)

    @property
    def prompts(self) -> list[str]:
        return [call["contents"] for call in self.models.calls]


@pytest.fixture(autouse=True)
def no_credentials(monkeypatch):
    """Run every test without a Gemini key and with a fresh service cache."""
    monkeypatch.setattr(config, "GEMINI_API_KEY", None)
    get_notes_service.cache_clear()
    yield
    get_notes_service.cache_clear()


@pytest.fixture
def cash_sale_invoice() -> Invoice:
    return Invoice(
        invoice_number="INV-1001",
        customer_name="",
        date_issued="02/10/2026",
        due_date="01/11/2026",
        items=[
            LineItem(
                description="Mirror 1200x800",
                quantity=1,
                unit_price=150.00,
                total=150.00,
            )
        ],
        tax_rate=23,
        subtotal=150.00,
        tax_amount=34.50,
        total=184.50,
        balance_due=184.50,
        status=PaymentStatus.UNPAID,
    )


@pytest.fixture
def fake_client_factory():
    return FakeClient
