from __future__ import annotations

import base64
import json
from dataclasses import replace
from datetime import date
from types import SimpleNamespace

import pytest
from dash.exceptions import PreventUpdate

from invoice_hub import app as app_module
from invoice_hub.components import build_invoice_card
from invoice_hub.layout import build_layout
from invoice_hub.services import GeminiNotesService
from invoice_hub.services.notes_service import INVOICE_NOTES_FALLBACK, TRENDS_FALLBACK


def test_draft_notes_without_credentials(cash_sale_invoice) -> None:
    assert app_module.draft_text("notes", cash_sale_invoice) == INVOICE_NOTES_FALLBACK


def test_draft_reminder_uses_due_date_offset(
    monkeypatch, cash_sale_invoice, fake_client_factory
) -> None:
    client = fake_client_factory(text="Kind reminder.")
    monkeypatch.setattr(
        app_module, "get_notes_service", lambda: GeminiNotesService(client=client)
    )

    text = app_module.draft_text("reminder", cash_sale_invoice, today=date(2026, 11, 6))

    assert text == "Kind reminder."
    assert "Customer: Cash Sale." in client.prompts[0]
    assert "is OVERDUE by 5 days." in client.prompts[0]
    assert "Balance Due: €184.50." in client.prompts[0]


def test_draft_reminder_with_unparseable_due_date(
    monkeypatch, cash_sale_invoice, fake_client_factory
) -> None:
    client = fake_client_factory(text="Due today.")
    monkeypatch.setattr(
        app_module, "get_notes_service", lambda: GeminiNotesService(client=client)
    )
    invoice = replace(cash_sale_invoice, due_date="on receipt")

    app_module.draft_text("reminder", invoice)

    assert "is DUE TODAY." in client.prompts[0]


def test_draft_unknown_kind(cash_sale_invoice) -> None:
    with pytest.raises(ValueError, match="Unknown draft kind"):
        app_module.draft_text("poem", cash_sale_invoice)


def test_invoice_card_ids(cash_sale_invoice) -> None:
    card = build_invoice_card(cash_sale_invoice)

    assert card.id == "invoice-INV-1001"


def test_layout_has_download_target(cash_sale_invoice) -> None:
    layout = build_layout([cash_sale_invoice])

    assert layout.children[0].id == "download-file"


def _click(monkeypatch, button: str, index: str) -> None:
    trigger = {"type": button, "index": index}
    monkeypatch.setattr(app_module, "ctx", SimpleNamespace(triggered_id=trigger))


def test_download_callback_sends_clicked_invoice(monkeypatch) -> None:
    _click(monkeypatch, "download-button", "INV-1002")

    payload = app_module.download_pdf([None, 1, None])

    assert payload["filename"] == "INV-1002.pdf"
    assert base64.b64decode(payload["content"]).startswith(b"%PDF-")


def test_download_callback_ignores_initial_render(monkeypatch) -> None:
    _click(monkeypatch, "download-button", "INV-1002")

    with pytest.raises(PreventUpdate):
        app_module.download_pdf([None, None, None])


def test_preview_callback_shows_clicked_invoice(monkeypatch) -> None:
    _click(monkeypatch, "preview-button", "INV-1003")

    src, title, class_name = app_module.preview_pdf([None, None, 1])

    assert src.startswith("data:application/pdf;base64,")
    assert title == "Preview: INV-1003"
    assert class_name == "card preview-card"


def test_preview_callback_unknown_invoice(monkeypatch) -> None:
    _click(monkeypatch, "preview-button", "INV-9999")

    with pytest.raises(PreventUpdate):
        app_module.preview_pdf([1])


def test_draft_callback_routes_reminder_button(monkeypatch) -> None:
    _click(monkeypatch, "reminder-button", "INV-1001")

    text = app_module.draft_ai_text(None, 1)

    assert "Invoice INV-1001" in text


def test_trends_callback_without_credentials() -> None:
    assert app_module.analyze_trends(1) == TRENDS_FALLBACK


def test_trends_callback_sends_invoice_summary(monkeypatch, fake_client_factory) -> None:
    client = fake_client_factory(text="- Cash sales lead")
    monkeypatch.setattr(
        app_module, "get_notes_service", lambda: GeminiNotesService(client=client)
    )

    assert app_module.analyze_trends(1) == "- Cash sales lead"
    summary = json.loads(client.prompts[0].split("Data: ", 1)[1])
    assert summary["invoiceCount"] == 3
    assert summary["invoices"][0]["invoiceNumber"] == "INV-1001"
