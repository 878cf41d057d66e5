from __future__ import annotations

import pytest

from invoice_hub import config, services
from invoice_hub.services import (
    DegradedReason,
    FallbackNotesService,
    GeminiNotesService,
    get_notes_service,
)
from invoice_hub.services import notes_service_gemini
from invoice_hub.services.notes_service import (
    INVOICE_NOTES_ERROR_FALLBACK,
    INVOICE_NOTES_FALLBACK,
    TRENDS_FALLBACK,
)
from invoice_hub.services.prompts import build_reminder_prompt, reminder_context


def _forbid_client(monkeypatch) -> None:
    def _boom(*args, **kwargs):
        raise AssertionError("genai.Client must not be created without credentials")

    monkeypatch.setattr(notes_service_gemini.genai, "Client", _boom)


def test_missing_credentials_selects_fallback_service(monkeypatch) -> None:
    _forbid_client(monkeypatch)

    service = get_notes_service()

    assert isinstance(service, FallbackNotesService)
    assert service.ai_available is False


def test_missing_credentials_returns_fallbacks_without_network(monkeypatch) -> None:
    _forbid_client(monkeypatch)

    assert services.generate_invoice_notes("Acme", "1 x Mirror") == INVOICE_NOTES_FALLBACK
    assert services.generate_reminder_message("Acme", "INV-7", 99.5, -3) == (
        "This is a reminder that a balance remains on Invoice INV-7. "
        "Please settle this at your earliest convenience."
    )
    assert services.generate_product_description("Bevelled Mirror") == ""
    assert services.analyze_invoice_trends("{}") == TRENDS_FALLBACK


def test_missing_credentials_results_are_marked_degraded() -> None:
    result = get_notes_service().generate_invoice_notes("Acme", "1 x Mirror")

    assert result.degraded
    assert result.reason is DegradedReason.NO_CREDENTIALS
    assert str(result) == INVOICE_NOTES_FALLBACK


def test_transport_failure_returns_failure_fallbacks(fake_client_factory) -> None:
    client = fake_client_factory(error=RuntimeError("connection reset"))
    service = GeminiNotesService(client=client)

    notes = service.generate_invoice_notes("Acme", "1 x Mirror")
    reminder = service.generate_reminder_message("Acme", "INV-7", 1234.5, 2)
    description = service.generate_product_description("Shower Screen")
    trends = service.analyze_invoice_trends("{}")

    assert notes.text == INVOICE_NOTES_ERROR_FALLBACK
    assert notes.text != INVOICE_NOTES_FALLBACK
    assert reminder.text == (
        "Reminder for Invoice INV-7: Outstanding balance of €1234.50 needs attention."
    )
    assert description.text == ""
    assert trends.text == TRENDS_FALLBACK
    assert all(
        r.reason is DegradedReason.REQUEST_FAILED
        for r in (notes, reminder, description, trends)
    )
    assert len(client.models.calls) == 4


@pytest.mark.parametrize("text", [None, "", 42])
def test_non_text_response_is_treated_as_failure(fake_client_factory, text) -> None:
    service = GeminiNotesService(client=fake_client_factory(text=text))

    result = service.generate_invoice_notes("Acme", "1 x Mirror")

    assert result.text == INVOICE_NOTES_ERROR_FALLBACK
    assert result.reason is DegradedReason.EMPTY_RESPONSE


def test_generated_text_is_returned_verbatim(fake_client_factory) -> None:
    generated = "  Thank you, Acme!\n\nPayment within 30 days.  "
    client = fake_client_factory(text=generated)
    service = GeminiNotesService(client=client, model="test-model")

    result = service.generate_invoice_notes("Acme", "2 x Mirror 600x900")

    assert result.text == generated
    assert not result.degraded
    assert result.reason is None
    assert client.models.calls[0]["model"] == "test-model"
    assert "Customer: Acme" in client.prompts[0]
    assert "Items ordered: 2 x Mirror 600x900" in client.prompts[0]
    assert "Length: 4-6 sentences" in client.prompts[0]


@pytest.mark.parametrize(
    "days, expected",
    [
        (-5, "is OVERDUE by 5 days. Be firm but professional."),
        (0, "is DUE TODAY. Be polite and remind them of the deadline."),
        (7, "is UPCOMING in 7 days. This is a proactive friendly reminder."),
    ],
)
def test_reminder_context_is_embedded_in_prompt(fake_client_factory, days, expected) -> None:
    client = fake_client_factory(text="Please pay.")
    service = GeminiNotesService(client=client)

    service.generate_reminder_message("Acme", "INV-9", 184.5, days)

    assert reminder_context(days) == expected
    assert f"Status: The payment {expected}" in client.prompts[0]


def test_reminder_prompt_formats_balance_with_euro_symbol() -> None:
    prompt = build_reminder_prompt("Acme", "INV-9", 184.5, 0)

    assert "Balance Due: €184.50." in prompt
    assert "Invoice: INV-9." in prompt
    assert "Max 3 sentences." in prompt


def test_product_description_prompt_limits_length(fake_client_factory) -> None:
    client = fake_client_factory(text="Crystal-clear elegance.")
    service = GeminiNotesService(client=client)

    assert service.generate_product_description("Round Mirror").text == "Crystal-clear elegance."
    assert "(max 20 words)" in client.prompts[0]
    assert '"Round Mirror"' in client.prompts[0]


def test_trends_prompt_includes_summary(fake_client_factory) -> None:
    client = fake_client_factory(text="- Sales up")
    service = GeminiNotesService(client=client)

    service.analyze_invoice_trends('{"invoiceCount": 3}')

    assert "3 bullet points" in client.prompts[0]
    assert client.prompts[0].endswith('Data: {"invoiceCount": 3}')


def test_credentials_select_gemini_service_with_timeout(monkeypatch) -> None:
    created: dict = {}

    def _client(**kwargs):
        created.update(kwargs)
        return object()

    monkeypatch.setattr(config, "GEMINI_API_KEY", "test-key")
    monkeypatch.setattr(config, "GEMINI_TIMEOUT_MS", 5000)
    monkeypatch.setattr(notes_service_gemini.genai, "Client", _client)

    service = get_notes_service()

    assert isinstance(service, GeminiNotesService)
    assert service.ai_available is True
    assert created["api_key"] == "test-key"
    assert created["http_options"].timeout == 5000


def test_service_is_cached() -> None:
    assert get_notes_service() is get_notes_service()


def test_unknown_service_kind_raises() -> None:
    with pytest.raises(ValueError, match="Unknown notes service kind"):
        get_notes_service("openai")
