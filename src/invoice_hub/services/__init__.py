"""
Service factory for AI-drafted invoice text.

This module provides the get_notes_service() factory function that returns
the appropriate NotesService implementation based on configuration, and
string-returning convenience wrappers for each operation.

Available Implementations:
- gemini: Google Gemini text generation (requires GEMINI_API_KEY or API_KEY)
- fallback: Static text only, never touches the network

The service is cached at the module level, so the same instance is reused
across all requests. Without an explicit kind, the credential resolved at
startup picks the implementation.
"""

from functools import cache
from typing import Callable, Dict

from invoice_hub import config
from invoice_hub.lib import logs
from invoice_hub.services.notes_service import (
    DegradedReason,
    NoteResult,
    NotesService,
)
from invoice_hub.services.notes_service_fallback import FallbackNotesService
from invoice_hub.services.notes_service_gemini import GeminiNotesService

LOG = logs.logger(__file__)

_SERVICE_REGISTRY: Dict[str, Callable[[], NotesService]] = {
    "gemini": lambda: GeminiNotesService(),
    "fallback": lambda: FallbackNotesService(),
}


@cache
def get_notes_service(kind: str | None = None) -> NotesService:
    """Return the configured notes service implementation."""
    default_kind = "gemini" if config.GEMINI_API_KEY else "fallback"
    resolved_kind = (kind or default_kind).lower()
    LOG.info("get_notes_service - kind:%s resolved_kind:%s", kind, resolved_kind)
    try:
        factory = _SERVICE_REGISTRY[resolved_kind]
    except KeyError as exc:
        msg = f"Unknown notes service kind: {resolved_kind}"
        raise ValueError(msg) from exc
    return factory()


def generate_invoice_notes(customer_name: str, items_description: str) -> str:
    """Return invoice notes text, generated or fallback."""
    return get_notes_service().generate_invoice_notes(
        customer_name, items_description
    ).text


def generate_reminder_message(
    customer_name: str, invoice_num: str, balance: float, days_difference: int
) -> str:
    """Return a payment reminder, generated or fallback."""
    return get_notes_service().generate_reminder_message(
        customer_name, invoice_num, balance, days_difference
    ).text


def generate_product_description(product_name: str) -> str:
    """Return a product description, or an empty string when unavailable."""
    return get_notes_service().generate_product_description(product_name).text


def analyze_invoice_trends(summary_text: str) -> str:
    """Return trend insights for an invoice summary, generated or fallback."""
    return get_notes_service().analyze_invoice_trends(summary_text).text


__all__ = [
    "DegradedReason",
    "FallbackNotesService",
    "GeminiNotesService",
    "NoteResult",
    "NotesService",
    "analyze_invoice_trends",
    "generate_invoice_notes",
    "generate_product_description",
    "generate_reminder_message",
    "get_notes_service",
]
