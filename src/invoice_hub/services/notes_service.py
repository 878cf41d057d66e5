"""
Abstract base class defining the AI notes contract.

All notes service implementations extend NotesService and provide the
_generate() method. The four public operations are defined once here:
each builds its prompt, names its fallback texts, and delegates to
_generate(). No operation ever raises for an API or transport failure;
every call returns a NoteResult with usable text.

Implementations:
- FallbackNotesService: No credentials configured, always static text
- GeminiNotesService: Google Gemini text generation with static fallbacks
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from invoice_hub.services import prompts
from invoice_hub.utils import format_symbol_amount

INVOICE_NOTES_FALLBACK = (
    "Thank you for choosing Clonmel Glass & Mirrors. Payment is due within 30 "
    "days of invoice date. All products come with our quality guarantee. For "
    "any queries, please contact us."
)
INVOICE_NOTES_ERROR_FALLBACK = (
    "Thank you for your business! Payment is kindly requested within 30 days "
    "of invoice date. All our products come with a quality guarantee. For any "
    "queries, please don't hesitate to contact us."
)
PRODUCT_DESCRIPTION_FALLBACK = ""
TRENDS_FALLBACK = "No insights available."


def reminder_fallback(invoice_num: str) -> str:
    """Return the reminder used when AI text is not available."""
    return (
        f"This is a reminder that a balance remains on Invoice {invoice_num}. "
        "Please settle this at your earliest convenience."
    )


def reminder_error_fallback(invoice_num: str, balance: float) -> str:
    """Return the reminder used when the AI request fails."""
    return (
        f"Reminder for Invoice {invoice_num}: Outstanding balance of "
        f"{format_symbol_amount(balance)} needs attention."
    )


class DegradedReason(str, Enum):
    """Why a NoteResult carries fallback text instead of generated text."""

    NO_CREDENTIALS = "no_credentials"
    REQUEST_FAILED = "request_failed"
    EMPTY_RESPONSE = "empty_response"


@dataclass(frozen=True, slots=True)
class NoteResult:
    """
    Outcome of a text generation call.

    Attributes:
        text: Text to show, either generated or a fallback.
        degraded: True when text is a fallback.
        reason: Why the fallback was used, None for generated text.
    """

    text: str
    degraded: bool = False
    reason: DegradedReason | None = None

    @classmethod
    def ok(cls, text: str) -> "NoteResult":
        return cls(text=text)

    @classmethod
    def fallback(cls, text: str, reason: DegradedReason) -> "NoteResult":
        return cls(text=text, degraded=True, reason=reason)

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True, slots=True)
class Fallbacks:
    """Static texts for the two ways an operation can degrade."""

    no_credentials: str
    failure: str


class NotesService(ABC):
    """
    Abstract base class for AI-drafted invoice text.

    Subclasses implement _generate() to turn a prompt into a NoteResult.
    AI features are reported unavailable by default.
    """

    @abstractmethod
    def _generate(self, operation: str, prompt: str, fallbacks: Fallbacks) -> NoteResult:
        """
        Produce text for a prompt, or the matching fallback.

        Args:
            operation: Short operation name used for logging.
            prompt: Free-text prompt for the model.
            fallbacks: Texts to return when generation is unavailable or fails.
        """

    @property
    def ai_available(self) -> bool:
        """
        Check if AI text generation is available.

        Returns:
            True if a Gemini credential is configured.
            Default implementation returns False.
        """
        return False

    def generate_invoice_notes(
        self, customer_name: str, items_description: str
    ) -> NoteResult:
        """
        Draft the notes printed on an invoice.

        Args:
            customer_name: Customer the invoice is addressed to.
            items_description: One-line summary of the ordered items.
        """
        return self._generate(
            "invoice_notes",
            prompts.build_invoice_notes_prompt(customer_name, items_description),
            Fallbacks(INVOICE_NOTES_FALLBACK, INVOICE_NOTES_ERROR_FALLBACK),
        )

    def generate_reminder_message(
        self,
        customer_name: str,
        invoice_num: str,
        balance: float,
        days_difference: int,
    ) -> NoteResult:
        """
        Draft a payment reminder.

        Args:
            customer_name: Customer the reminder is addressed to.
            invoice_num: Invoice number the balance belongs to.
            balance: Outstanding balance in euro.
            days_difference: Days until due; negative when overdue.
        """
        return self._generate(
            "reminder",
            prompts.build_reminder_prompt(
                customer_name, invoice_num, balance, days_difference
            ),
            Fallbacks(
                reminder_fallback(invoice_num),
                reminder_error_fallback(invoice_num, balance),
            ),
        )

    def generate_product_description(self, product_name: str) -> NoteResult:
        """Draft a catalogue description; empty text means none is available."""
        return self._generate(
            "product_description",
            prompts.build_product_description_prompt(product_name),
            Fallbacks(PRODUCT_DESCRIPTION_FALLBACK, PRODUCT_DESCRIPTION_FALLBACK),
        )

    def analyze_invoice_trends(self, summary_text: str) -> NoteResult:
        """Summarize sales and outstanding payments as three bullet points."""
        return self._generate(
            "invoice_trends",
            prompts.build_trends_prompt(summary_text),
            Fallbacks(TRENDS_FALLBACK, TRENDS_FALLBACK),
        )
