"""
Google Gemini implementation of NotesService.

This module provides the production notes service that:
- Sends each prompt to the configured Gemini model via google-genai
- Returns the generated text verbatim (no post-processing)
- Degrades to the operation's failure text on any client error,
  timeout, or response without text

The client is created with a request timeout so a hung call degrades
instead of blocking the caller indefinitely.
"""

from google import genai
from google.genai import types

from invoice_hub import config
from invoice_hub.lib import logs
from invoice_hub.services.notes_service import (
    DegradedReason,
    Fallbacks,
    NoteResult,
    NotesService,
)

LOG = logs.logger(__file__)


class GeminiNotesService(NotesService):
    """
    Notes service backed by Google Gemini.

    Required Environment Variables:
        GEMINI_API_KEY (or API_KEY): Gemini API key

    Optional Environment Variables:
        GEMINI_MODEL: Model identifier
        GEMINI_TIMEOUT_MS: Request timeout in milliseconds

    Attributes:
        model: Gemini model used for every request.
    """

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout_ms: int | None = None,
        client: genai.Client | None = None,
    ) -> None:
        """
        Initialize the service and its Gemini client.

        Args:
            api_key: Gemini API key, defaults to the configured key.
            model: Model identifier, defaults to GEMINI_MODEL.
            timeout_ms: Request timeout, defaults to GEMINI_TIMEOUT_MS.
            client: Pre-built client, mainly for tests.

        Raises:
            AssertionError: If no client is given and no API key is set.
        """
        self.model = model or config.GEMINI_MODEL
        if client is None:
            api_key = api_key or config.GEMINI_API_KEY
            assert api_key, "GEMINI_API_KEY is not set"
            client = genai.Client(
                api_key=api_key,
                http_options=types.HttpOptions(
                    timeout=timeout_ms or config.GEMINI_TIMEOUT_MS
                ),
            )
        self._client = client

    @property
    def ai_available(self) -> bool:
        """Return True; a client exists for every instance."""
        return True

    def _generate(self, operation: str, prompt: str, fallbacks: Fallbacks) -> NoteResult:
        try:
            response = self._client.models.generate_content(
                model=self.model,
                contents=prompt,
            )
            text = response.text
        except Exception:
            LOG.error("Gemini request failed for %s", operation, exc_info=True)
            return NoteResult.fallback(fallbacks.failure, DegradedReason.REQUEST_FAILED)

        if not isinstance(text, str) or not text:
            LOG.warning("Gemini returned no text for %s", operation)
            return NoteResult.fallback(fallbacks.failure, DegradedReason.EMPTY_RESPONSE)

        LOG.info("Gemini generated %d chars for %s", len(text), operation)
        return NoteResult.ok(text)
