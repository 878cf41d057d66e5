"""
Notes service used when no Gemini credential is configured.

Every operation short-circuits to its static text without building a
client or touching the network.
"""

from invoice_hub.lib import logs
from invoice_hub.services.notes_service import (
    DegradedReason,
    Fallbacks,
    NoteResult,
    NotesService,
)

LOG = logs.logger(__file__)


class FallbackNotesService(NotesService):
    """Static-text notes service for environments without an API key."""

    def _generate(self, operation: str, prompt: str, fallbacks: Fallbacks) -> NoteResult:
        LOG.debug("No Gemini credential, using fallback for %s", operation)
        return NoteResult.fallback(fallbacks.no_credentials, DegradedReason.NO_CREDENTIALS)
