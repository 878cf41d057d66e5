"""
Environment configuration for Invoice Hub.

Values are read once at import time. The Gemini credential in particular
is resolved here and nowhere else, so the notes service can decide at
startup whether AI-drafted text is available.

Environment variables used:
- GEMINI_API_KEY: Google Gemini API key (API_KEY is accepted as a fallback)
- GEMINI_MODEL: Model identifier for text generation
- GEMINI_TIMEOUT_MS: Per-request timeout in milliseconds
- INVOICE_HUB_PORT: Port for the Dash development server
- INVOICE_HUB_DEBUG: Enable Dash debug mode
"""

import os

_TRUTHY = {"1", "true", "yes"}


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    return int(value) if value else default


def gemini_api_key() -> str | None:
    """Return the configured Gemini API key, or None when AI is disabled."""
    return os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY") or None


GEMINI_API_KEY = gemini_api_key()
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-3-flash-preview")
GEMINI_TIMEOUT_MS = _env_int("GEMINI_TIMEOUT_MS", 30_000)

APP_PORT = _env_int("INVOICE_HUB_PORT", 8050)
APP_DEBUG = _env_flag("INVOICE_HUB_DEBUG")
