"""
Reusable Dash UI components for Invoice Hub.

This package provides modular, composable components:
- invoice_card: Invoice summary card with PDF and AI drafting actions
- insights_panel: Trend insights card and the PDF preview frame

All components are pure functions that return Dash html/dcc elements,
making them easy to test and compose.
"""

from invoice_hub.components.insights_panel import (
    build_insights_panel,
    build_preview_panel,
)
from invoice_hub.components.invoice_card import build_invoice_card

__all__ = [
    "build_insights_panel",
    "build_invoice_card",
    "build_preview_panel",
]
