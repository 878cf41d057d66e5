"""
Layout helpers for the Invoice Hub Dash application.

This module defines the root layout structure including:
- dcc.Download target for invoice PDF exports
- Invoice cards with preview, download and AI drafting actions
- Insights panel and PDF preview frame
"""

from typing import Sequence

from dash import dcc, html

from invoice_hub.components import (
    build_insights_panel,
    build_invoice_card,
    build_preview_panel,
)
from invoice_hub.models.invoice import Invoice

APP_TITLE = "Clonmel Glass Invoice Hub"
APP_SUBTITLE = "Invoices, reminders and insights for Clonmel Glass & Mirrors."


def build_layout(invoices: Sequence[Invoice], ai_available: bool = False) -> html.Div:
    """
    Build the root layout for the Invoice Hub application.

    Args:
        invoices: Invoices to show as cards.
        ai_available: If True, marks AI-drafted text as available.

    Returns:
        Root html.Div containing the complete application layout.
    """
    return html.Div(
        className="app-shell",
        children=[
            # Download component for PDF exports
            dcc.Download(id="download-file"),
            html.Div(
                className="app-container",
                children=[
                    _build_page_header(),
                    build_insights_panel(ai_available),
                    html.Div(
                        className="results",
                        children=[
                            build_invoice_card(invoice, ai_available)
                            for invoice in invoices
                        ],
                    ),
                    build_preview_panel(),
                ],
            ),
        ],
    )


def _build_page_header() -> html.Div:
    """Return the hero text area at the top of the page."""
    return html.Div(
        className="page-header",
        children=[
            html.H1(APP_TITLE),
            html.P(APP_SUBTITLE),
        ],
    )
