"""
Dash application entry point for Invoice Hub.

This module creates the Dash app, wires the invoice card actions to the
PDF renderer and the notes service, and exposes main() for local runs.
"""

from datetime import date
from pathlib import Path

from dash import ALL, MATCH, Dash, Input, Output, ctx
from dash.exceptions import PreventUpdate

from invoice_hub import config
from invoice_hub.data.demo_invoices import DEMO_INVOICES
from invoice_hub.layout import APP_TITLE, build_layout
from invoice_hub.lib import logs
from invoice_hub.models.invoice import Invoice, summarize_invoices
from invoice_hub.pdf import download_invoice_pdf, generate_preview_url
from invoice_hub.services import get_notes_service
from invoice_hub.utils import days_until_due

LOG = logs.logger(__file__)

_INVOICES: dict[str, Invoice] = {inv.invoice_number: inv for inv in DEMO_INVOICES}
_assets_path = Path(__file__).resolve().parent / "assets"

app = Dash(__name__, title=APP_TITLE, assets_folder=str(_assets_path))
app.layout = build_layout(
    list(_INVOICES.values()), ai_available=get_notes_service().ai_available
)


def _invoice_for(trigger: dict | None) -> Invoice:
    """Return the invoice referenced by a pattern-matching button id."""
    if not trigger or trigger.get("index") not in _INVOICES:
        raise PreventUpdate
    return _INVOICES[trigger["index"]]


def draft_text(kind: str, invoice: Invoice, today: date | None = None) -> str:
    """
    Draft invoice notes or a payment reminder for an invoice.

    Args:
        kind: "notes" or "reminder".
        invoice: Invoice the text is for.
        today: Reference date for reminder timing, defaults to today.

    Returns:
        Generated or fallback text, never raises for service failures.
    """
    service = get_notes_service()
    if kind == "notes":
        result = service.generate_invoice_notes(
            invoice.display_customer_name, invoice.items_description()
        )
    elif kind == "reminder":
        days = days_until_due(invoice.due_date, today)
        if days is None:
            LOG.warning("Unparseable due date %r on %s", invoice.due_date, invoice.invoice_number)
            days = 0
        result = service.generate_reminder_message(
            invoice.display_customer_name,
            invoice.invoice_number,
            invoice.balance_due,
            days,
        )
    else:
        raise ValueError(f"Unknown draft kind: {kind}")

    if result.degraded:
        LOG.info("Using fallback %s text for %s (%s)", kind, invoice.invoice_number, result.reason)
    return result.text


@app.callback(
    Output("download-file", "data"),
    Input({"type": "download-button", "index": ALL}, "n_clicks"),
    prevent_initial_call=True,
)
def download_pdf(n_clicks: list[int | None]) -> dict:
    """Send the clicked invoice as '{invoice_number}.pdf'."""
    if not any(n_clicks):
        raise PreventUpdate
    return download_invoice_pdf(_invoice_for(ctx.triggered_id))


@app.callback(
    Output("preview-frame", "src"),
    Output("preview-title", "children"),
    Output("preview-panel", "className"),
    Input({"type": "preview-button", "index": ALL}, "n_clicks"),
    prevent_initial_call=True,
)
def preview_pdf(n_clicks: list[int | None]) -> tuple[str, str, str]:
    """Show the clicked invoice in the preview frame."""
    if not any(n_clicks):
        raise PreventUpdate
    invoice = _invoice_for(ctx.triggered_id)
    return (
        generate_preview_url(invoice),
        f"Preview: {invoice.invoice_number}",
        "card preview-card",
    )


@app.callback(
    Output({"type": "ai-output", "index": MATCH}, "children"),
    Input({"type": "notes-button", "index": MATCH}, "n_clicks"),
    Input({"type": "reminder-button", "index": MATCH}, "n_clicks"),
    prevent_initial_call=True,
)
def draft_ai_text(notes_clicks: int | None, reminder_clicks: int | None) -> str:
    """Draft notes or a reminder for the card whose button was clicked."""
    trigger = ctx.triggered_id
    if not trigger:
        raise PreventUpdate
    kind = "notes" if trigger["type"] == "notes-button" else "reminder"
    return draft_text(kind, _invoice_for(trigger))


@app.callback(
    Output("insights-output", "children"),
    Input("insights-button", "n_clicks"),
    prevent_initial_call=True,
)
def analyze_trends(n_clicks: int | None) -> str:
    """Summarize every invoice on the page and ask for trend insights."""
    if not n_clicks:
        raise PreventUpdate
    summary = summarize_invoices(list(_INVOICES.values()))
    return get_notes_service().analyze_invoice_trends(summary).text


def main() -> None:
    """Entrypoint used by uv via `uv run invoice_hub`."""
    LOG.info("Starting Invoice Hub on port %s (debug=%s)", config.APP_PORT, config.APP_DEBUG)
    app.run(debug=config.APP_DEBUG, host="0.0.0.0", port=config.APP_PORT)


if __name__ == "__main__":
    main()
