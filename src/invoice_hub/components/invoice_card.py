from typing import Sequence

from dash import dcc, html
from dash_iconify import DashIconify

from invoice_hub.models.invoice import Invoice, LineItem
from invoice_hub.utils import format_amount, format_currency

"""Reusable invoice card component."""


def build_invoice_card(invoice: Invoice, ai_available: bool = False) -> html.Div:
    """Return a card styled container for a specific invoice."""
    invoice_id = invoice.invoice_number
    return html.Div(
        id=f"invoice-{invoice_id}",
        className="card invoice-card",
        children=[
            _build_header(invoice, invoice_id),
            _build_body(invoice),
            _build_ai_actions(invoice_id, ai_available),
        ],
    )


def _build_header(invoice: Invoice, invoice_id: str) -> html.Div:
    """Return the card header area."""
    status_class = "badge success" if invoice.is_paid else "badge warning"
    return html.Div(
        className="card-header",
        children=[
            html.Div(
                className="header-text",
                children=[
                    html.Div(
                        className="title-row",
                        children=[
                            DashIconify(icon="lucide:file-text", className="title-icon"),
                            html.H3(f"Invoice #{invoice.invoice_number}"),
                            html.Span(
                                "PAID" if invoice.is_paid else "UNPAID",
                                className=status_class,
                            ),
                        ],
                    ),
                    html.Div(
                        className="meta-row",
                        children=[
                            _meta_item("lucide:user", invoice.display_customer_name),
                            _meta_item("lucide:calendar", invoice.date_issued),
                            _meta_item(
                                "lucide:euro",
                                format_currency(invoice.balance_due),
                            ),
                        ],
                    ),
                ],
            ),
            html.Div(
                className="button-row",
                children=[
                    html.Button(
                        id={"type": "preview-button", "index": invoice_id},
                        className="button ghost gap",
                        children=[
                            DashIconify(icon="lucide:eye", className="button-icon"),
                            "Preview",
                        ],
                    ),
                    html.Button(
                        id={"type": "download-button", "index": invoice_id},
                        className="button primary ghost gap",
                        children=[
                            DashIconify(icon="lucide:download", className="button-icon"),
                            "Download PDF",
                        ],
                    ),
                ],
            ),
        ],
    )


def _build_body(invoice: Invoice) -> html.Div:
    """Return the card body with dates, line items and totals."""
    return html.Div(
        className="card-body",
        children=[
            html.Div(
                className="info-grid surface",
                children=[
                    _info_block("Invoice Date", invoice.date_issued),
                    _info_block("Payment Due", invoice.due_date),
                    _info_block("VAT Rate", f"{format_amount(invoice.tax_rate)}%"),
                ],
            ),
            html.Div(className="divider"),
            _build_line_items(invoice.items),
            html.Div(className="divider"),
            _build_totals(invoice),
        ],
    )


def _build_line_items(items: Sequence[LineItem]) -> html.Details:
    """Return the collapsible line item list."""
    return html.Details(
        className="line-items",
        open=False,
        children=[
            html.Summary(
                className="summary-header",
                children=[
                    DashIconify(icon="lucide:package", className="title-icon"),
                    html.H4(f"Line Items ({len(items)})"),
                ],
            ),
            html.Div(
                className="line-items-list",
                children=[_line_item_row(item) for item in items],
            ),
        ],
    )


def _line_item_row(item: LineItem) -> html.Div:
    return html.Div(
        className="line-item-card",
        children=[
            html.P(item.description, className="line-item-title"),
            html.Div(
                className="line-item-grid",
                children=[
                    _info_block("Quantity", item.formatted_quantity()),
                    _info_block("Unit Price", format_currency(item.unit_price)),
                    _info_block("Total", format_currency(item.total)),
                ],
            ),
        ],
    )


def _build_totals(invoice: Invoice) -> html.Div:
    """Return the totals footer."""
    return html.Div(
        className="totals",
        children=[
            _totals_row("Total Net", invoice.subtotal),
            _totals_row("Total VAT", invoice.tax_amount),
            _totals_row("Total Gross", invoice.total),
            html.Div(className="divider subtle"),
            _totals_row("Total Payable", invoice.balance_due, emphasize=True),
        ],
    )


def _build_ai_actions(invoice_id: str, ai_available: bool) -> html.Div:
    """Return the note and reminder drafting controls."""
    hint = None
    if not ai_available:
        hint = html.Span("AI unavailable, standard text will be used.", className="muted")
    return html.Div(
        className="ai-actions",
        children=[
            html.Div(
                className="button-row",
                children=[
                    html.Button(
                        id={"type": "notes-button", "index": invoice_id},
                        className="button ghost gap",
                        children=[
                            DashIconify(icon="lucide:sparkles", className="button-icon"),
                            "Draft notes",
                        ],
                    ),
                    html.Button(
                        id={"type": "reminder-button", "index": invoice_id},
                        className="button ghost gap",
                        children=[
                            DashIconify(icon="lucide:bell", className="button-icon"),
                            "Draft reminder",
                        ],
                    ),
                    hint,
                ],
            ),
            dcc.Loading(
                html.Pre(
                    id={"type": "ai-output", "index": invoice_id},
                    className="ai-output",
                ),
                type="dot",
            ),
        ],
    )


def _totals_row(label: str, value: float, emphasize: bool = False) -> html.Div:
    """Return a row within the totals section."""
    classes = "totals-row"
    if emphasize:
        classes += " emphasize"
    return html.Div(
        className=classes,
        children=[
            html.Span(label),
            html.Span(format_currency(value)),
        ],
    )


def _info_block(label: str, value: str) -> html.Div:
    """Return a small info block."""
    return html.Div(
        className="info-block",
        children=[
            html.Span(label, className="label"),
            html.Span(value, className="value"),
        ],
    )


def _meta_item(icon: str, label: str) -> html.Span:
    """Return a metadata chip."""
    return html.Span(
        className="meta-item",
        children=[
            DashIconify(icon=icon, className="meta-icon"),
            html.Span(label),
        ],
    )
