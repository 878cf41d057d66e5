"""
User-facing actions for rendered invoices.

Document construction is pure; these helpers only differ in how the
resulting bytes are handed out:
- download_invoice_pdf: dcc.Download payload, saved by the browser
- save_invoice_pdf: written to a directory on disk
- generate_preview_url: data URL for inline display in an iframe
"""

import base64
from datetime import date
from pathlib import Path

from dash import dcc

from invoice_hub.lib import logs
from invoice_hub.models.invoice import Invoice
from invoice_hub.pdf.renderer import create_invoice_doc

LOG = logs.logger(__file__)

PDF_MIME_TYPE = "application/pdf"


def download_invoice_pdf(invoice: Invoice, printed_on: date | None = None) -> dict:
    """
    Build the dcc.Download payload for an invoice PDF.

    Args:
        invoice: Invoice to render.
        printed_on: Print date override, defaults to today.

    Returns:
        Dictionary for a dcc.Download `data` property, named
        '{invoice_number}.pdf'.
    """
    document = create_invoice_doc(invoice, printed_on)
    LOG.info("Preparing download %s", document.filename)
    return dcc.send_bytes(document.to_bytes(), document.filename, type=PDF_MIME_TYPE)


def save_invoice_pdf(
    invoice: Invoice, directory: str | Path, printed_on: date | None = None
) -> Path:
    """
    Render an invoice and write it to '{directory}/{invoice_number}.pdf'.

    Returns:
        Path of the written file.

    Raises:
        ValueError: If the invoice number is not a plain file name.
    """
    document = create_invoice_doc(invoice, printed_on)
    if Path(document.filename).name != document.filename or "\\" in document.filename:
        msg = f"Invoice number is not a valid file name: {invoice.invoice_number!r}"
        raise ValueError(msg)
    target = Path(directory) / document.filename
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_bytes(document.to_bytes())
    LOG.info("Saved %s", target)
    return target


def generate_preview_url(invoice: Invoice, printed_on: date | None = None) -> str:
    """Return a base64 data URL of the invoice PDF for inline preview."""
    data = create_invoice_doc(invoice, printed_on).to_bytes()
    encoded = base64.b64encode(data).decode("ascii")
    return f"data:{PDF_MIME_TYPE};base64,{encoded}"
