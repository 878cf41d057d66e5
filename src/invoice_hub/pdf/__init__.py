"""
Fixed-template invoice PDF rendering.

The renderer is split in two:
- layout: pure function from (Invoice, Layout) to ordered draw commands
- renderer: reportlab backend that replays those commands onto a canvas

actions exposes the rendered document as a browser download, a file on
disk, or an inline preview URL.
"""

from invoice_hub.pdf.actions import (
    download_invoice_pdf,
    generate_preview_url,
    save_invoice_pdf,
)
from invoice_hub.pdf.layout import DEFAULT_LAYOUT, Layout, build_invoice_commands
from invoice_hub.pdf.renderer import (
    InvoiceDocument,
    ReportLabCanvasBackend,
    create_invoice_doc,
)

__all__ = [
    "DEFAULT_LAYOUT",
    "InvoiceDocument",
    "Layout",
    "ReportLabCanvasBackend",
    "build_invoice_commands",
    "create_invoice_doc",
    "download_invoice_pdf",
    "generate_preview_url",
    "save_invoice_pdf",
]
