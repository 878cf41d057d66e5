"""
Fixed A4 invoice template expressed as draw commands.

build_invoice_commands() is a pure function of the invoice, the layout
constants and the print date. It performs no I/O and knows nothing about
the drawing backend, so the same command list can be rendered to PDF or
inspected directly in tests.

The template, top to bottom:
- Diagonal PAID/UNPAID corner banner
- Title, invoice number and right-aligned company name
- Invoice To / Deliver To / company details
- Five-column info row and separator rule
- Item table
- Payment terms (left) and totals (right)
- Print date and attribution strip
"""

from dataclasses import dataclass
from datetime import date
from typing import Sequence

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit

from invoice_hub.models.invoice import Invoice
from invoice_hub.pdf.commands import (
    BOLD,
    REGULAR,
    WHITE,
    Color,
    DrawCommand,
    FilledTriangle,
    ItemTable,
    Line,
    Text,
)
from invoice_hub.utils import format_amount, format_currency, format_print_date

PT_TO_MM = 1 / mm

PAID_COLOR: Color = (34, 197, 94)
UNPAID_COLOR: Color = (255, 140, 0)
TITLE_COLOR: Color = (80, 80, 80)
BRAND_COLOR: Color = (0, 174, 239)
TAGLINE_COLOR: Color = (100, 100, 100)
RULE_COLOR: Color = (220, 220, 220)
FOOTER_COLOR: Color = (180, 180, 180)

COMPANY_NAME = "CLONMEL GLASS"
TAGLINE = "Professional Solutions"
COMPANY_DETAILS = (
    "Clonmel Glass & Mirrors Ltd",
    "24 Mary Street",
    "Clonmel",
    "Limerick / Co. Tipperary",
    "",
    "Tel: (052) 612 1111",
    "Web: www.mirrorzone.ie",
)
ACCOUNT_MANAGER = "Admin"
VAT_NUMBER = "IE8252470Q"
PAYMENT_TERMS = (
    "Bank Transfer to: PTSB BANK",
    "IBAN: IE98IPBS99071010105209",
    "Deposit of 50% prior to installation.",
)
ATTRIBUTION = "Created by Clonmel Glass Invoice Hub"

TABLE_HEADER = ("Description", "Quantity", "Price", "VAT Rate", "Total")


@dataclass(frozen=True, slots=True)
class Layout:
    """Page geometry in millimetres."""

    page_width: float = 210
    page_height: float = 297
    left_margin: float = 20
    right_margin: float = 20
    top: float = 25

    banner_size: float = 60
    banner_text_x: float = 15
    banner_text_y: float = 28
    # Rises along the hypotenuse; -45 reproduces the older downward label,
    # which lets "UNPAID" overrun the triangle by about 3 mm
    banner_angle: float = 45

    address_column_offset: float = 60
    detail_line_pitch: float = 4
    info_column_count: int = 5

    # Tables start at the 40pt default table margin, not the page margin
    table_left: float = 40 * PT_TO_MM
    table_column_widths: tuple[float, ...] = (80, 25, 25, 25, 25)
    table_alignments: tuple[str, ...] = ("left", "center", "right", "center", "right")
    table_padding: float = 3
    line_height_factor: float = 1.15

    footer_gap: float = 15
    totals_label_offset: float = 60
    totals_pitch: float = 6
    bottom_strip_offset: float = 10

    @property
    def right_edge(self) -> float:
        return self.page_width - self.right_margin

    @property
    def content_width(self) -> float:
        return self.page_width - self.left_margin - self.right_margin


DEFAULT_LAYOUT = Layout()


def build_invoice_commands(
    invoice: Invoice,
    layout: Layout = DEFAULT_LAYOUT,
    printed_on: date | None = None,
) -> list[DrawCommand]:
    """
    Lay out an invoice on a single A4 page.

    Args:
        invoice: Fully populated invoice; totals are printed as supplied.
        layout: Page geometry constants.
        printed_on: Date shown in the bottom strip, defaults to today.

    Returns:
        Ordered draw commands; later commands paint over earlier ones.
    """
    commands: list[DrawCommand] = []
    commands += _banner(invoice, layout)

    y = layout.top
    commands += _header(invoice, layout, y)
    y += 25
    commands += _addresses(invoice, layout, y)
    y += 30
    commands += _info_row(invoice, layout, y)
    y += 12
    commands.append(
        Line(layout.left_margin, y, layout.right_edge, y, color=RULE_COLOR, width=0.5)
    )
    y += 8

    table = _item_table(invoice, layout, y)
    commands.append(table)
    commands.append(
        Line(
            layout.left_margin,
            table.bottom,
            layout.right_edge,
            table.bottom,
            color=RULE_COLOR,
            width=0.3,
        )
    )

    footer_y = table.bottom + layout.footer_gap
    commands += _payment_terms(layout, footer_y)
    commands += _totals(invoice, layout, footer_y)
    commands += _bottom_strip(layout, printed_on or date.today())
    return commands


def _banner(invoice: Invoice, layout: Layout) -> list[DrawCommand]:
    """Return the corner triangle and its rotated status label."""
    color = PAID_COLOR if invoice.is_paid else UNPAID_COLOR
    size = layout.banner_size
    return [
        FilledTriangle(points=((0, 0), (size, 0), (0, size)), color=color),
        Text(
            layout.banner_text_x,
            layout.banner_text_y,
            "PAID" if invoice.is_paid else "UNPAID",
            font=BOLD,
            size=11,
            color=WHITE,
            angle=layout.banner_angle,
        ),
    ]


def _header(invoice: Invoice, layout: Layout, y: float) -> list[DrawCommand]:
    right = layout.right_edge
    return [
        Text(layout.left_margin, y, "Invoice", size=28, color=TITLE_COLOR),
        Text(layout.left_margin, y + 10, invoice.invoice_number, font=BOLD, size=16),
        Text(right, y, COMPANY_NAME, font=BOLD, size=18, color=BRAND_COLOR, align="right"),
        Text(right, y + 6, TAGLINE, size=9, color=TAGLINE_COLOR, align="right"),
    ]


def _addresses(invoice: Invoice, layout: Layout, y: float) -> list[DrawCommand]:
    """Return the Invoice To / Deliver To columns and the company block."""
    customer = invoice.display_customer_name
    commands: list[DrawCommand] = []
    for label, x in (
        ("Invoice To:", layout.left_margin),
        ("Deliver To:", layout.left_margin + layout.address_column_offset),
    ):
        commands.append(Text(x, y, label, font=BOLD, size=9))
        commands.append(Text(x, y + 5, customer, size=10))

    detail_y = y
    for line in COMPANY_DETAILS:
        font = BOLD if "Clonmel Glass" in line else REGULAR
        commands.append(Text(layout.right_edge, detail_y, line, font=font, size=9, align="right"))
        detail_y += layout.detail_line_pitch
    return commands


def _info_row(invoice: Invoice, layout: Layout, y: float) -> list[DrawCommand]:
    info = (
        ("Invoice Date", invoice.date_issued),
        ("Ref. No.", invoice.invoice_number),
        ("Account Manager", ACCOUNT_MANAGER),
        ("VAT No.", VAT_NUMBER),
        ("Payment Due", invoice.due_date),
    )
    column_width = layout.content_width / layout.info_column_count
    commands: list[DrawCommand] = []
    for index, (label, value) in enumerate(info):
        x = layout.left_margin + index * column_width
        commands.append(Text(x, y, label, font=BOLD, size=8))
        commands.append(Text(x, y + 4, value, size=8))
    return commands


def item_rows(invoice: Invoice) -> list[tuple[str, str, str, str, str]]:
    """Return the display cells for each line item, in invoice order."""
    vat_rate = f"{format_amount(invoice.tax_rate)}%"
    return [
        (
            item.description,
            item.formatted_quantity(),
            format_amount(item.unit_price),
            vat_rate,
            format_amount(item.total),
        )
        for item in invoice.items
    ]


def _row_height(cells: Sequence[str], size: float, layout: Layout) -> float:
    line_height = size * layout.line_height_factor * PT_TO_MM
    return max(len(cell.split("\n")) for cell in cells) * line_height + 2 * layout.table_padding


def _wrap_cells(cells: Sequence[str], font: str, size: float, layout: Layout) -> tuple[str, ...]:
    """Wrap each cell to its column's inner width."""
    wrapped = []
    for cell, width in zip(cells, layout.table_column_widths):
        inner = (width - 2 * layout.table_padding) * mm
        wrapped.append("\n".join(simpleSplit(cell, font, size, inner)) or cell)
    return tuple(wrapped)


def _item_table(invoice: Invoice, layout: Layout, y: float) -> ItemTable:
    header_size, body_size = 9, 10
    rows = [_wrap_cells(cells, REGULAR, body_size, layout) for cells in item_rows(invoice)]
    return ItemTable(
        x=layout.table_left,
        y=y,
        column_widths=layout.table_column_widths,
        alignments=layout.table_alignments,
        header=TABLE_HEADER,
        rows=rows,
        header_height=_row_height(TABLE_HEADER, header_size, layout),
        row_heights=[_row_height(row, body_size, layout) for row in rows],
        header_size=header_size,
        body_size=body_size,
        padding=layout.table_padding,
        line_height_factor=layout.line_height_factor,
    )


def _payment_terms(layout: Layout, y: float) -> list[DrawCommand]:
    commands: list[DrawCommand] = [
        Text(layout.left_margin, y, "Payment Terms:", font=BOLD, size=10)
    ]
    y += 5
    for index, line in enumerate(PAYMENT_TERMS):
        if index:
            y += 4
        commands.append(Text(layout.left_margin, y, line, size=9))
    return commands


def _totals(invoice: Invoice, layout: Layout, y: float) -> list[DrawCommand]:
    """Return the right-hand totals block ending with Total Payable."""
    label_x = layout.right_edge - layout.totals_label_offset
    commands: list[DrawCommand] = []
    for label, value in (
        ("Total Net", invoice.subtotal),
        ("Total VAT", invoice.tax_amount),
        ("Total Gross", invoice.total),
    ):
        commands.append(Text(label_x, y, label, size=10))
        commands.append(Text(layout.right_edge, y, format_currency(value), size=10, align="right"))
        y += layout.totals_pitch

    y += 2
    commands.append(Text(label_x, y, "Total Payable", font=BOLD, size=11))
    commands.append(
        Text(
            layout.right_edge,
            y,
            format_currency(invoice.balance_due),
            font=BOLD,
            size=11,
            align="right",
        )
    )
    return commands


def _bottom_strip(layout: Layout, printed_on: date) -> list[DrawCommand]:
    y = layout.page_height - layout.bottom_strip_offset
    return [
        Text(
            layout.left_margin,
            y,
            f"Printed on: {format_print_date(printed_on)} | Page 1 of 1",
            size=8,
            color=FOOTER_COLOR,
        ),
        Text(layout.right_edge, y, ATTRIBUTION, size=8, color=FOOTER_COLOR, align="right"),
    ]
