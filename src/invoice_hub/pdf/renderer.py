"""
Reportlab backend for invoice draw commands.

ReportLabCanvasBackend replays the commands from pdf.layout onto a
reportlab canvas. Layout coordinates are top-left millimetres; reportlab
uses bottom-left points, so every y value is flipped against the page
height here and nowhere else.

Any object with draw(command) and finish() -> bytes can stand in for
this backend when rendering an InvoiceDocument.
"""

import io
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Protocol, Sequence

from reportlab.lib import colors
from reportlab.lib.units import mm
from reportlab.pdfgen.canvas import Canvas
from reportlab.platypus import Table, TableStyle

from invoice_hub.lib import logs
from invoice_hub.models.invoice import Invoice
from invoice_hub.pdf.commands import (
    Color,
    DrawCommand,
    FilledTriangle,
    ItemTable,
    Line,
    Text,
)
from invoice_hub.pdf.layout import DEFAULT_LAYOUT, Layout, build_invoice_commands

LOG = logs.logger(__file__)

_TABLE_ALIGN = {"left": "LEFT", "center": "CENTRE", "right": "RIGHT"}


class DrawingBackend(Protocol):
    """Target that draw commands are replayed onto."""

    def draw(self, command: DrawCommand) -> None: ...

    def finish(self) -> bytes: ...


def _rgb(color: Color) -> tuple[float, float, float]:
    return color[0] / 255, color[1] / 255, color[2] / 255


class ReportLabCanvasBackend:
    """
    Draws commands onto a single reportlab canvas page.

    The canvas is created with invariant output so identical commands
    always produce identical bytes.
    """

    def __init__(self, layout: Layout = DEFAULT_LAYOUT, title: str = "") -> None:
        self._buffer = io.BytesIO()
        self._page_height = layout.page_height * mm
        self._canvas = Canvas(
            self._buffer,
            pagesize=(layout.page_width * mm, self._page_height),
            invariant=1,
        )
        if title:
            self._canvas.setTitle(title)

    def _y(self, y_mm: float) -> float:
        return self._page_height - y_mm * mm

    def draw(self, command: DrawCommand) -> None:
        if isinstance(command, Text):
            self._draw_text(command)
        elif isinstance(command, Line):
            self._draw_line(command)
        elif isinstance(command, FilledTriangle):
            self._draw_triangle(command)
        elif isinstance(command, ItemTable):
            self._draw_table(command)
        else:
            raise TypeError(f"Unsupported draw command: {type(command).__name__}")

    def finish(self) -> bytes:
        self._canvas.showPage()
        self._canvas.save()
        return self._buffer.getvalue()

    def _draw_text(self, command: Text) -> None:
        c = self._canvas
        c.saveState()
        c.setFont(command.font, command.size)
        c.setFillColorRGB(*_rgb(command.color))
        c.translate(command.x * mm, self._y(command.y))
        if command.angle:
            c.rotate(command.angle)
        if command.align == "right":
            c.drawRightString(0, 0, command.text)
        elif command.align == "center":
            c.drawCentredString(0, 0, command.text)
        else:
            c.drawString(0, 0, command.text)
        c.restoreState()

    def _draw_line(self, command: Line) -> None:
        c = self._canvas
        c.saveState()
        c.setStrokeColorRGB(*_rgb(command.color))
        c.setLineWidth(command.width * mm)
        c.line(command.x1 * mm, self._y(command.y1), command.x2 * mm, self._y(command.y2))
        c.restoreState()

    def _draw_triangle(self, command: FilledTriangle) -> None:
        c = self._canvas
        c.saveState()
        c.setFillColorRGB(*_rgb(command.color))
        path = c.beginPath()
        (x0, y0), *rest = command.points
        path.moveTo(x0 * mm, self._y(y0))
        for x, y in rest:
            path.lineTo(x * mm, self._y(y))
        path.close()
        c.drawPath(path, stroke=0, fill=1)
        c.restoreState()

    def _draw_table(self, command: ItemTable) -> None:
        """Draw a plain table: white fill, bold header, no grid lines."""
        data = [list(command.header)] + [list(row) for row in command.rows]
        row_heights = [command.header_height, *command.row_heights]
        padding = command.padding * mm
        style = [
            ("FONT", (0, 0), (-1, 0), command.header_font, command.header_size),
            ("LEADING", (0, 0), (-1, 0), command.header_size * command.line_height_factor),
            ("FONT", (0, 1), (-1, -1), command.body_font, command.body_size),
            ("LEADING", (0, 1), (-1, -1), command.body_size * command.line_height_factor),
            ("TEXTCOLOR", (0, 0), (-1, -1), colors.Color(*_rgb(command.text_color))),
            ("BACKGROUND", (0, 0), (-1, -1), colors.Color(*_rgb(command.fill_color))),
            ("VALIGN", (0, 0), (-1, -1), "TOP"),
            ("LEFTPADDING", (0, 0), (-1, -1), padding),
            ("RIGHTPADDING", (0, 0), (-1, -1), padding),
            ("TOPPADDING", (0, 0), (-1, -1), padding),
            ("BOTTOMPADDING", (0, 0), (-1, -1), padding),
        ]
        for column, align in enumerate(command.alignments):
            style.append(("ALIGN", (column, 0), (column, -1), _TABLE_ALIGN[align]))

        table = Table(
            data,
            colWidths=[width * mm for width in command.column_widths],
            rowHeights=[height * mm for height in row_heights],
        )
        table.setStyle(TableStyle(style))
        table.wrapOn(self._canvas, command.width * mm, sum(row_heights) * mm)
        table.drawOn(self._canvas, command.x * mm, self._y(command.bottom))


@dataclass
class InvoiceDocument:
    """
    Handle for a laid-out invoice.

    Construction is pure: the command list is computed up front and bytes
    are only produced when to_bytes() is called.

    Attributes:
        invoice: The invoice being rendered.
        commands: Ordered draw commands for the single page.
        layout: Page geometry used for the commands.
    """

    invoice: Invoice
    commands: Sequence[DrawCommand]
    layout: Layout = field(default=DEFAULT_LAYOUT)

    @property
    def filename(self) -> str:
        """Return the download filename, '{invoice_number}.pdf'."""
        return f"{self.invoice.invoice_number}.pdf"

    def to_bytes(
        self,
        backend_factory: Callable[[Layout, str], DrawingBackend] | None = None,
    ) -> bytes:
        """
        Replay the commands onto a backend and return the document bytes.

        Args:
            backend_factory: Builds a backend from (layout, title); defaults
                to ReportLabCanvasBackend.
        """
        factory = backend_factory or ReportLabCanvasBackend
        backend = factory(self.layout, self.invoice.invoice_number)
        for command in self.commands:
            backend.draw(command)
        data = backend.finish()
        LOG.info("Rendered %s (%d bytes)", self.filename, len(data))
        return data


def create_invoice_doc(
    invoice: Invoice,
    printed_on: date | None = None,
    layout: Layout = DEFAULT_LAYOUT,
) -> InvoiceDocument:
    """Lay out an invoice and return its document handle."""
    return InvoiceDocument(
        invoice=invoice,
        commands=build_invoice_commands(invoice, layout, printed_on),
        layout=layout,
    )
