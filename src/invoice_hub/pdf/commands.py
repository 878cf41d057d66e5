"""
Draw commands produced by the invoice layout.

Commands are immutable values describing what to draw and where. All
coordinates are millimetres measured from the top-left corner of the
page with y growing downward; text y positions are baselines. Font
sizes are in points. Backends translate these into their own units.
"""

from dataclasses import dataclass
from typing import Literal, Sequence, Union

Color = tuple[int, int, int]
Align = Literal["left", "center", "right"]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)

REGULAR = "Helvetica"
BOLD = "Helvetica-Bold"


@dataclass(frozen=True, slots=True)
class Text:
    """A single line of text anchored at its baseline."""

    x: float
    y: float
    text: str
    font: str = REGULAR
    size: float = 10
    color: Color = BLACK
    align: Align = "left"
    # Degrees, counter-clockwise as seen on the page
    angle: float = 0


@dataclass(frozen=True, slots=True)
class Line:
    """A straight stroked line."""

    x1: float
    y1: float
    x2: float
    y2: float
    color: Color = BLACK
    width: float = 0.2


@dataclass(frozen=True, slots=True)
class FilledTriangle:
    """A filled triangle without an outline."""

    points: tuple[tuple[float, float], tuple[float, float], tuple[float, float]]
    color: Color


@dataclass(frozen=True, slots=True)
class ItemTable:
    """
    A borderless table with a bold header row.

    Row heights are precomputed so that the table's bottom edge is known
    without drawing it. Multi-line cells use "\\n" separators.
    """

    x: float
    y: float
    column_widths: Sequence[float]
    alignments: Sequence[Align]
    header: Sequence[str]
    rows: Sequence[Sequence[str]]
    header_height: float
    row_heights: Sequence[float]
    header_font: str = BOLD
    header_size: float = 9
    body_font: str = REGULAR
    body_size: float = 10
    padding: float = 3
    line_height_factor: float = 1.15
    text_color: Color = BLACK
    fill_color: Color = WHITE

    @property
    def width(self) -> float:
        return sum(self.column_widths)

    @property
    def bottom(self) -> float:
        """Return the y position just below the last row."""
        return self.y + self.header_height + sum(self.row_heights)


DrawCommand = Union[Text, Line, FilledTriangle, ItemTable]
