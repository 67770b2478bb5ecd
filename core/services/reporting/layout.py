"""
Page Layout

Tracks the vertical cursor, places rows of cells on pages and decides page
breaks. All measurements are in millimetres from the top-left page corner.
"""

from dataclasses import dataclass, field
from typing import Iterator

from reportlab.lib.units import mm
from reportlab.lib.utils import simpleSplit
from reportlab.pdfbase.pdfmetrics import stringWidth

from .styles import CellStyle

# A4 portrait
PAGE_WIDTH = 210.0
PAGE_HEIGHT = 297.0

PAGE_MARGIN = 10.0
BREAK_MARGIN = 20.0
CELL_PADDING = 1.0

TRUNCATION_MARKER = '...'


def text_width(text: str, style: CellStyle) -> float:
    """Width of text in points"""
    return stringWidth(text, style.font_name, style.font_size)


def split_long_line(line: str, style: CellStyle, max_width: float) -> list[str]:
    """
    Break a line at character boundaries when it is wider than max_width.

    simpleSplit only breaks between words, so a single long word (an email
    address or URL) can still overflow the cell.
    """
    if text_width(line, style) <= max_width:
        return [line]

    pieces = []
    current = ''
    for char in line:
        candidate = current + char
        if current and text_width(candidate, style) > max_width:
            pieces.append(current.rstrip())
            current = char.lstrip()
        else:
            current = candidate
    if current:
        pieces.append(current)
    return pieces


def truncate_line(line: str, style: CellStyle, max_width: float) -> str:
    """Shorten line so that it still fits max_width with the '...' marker appended"""
    while line and text_width(line + TRUNCATION_MARKER, style) > max_width:
        line = line[:-1]
    return line + TRUNCATION_MARKER


@dataclass(frozen=True)
class Cell:
    """A text cell; `lines` holds the wrapped text, one entry per line."""

    x: float
    width: float
    text: str
    lines: tuple
    style: CellStyle


@dataclass(frozen=True)
class Row:
    """Cells sharing one horizontal band of a page."""

    top: float
    line_height: float
    cells: tuple

    @property
    def height(self) -> float:
        return self.line_height * max(len(cell.lines) for cell in self.cells)

    @property
    def bottom(self) -> float:
        return self.top + self.height

    @property
    def text(self) -> str:
        return ' '.join(cell.text for cell in self.cells)


@dataclass(frozen=True)
class Page:
    number: int
    rows: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class Document:
    """Finished, immutable page layout."""

    pages: tuple
    page_width: float = PAGE_WIDTH
    page_height: float = PAGE_HEIGHT

    @property
    def page_count(self) -> int:
        return len(self.pages)

    def rows(self) -> Iterator[Row]:
        for page in self.pages:
            yield from page.rows

    def text_rows(self) -> list[str]:
        """Text of every row in reading order"""
        return [row.text for row in self.rows()]


class LayoutBuilder:
    """
    Single-use builder for one document.

    Rows are appended top to bottom. Before a row is placed the builder checks
    the remaining space on the current page and starts a new page when the row
    would cross the page-break line. A row is never split across pages.

    Usage:
        builder = LayoutBuilder()
        builder.add_text_row('Title', styles['ReportTitle'], 15)
        builder.add_gap(5)
        document = builder.build()
    """

    def __init__(
        self,
        page_width: float = PAGE_WIDTH,
        page_height: float = PAGE_HEIGHT,
        margin: float = PAGE_MARGIN,
        break_margin: float = BREAK_MARGIN,
    ):
        self.page_width = page_width
        self.page_height = page_height
        self.margin = margin
        self.break_margin = break_margin
        self.cursor = margin
        self._pages: list[list[Row]] = []
        self._built = False
        self.add_page()

    @property
    def content_width(self) -> float:
        return self.page_width - 2 * self.margin

    @property
    def page_break_trigger(self) -> float:
        """Lowest y a row may reach on a page"""
        return self.page_height - self.break_margin

    @property
    def page_count(self) -> int:
        return len(self._pages)

    def add_page(self) -> None:
        """Start a new page and reset the cursor to the top margin"""
        self._check_open()
        self._pages.append([])
        self.cursor = self.margin

    def add_gap(self, height: float) -> None:
        """
        Advance the cursor without placing anything.

        Gaps never open a page on their own; they stop at the page-break line.
        """
        self._check_open()
        self.cursor = min(self.cursor + height, self.page_break_trigger)

    def add_text_row(self, text: str, style: CellStyle, height: float) -> Row:
        """Place a single full-width, single-line cell"""
        cell = Cell(
            x=self.margin,
            width=self.content_width,
            text=text,
            lines=(text,),
            style=style,
        )
        return self.place_row((cell,), height)

    def add_field_row(
        self,
        label: str,
        value: str,
        label_style: CellStyle,
        value_style: CellStyle,
        label_width: float,
        line_height: float,
    ) -> Row:
        """
        Place a label cell of fixed width followed by a value cell.

        The value takes the remaining row width and wraps onto extra lines;
        each line adds one line height to the row.
        """
        value_width = self.content_width - label_width
        label_cell = Cell(
            x=self.margin,
            width=label_width,
            text=label,
            lines=(label,),
            style=label_style,
        )
        value_cell = Cell(
            x=self.margin + label_width,
            width=value_width,
            text=value,
            lines=self.wrap(value, value_style, value_width, line_height),
            style=value_style,
        )
        return self.place_row((label_cell, value_cell), line_height)

    def place_row(self, cells: tuple, line_height: float) -> Row:
        """
        Place a row at the cursor, breaking to a new page first if needed.

        Args:
            cells: Cells making up the row
            line_height: Height of one text line of the row

        Returns:
            The placed Row
        """
        self._check_open()
        row = Row(top=self.cursor, line_height=line_height, cells=tuple(cells))

        if row.bottom > self.page_break_trigger and row.top > self.margin:
            self.add_page()
            row = Row(top=self.cursor, line_height=line_height, cells=row.cells)

        self._pages[-1].append(row)
        self.cursor = row.bottom
        return row

    def wrap(self, text: str, style: CellStyle, width: float, line_height: float) -> tuple:
        """
        Split text into lines that fit the inner cell width.

        Text that would need more lines than fit on an empty page is cut and
        marked with '...'.
        """
        inner_width = (width - 2 * CELL_PADDING) * mm
        lines = []
        for line in simpleSplit(text, style.font_name, style.font_size, inner_width) or ['']:
            lines.extend(split_long_line(line, style, inner_width))

        max_lines = max(1, int((self.page_break_trigger - self.margin) // line_height))
        if len(lines) > max_lines:
            lines = lines[:max_lines]
            lines[-1] = truncate_line(lines[-1], style, inner_width)

        return tuple(lines)

    def build(self) -> Document:
        """
        Freeze the layout into a Document. The builder cannot be used afterwards.
        """
        self._check_open()
        self._built = True
        return Document(
            pages=tuple(
                Page(number=index, rows=tuple(rows))
                for index, rows in enumerate(self._pages, start=1)
            ),
            page_width=self.page_width,
            page_height=self.page_height,
        )

    def _check_open(self) -> None:
        if self._built:
            raise RuntimeError("Layout has already been built")
