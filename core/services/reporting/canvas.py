"""
Canvas Helpers

Draws a finished page layout onto a ReportLab canvas and writes the PDF.
"""

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER, TA_RIGHT
from reportlab.lib.units import mm
from reportlab.pdfgen.canvas import Canvas

from .layout import CELL_PADDING

# Baseline offset below the line centre, as a share of the font size
BASELINE_SHIFT = 0.3


def draw_cell(canvas, cell, top, line_height, page_height):
    """
    Draw one cell: optional background fill, then each wrapped line.

    Args:
        canvas: ReportLab canvas object
        cell: Layout Cell to draw
        top: Top edge of the row in mm from the top of the page
        line_height: Height of one text line in mm
        page_height: Page height in mm
    """
    style = cell.style
    height = line_height * len(cell.lines)

    canvas.saveState()

    if style.fill_color:
        canvas.setFillColor(colors.HexColor(style.fill_color))
        canvas.rect(
            cell.x * mm,
            (page_height - top - height) * mm,
            cell.width * mm,
            height * mm,
            stroke=0,
            fill=1
        )

    canvas.setFont(style.font_name, style.font_size)
    canvas.setFillColor(colors.HexColor(style.text_color))

    for index, line in enumerate(cell.lines):
        if not line:
            continue
        middle = top + index * line_height + line_height / 2
        baseline = (page_height - middle) * mm - BASELINE_SHIFT * style.font_size

        if style.alignment == TA_CENTER:
            canvas.drawCentredString((cell.x + cell.width / 2) * mm, baseline, line)
        elif style.alignment == TA_RIGHT:
            canvas.drawRightString((cell.x + cell.width - CELL_PADDING) * mm, baseline, line)
        else:
            canvas.drawString((cell.x + CELL_PADDING) * mm, baseline, line)

    canvas.restoreState()


def draw_page(canvas, page, page_height):
    """Draw every row of a layout page"""
    for row in page.rows:
        for cell in row.cells:
            draw_cell(canvas, cell, row.top, row.line_height, page_height)


def write_pdf(document, output, title=None, author=None, invariant=True):
    """
    Serialize a layout Document as PDF.

    Args:
        document: Finished layout Document
        output: File-like object (e.g., BytesIO) to write PDF bytes to
        title: Optional PDF title metadata
        author: Optional PDF author metadata
        invariant: Produce byte-identical output for identical layouts

    Returns:
        None (writes to output)
    """
    canvas = Canvas(
        output,
        pagesize=(document.page_width * mm, document.page_height * mm),
        invariant=int(invariant)
    )
    if title:
        canvas.setTitle(title)
    if author:
        canvas.setAuthor(author)

    for page in document.pages:
        draw_page(canvas, page, document.page_height)
        canvas.showPage()

    canvas.save()
