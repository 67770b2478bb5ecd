"""
PDF Styling

Provides standard cell styles for student reports.
"""

from dataclasses import dataclass
from typing import Optional

from reportlab.lib.enums import TA_CENTER, TA_LEFT, TA_RIGHT


@dataclass(frozen=True)
class CellStyle:
    """Font and colour settings for a single layout cell"""
    
    font_name: str
    font_size: float
    text_color: str
    fill_color: Optional[str] = None
    alignment: int = TA_LEFT


def get_report_styles():
    """
    Get standard report styles.
    
    Returns:
        Dictionary of CellStyle objects
    """
    return {
        'ReportTitle': CellStyle(
            font_name='Helvetica-Bold',
            font_size=20,
            text_color='#000080',
            alignment=TA_CENTER,
        ),
        'ReportCaption': CellStyle(
            font_name='Helvetica',
            font_size=10,
            text_color='#646464',
            alignment=TA_RIGHT,
        ),
        'SectionBanner': CellStyle(
            font_name='Helvetica-Bold',
            font_size=14,
            text_color='#000000',
            fill_color='#f0f0f0',
            alignment=TA_LEFT,
        ),
        'FieldLabel': CellStyle(
            font_name='Helvetica-Bold',
            font_size=10,
            text_color='#323232',
            alignment=TA_LEFT,
        ),
        'FieldValue': CellStyle(
            font_name='Helvetica',
            font_size=10,
            text_color='#000000',
            alignment=TA_LEFT,
        ),
        'ReportFooter': CellStyle(
            font_name='Helvetica-Oblique',
            font_size=8,
            text_color='#969696',
            alignment=TA_CENTER,
        ),
    }
