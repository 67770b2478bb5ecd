"""
Core Report Service

Provides PDF layout and rendering for student reports.
"""

from .dates import normalize_date
from .dto import PdfResult
from .layout import Document, LayoutBuilder
from .service import ReportService

__all__ = ['ReportService', 'PdfResult', 'Document', 'LayoutBuilder', 'normalize_date']
