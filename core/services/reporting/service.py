"""
Core Report Service

Provides PDF report generation for student records.
"""

import logging
from datetime import date
from io import BytesIO
from typing import Optional

from django.utils import timezone

from core.services.exceptions import ReportRenderError

from .canvas import write_pdf
from .dto import PdfResult
from .layout import Document


logger = logging.getLogger(__name__)


class ReportService:
    """
    Core service for PDF report generation.

    This service provides:
    - Page layout via a template and a fresh LayoutBuilder per call
    - PDF serialization using ReportLab
    - Repeatable generation (same input and date → same bytes)

    Usage:
        service = ReportService()
        result = service.render(record)
    """

    def __init__(self, template=None):
        """
        Initialize the service.

        Args:
            template: Report template. If None, uses the student report template.
        """
        self.template = template or self._get_default_template()

    def build_document(self, record, generated_on: Optional[date] = None) -> Document:
        """
        Lay out a record without serializing it.

        Args:
            record: StudentRecord to render
            generated_on: Date shown in the header (defaults to today in TIME_ZONE)

        Returns:
            Finished layout Document
        """
        return self.template.build_document(record, generated_on or timezone.localdate())

    def render(self, record, generated_on: Optional[date] = None) -> PdfResult:
        """
        Render a record to PDF bytes.

        Args:
            record: StudentRecord to render
            generated_on: Date shown in the header (defaults to today in TIME_ZONE)

        Returns:
            PdfResult with PDF bytes and metadata

        Raises:
            ReportRenderError: If the PDF cannot be serialized
        """
        document = self.build_document(record, generated_on)

        buffer = BytesIO()
        try:
            write_pdf(
                document,
                buffer,
                title=self.template.get_title(record),
                author=self.template.author
            )
        except Exception as e:
            logger.error(
                f"Failed to serialize PDF for student ID {record.id}: {e}",
                exc_info=True
            )
            raise ReportRenderError(f"Failed to serialize PDF: {e}") from e

        pdf_bytes = buffer.getvalue()
        buffer.close()

        result = PdfResult(
            pdf_bytes=pdf_bytes,
            filename=self.template.get_filename(record),
            content_type='application/pdf',
            page_count=document.page_count
        )

        logger.info(
            f"Successfully generated PDF: {result.filename} "
            f"({len(result)} bytes, {result.page_count} page(s))"
        )

        return result

    def _get_default_template(self):
        """
        Get the default report template.

        Returns:
            StudentReportV1 instance
        """
        # Import here to avoid circular imports
        from reports.templates.student_v1 import StudentReportV1

        return StudentReportV1()
