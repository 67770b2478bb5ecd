"""
HTTP views for the student report service.

The upstream student API posts a student record as JSON and receives the
rendered PDF in the response body.
"""
import json
import logging

from django.core.exceptions import ValidationError
from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from core.services.exceptions import ReportRenderError
from core.services.reporting import ReportService
from reports.student_record import StudentRecord

logger = logging.getLogger(__name__)

SERVICE_NAME = 'student-pdf-report'


@csrf_exempt
@require_http_methods(["GET", "POST"])
def health_check(request):
    """
    GET|POST /health

    Returns:
        200: Service status
    """
    return JsonResponse({'status': 'ok', 'service': SERVICE_NAME})


@csrf_exempt
@require_http_methods(["POST"])
def generate_pdf(request):
    """
    POST /api/v1/generate-pdf

    Render a student record to a PDF report.

    Request Body:
        JSON object with student fields

    Returns:
        200: PDF document (inline, student_<id>_report.pdf)
        400: Invalid payload
        500: PDF could not be generated
    """
    try:
        data = json.loads(request.body)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        logger.warning(f"Error decoding request body: {e}")
        return JsonResponse({'error': f'Invalid request body: {e}'}, status=400)

    try:
        record = StudentRecord.from_payload(data)
    except ValidationError as e:
        message = '; '.join(e.messages)
        logger.warning(f"Invalid student record: {message}")
        return JsonResponse({'error': f'Invalid request body: {message}'}, status=400)

    logger.info(f"Generating PDF for student: {record.name} (ID: {record.id})")

    try:
        result = ReportService().render(record)
    except ReportRenderError as e:
        logger.error(f"Error generating PDF: {e}", exc_info=True)
        return JsonResponse({'error': f'Error generating PDF: {e}'}, status=500)

    response = HttpResponse(result.pdf_bytes, content_type=result.content_type)
    response['Content-Disposition'] = f'inline; filename={result.filename}'

    logger.info(f"PDF report generated successfully for student ID: {record.id}")
    return response
