"""
Tests for the student PDF report HTTP endpoints
"""

import json
from unittest.mock import patch

from django.test import TestCase, Client
from django.urls import reverse

from core.services.exceptions import ReportRenderError


class StudentPDFReportViewTestCase(TestCase):
    """Test cases for POST /api/v1/generate-pdf"""

    def setUp(self):
        """Set up test client and payload"""
        self.client = Client()
        self.url = reverse('generate-pdf')
        self.payload = {
            'id': 42,
            'name': 'Asha Rao',
            'roll': 12,
            'dob': '2010-05-04T00:00:00Z',
            'gender': 'F',
            'class': '7',
            'section': 'B',
            'systemAccess': True,
        }

    def post_json(self, body):
        return self.client.post(self.url, data=body, content_type='application/json')

    def test_generate_pdf_url(self):
        """Test that the generate URL is configured"""
        self.assertEqual(self.url, '/api/v1/generate-pdf')

    def test_generate_pdf_returns_pdf(self):
        """Test that a valid record returns an inline PDF"""
        response = self.post_json(json.dumps(self.payload))

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Content-Type'], 'application/pdf')
        self.assertEqual(
            response['Content-Disposition'],
            'inline; filename=student_42_report.pdf'
        )
        self.assertTrue(response.content.startswith(b'%PDF'))

    def test_generate_pdf_with_empty_record(self):
        """Test that an empty object is a valid record"""
        response = self.post_json('{}')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response['Content-Disposition'],
            'inline; filename=student_0_report.pdf'
        )

    def test_invalid_json_returns_400(self):
        """Test that malformed JSON is rejected"""
        response = self.post_json('{not json')

        self.assertEqual(response.status_code, 400)
        data = json.loads(response.content)
        self.assertIn('Invalid request body', data['error'])

    def test_non_object_body_returns_400(self):
        """Test that a JSON array is rejected"""
        response = self.post_json(json.dumps([self.payload]))

        self.assertEqual(response.status_code, 400)
        data = json.loads(response.content)
        self.assertIn('JSON object', data['error'])

    def test_wrong_field_type_returns_400(self):
        """Test that a string roll number is rejected"""
        self.payload['roll'] = '12'
        response = self.post_json(json.dumps(self.payload))

        self.assertEqual(response.status_code, 400)
        data = json.loads(response.content)
        self.assertIn("'roll' must be an integer", data['error'])

    def test_unpaired_surrogate_in_name_returns_pdf(self):
        """Test that a lone surrogate escape does not break the document title"""
        self.payload['name'] = 'Asha \ud800'
        self.payload['currentAddress'] = '12 MG Road \udc00'
        body = json.dumps(self.payload)
        self.assertIn('\\ud800', body)

        response = self.post_json(body)

        self.assertEqual(response.status_code, 200)
        self.assertTrue(response.content.startswith(b'%PDF'))

    def test_get_not_allowed(self):
        """Test that only POST is accepted"""
        response = self.client.get(self.url)
        self.assertEqual(response.status_code, 405)

    def test_render_error_returns_500(self):
        """Test that serialization failures become a 500 without a PDF body"""
        with patch(
            'core.views.ReportService.render',
            side_effect=ReportRenderError('Failed to serialize PDF: boom')
        ):
            response = self.post_json(json.dumps(self.payload))

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response['Content-Type'], 'application/json')
        data = json.loads(response.content)
        self.assertIn('Error generating PDF', data['error'])


class HealthCheckViewTestCase(TestCase):
    """Test cases for /health"""

    def setUp(self):
        """Set up test client"""
        self.client = Client()

    def test_health_get(self):
        """Test health check over GET"""
        response = self.client.get('/health')

        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            json.loads(response.content),
            {'status': 'ok', 'service': 'student-pdf-report'}
        )

    def test_health_post(self):
        """Test health check over POST"""
        response = self.client.post('/health')
        self.assertEqual(response.status_code, 200)

    def test_health_rejects_other_methods(self):
        """Test that other methods are not allowed"""
        response = self.client.delete('/health')
        self.assertEqual(response.status_code, 405)
