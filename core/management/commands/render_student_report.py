"""
Django management command that renders a student record stored as JSON
into a PDF report file.
"""

import json
from datetime import date
from pathlib import Path

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from core.services.exceptions import ReportRenderError
from core.services.reporting import ReportService
from reports.student_record import StudentRecord


class Command(BaseCommand):
    help = 'Render a student record from a JSON file into a PDF report'

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            'input',
            help='Path to a JSON file holding one student record',
        )
        parser.add_argument(
            '--output',
            help='Where to write the PDF (default: student_<id>_report.pdf)',
        )
        parser.add_argument(
            '--date',
            help='Generation date shown in the header, YYYY-MM-DD (default: today)',
        )

    def handle(self, *args, **options):
        """Execute the render."""
        input_path = Path(options['input'])

        try:
            data = json.loads(input_path.read_text(encoding='utf-8'))
        except FileNotFoundError:
            raise CommandError(f"Input file not found: {input_path}")
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise CommandError(f"Invalid JSON in {input_path}: {e}")

        try:
            record = StudentRecord.from_payload(data)
        except ValidationError as e:
            raise CommandError(f"Invalid student record: {'; '.join(e.messages)}")

        generated_on = None
        if options['date']:
            try:
                generated_on = date.fromisoformat(options['date'])
            except ValueError:
                raise CommandError(f"Invalid --date value: {options['date']} (expected YYYY-MM-DD)")

        try:
            result = ReportService().render(record, generated_on)
        except ReportRenderError as e:
            raise CommandError(str(e))

        output_path = Path(options['output'] or result.filename)
        output_path.write_bytes(result.pdf_bytes)

        self.stdout.write(self.style.SUCCESS(
            f"Wrote {output_path} ({len(result)} bytes, {result.page_count} page(s))"
        ))
