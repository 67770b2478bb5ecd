"""
Django management command that serves the report API on the configured port.
"""

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand


class Command(BaseCommand):
    help = 'Run the student report service (development server) on PORT'

    def add_arguments(self, parser):
        """Add command arguments."""
        parser.add_argument(
            '--port',
            type=int,
            default=None,
            help='Port to listen on (default: PORT setting, 8080)',
        )
        parser.add_argument(
            '--addr',
            default='0.0.0.0',
            help='Address to bind (default: 0.0.0.0)',
        )

    def handle(self, *args, **options):
        """Start the server."""
        port = options['port'] or settings.PORT
        self.stdout.write(f"Student PDF service starting on port {port}")
        call_command('runserver', f"{options['addr']}:{port}")
