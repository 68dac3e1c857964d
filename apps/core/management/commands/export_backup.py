"""
Management command to write a JSON backup of all planning data
"""
import json

from django.core.management.base import BaseCommand

from core.backup import export_backup


class Command(BaseCommand):
    help = "Writes a JSON backup to a file, or to stdout when no file is given"

    def add_arguments(self, parser):
        parser.add_argument('--output', type=str, help='Path of the backup file to write')

    def handle(self, *args, **options):
        data = json.dumps(export_backup(), indent=2)

        output = options.get('output')
        if not output:
            self.stdout.write(data)
            return

        with open(output, 'w', encoding='utf-8') as f:
            f.write(data)
        self.stdout.write(self.style.SUCCESS(f"Backup written to {output}"))
