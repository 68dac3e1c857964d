"""
Management command to restore planning data from a JSON backup
"""
import json
import os

from django.core.management.base import BaseCommand, CommandError

from core.backup import import_backup


class Command(BaseCommand):
    help = "Replaces all data with the contents of a JSON backup file"

    def add_arguments(self, parser):
        parser.add_argument('path', type=str, help='Path to the backup file')

    def handle(self, *args, **options):
        path = options['path']
        if not os.path.exists(path):
            raise CommandError(f"Backup file not found at {path}")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            counts = import_backup(data)
        except (json.JSONDecodeError, ValueError) as e:
            raise CommandError(f"Error importing backup: {e}")

        self.stdout.write(
            self.style.SUCCESS(
                f"Imported {counts['orders']} orders, {counts['commodities']} commodities, "
                f"{counts['lots']} lots and {counts['plantings']} plantings."
            )
        )
