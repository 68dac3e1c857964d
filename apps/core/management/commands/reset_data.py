"""
Management command to delete all planning data
"""
from django.core.management.base import BaseCommand

from core.backup import reset_data


class Command(BaseCommand):
    help = "Deletes all orders, commodities, land and plantings"

    def add_arguments(self, parser):
        parser.add_argument(
            '--noinput',
            action='store_true',
            help='Do not ask for confirmation',
        )

    def handle(self, *args, **options):
        if not options['noinput']:
            answer = input("This deletes all planning data. Type 'yes' to continue: ")
            if answer.strip().lower() != 'yes':
                self.stdout.write(self.style.WARNING("Cancelled."))
                return

        reset_data()
        self.stdout.write(self.style.SUCCESS("All data cleared."))
