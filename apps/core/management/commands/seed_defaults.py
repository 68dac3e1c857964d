"""
Management command to load the starter catalog, land and orders
"""
from django.core.management.base import BaseCommand, CommandError

from core.backup import seed_defaults
from reference.models import Commodity


class Command(BaseCommand):
    help = "Replaces all data with the default commodities, land and orders"

    def add_arguments(self, parser):
        parser.add_argument(
            '--force',
            action='store_true',
            help='Seed even when commodities already exist (existing data is deleted)',
        )

    def handle(self, *args, **options):
        if Commodity.objects.exists() and not options['force']:
            raise CommandError("Data already exists. Use --force to replace it.")

        counts = seed_defaults()
        self.stdout.write(
            self.style.SUCCESS(
                f"Seeded {counts['commodities']} commodities, {counts['lots']} lots "
                f"and {counts['orders']} orders."
            )
        )
