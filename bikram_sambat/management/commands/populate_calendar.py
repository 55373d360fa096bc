"""
Management command to populate Nepali calendar data
Usage: python manage.py populate_calendar
"""
import logging

from django.core.management.base import BaseCommand
from django.db import models, transaction

from bikram_sambat.calendar_data import DEFAULT_TABLE
from bikram_sambat.converter import get_default_converter
from bikram_sambat.models import NepaliCalendar

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Populate Nepali calendar data for BS years'

    def add_arguments(self, parser):
        parser.add_argument(
            '--start-year',
            type=int,
            default=DEFAULT_TABLE.start_year,
            help=f'Starting BS year (default: {DEFAULT_TABLE.start_year})'
        )
        parser.add_argument(
            '--end-year',
            type=int,
            default=DEFAULT_TABLE.end_year,
            help=f'Ending BS year (default: {DEFAULT_TABLE.end_year})'
        )
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing calendar data before populating'
        )

    def handle(self, *args, **options):
        start_year = options['start_year']
        end_year = options['end_year']
        clear_existing = options['clear']
        converter = get_default_converter()

        if clear_existing:
            self.stdout.write(self.style.WARNING('Clearing existing calendar data...'))
            NepaliCalendar.objects.all().delete()

        self.stdout.write(f'Populating calendar data for BS years {start_year}-{end_year}...')

        created_count = 0
        updated_count = 0

        with transaction.atomic():
            for year in range(start_year, end_year + 1):
                if not DEFAULT_TABLE.contains_year(year):
                    self.stdout.write(
                        self.style.WARNING(f'Skipping year {year} - no data available')
                    )
                    continue

                for month, days_in_month in enumerate(DEFAULT_TABLE.month_lengths(year), start=1):
                    ad_start = converter.bs_to_gregorian(year, month - 1, 1).date()

                    obj, created = NepaliCalendar.objects.update_or_create(
                        bs_year=year,
                        month=month,
                        defaults={
                            'days_in_month': days_in_month,
                            'ad_start_date': ad_start,
                        }
                    )

                    if created:
                        created_count += 1
                    else:
                        updated_count += 1

        logger.info(
            "Calendar populated for BS %s-%s: %s created, %s updated",
            start_year, end_year, created_count, updated_count
        )
        self.stdout.write(
            self.style.SUCCESS(
                f'Successfully populated calendar data!\n'
                f'Created: {created_count} entries\n'
                f'Updated: {updated_count} entries'
            )
        )

        total_entries = NepaliCalendar.objects.count()
        year_range = NepaliCalendar.objects.aggregate(
            min_year=models.Min('bs_year'),
            max_year=models.Max('bs_year')
        )

        self.stdout.write(
            self.style.SUCCESS(
                f'\nCalendar Summary:\n'
                f'Total entries: {total_entries}\n'
                f'Year range: {year_range["min_year"]} - {year_range["max_year"]}'
            )
        )
