"""
Management command to convert a BS date to its AD equivalent
Usage: python manage.py bs2ad [2075-12-25]
"""
import sys

from django.core.management.base import BaseCommand

from bikram_sambat.date import NepaliDate
from bikram_sambat.exceptions import NepaliDateError


class Command(BaseCommand):
    help = 'Print the AD (YYYY-MM-DD) date for a BS date, or for today when none is given'

    def add_arguments(self, parser):
        parser.add_argument(
            'bs_date',
            nargs='?',
            help='BS date as YYYY-MM-DD, YYYY.MM.DD or YYYY/MM/DD (default: today)'
        )

    def handle(self, *args, **options):
        bs_date = options['bs_date']

        try:
            nepali_date = NepaliDate.from_string(bs_date) if bs_date else NepaliDate.now()
        except NepaliDateError as e:
            self.stdout.write(str(e))
            sys.exit(1)

        self.stdout.write(nepali_date.to_date().isoformat())
