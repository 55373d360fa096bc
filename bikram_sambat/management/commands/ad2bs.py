"""
Management command to convert an AD date to its BS equivalent
Usage: python manage.py ad2bs [2019-04-08] [--format "YYYY/MM/DD"]
"""
import sys
from datetime import datetime

from django.core.management.base import BaseCommand

from bikram_sambat.conf import get_setting
from bikram_sambat.date import NepaliDate
from bikram_sambat.exceptions import NepaliDateError


class Command(BaseCommand):
    help = 'Print the BS date for an AD date, or for today when none is given'

    def add_arguments(self, parser):
        parser.add_argument(
            'ad_date',
            nargs='?',
            help='AD date as YYYY-MM-DD (default: today)'
        )
        parser.add_argument(
            '--format',
            dest='pattern',
            default=None,
            help='Output pattern using YYYY, YY, MM, M, DD, D '
                 '(default: BIKRAM_SAMBAT["DEFAULT_FORMAT"])'
        )

    def handle(self, *args, **options):
        ad_date = options['ad_date']
        pattern = options['pattern'] or get_setting('DEFAULT_FORMAT')

        try:
            if ad_date:
                nepali_date = NepaliDate.from_date(datetime.strptime(ad_date, '%Y-%m-%d').date())
            else:
                nepali_date = NepaliDate.now()
        except NepaliDateError as e:
            self.stdout.write(str(e))
            sys.exit(1)
        except ValueError:
            self.stdout.write(f"Invalid AD date '{ad_date}': expected YYYY-MM-DD")
            sys.exit(1)

        self.stdout.write(nepali_date.format(pattern))
