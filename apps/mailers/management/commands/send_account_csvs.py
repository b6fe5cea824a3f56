"""
Management command to mail the accounts and top documents CSVs.

Usage:
    python manage.py send_account_csvs

Cron (1st and 15th of the month):
    0 7 1,15 * * cd /path && python manage.py send_account_csvs
"""

from django.core.management.base import BaseCommand

from apps.mailers.mailer import LifecycleMailer


class Command(BaseCommand):
    help = "Mail the accounts and top documents CSV reports"

    def handle(self, *args, **options):
        message = LifecycleMailer().account_and_document_csvs()
        filenames = ", ".join(attachment[0] for attachment in message.attachments)
        self.stdout.write(self.style.SUCCESS(f"Sent {filenames} to {', '.join(message.to)}"))
