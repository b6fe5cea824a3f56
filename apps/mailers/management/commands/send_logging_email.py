from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from apps.mailers.mailer import LifecycleMailer


class Command(BaseCommand):
    help = "Send an operational logging email to support"

    def add_arguments(self, parser):
        parser.add_argument("subject", type=str, help="Email subject")
        parser.add_argument("details", nargs="*", type=str, help="Details as name=value pairs")

    def handle(self, *args, **options):
        details = {}
        for pair in options["details"]:
            name, sep, value = pair.partition("=")
            if not sep:
                raise CommandError(f"Expected name=value, got {pair!r}")
            details[name] = value

        self.stdout.write(f"Sending logging email to {settings.SUPPORT_EMAIL}...")
        LifecycleMailer().logging_email(options["subject"], details)
        self.stdout.write(self.style.SUCCESS(f"[OK] Sent '{options['subject']}'"))
