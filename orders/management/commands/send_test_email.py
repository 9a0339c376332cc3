from django.conf import settings
from django.core.management.base import BaseCommand, CommandError, CommandParser

from orders.services.notifications import send_test_email


class Command(BaseCommand):
    help = "Send a test email through the configured EMAIL_BACKEND and record it in the email log."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("to_email", help="Destination email address to send the test message to.")

    def handle(self, *args, **options):
        to_email = options["to_email"]
        self.stdout.write(self.style.NOTICE(f"EMAIL_BACKEND = {settings.EMAIL_BACKEND}"))
        self.stdout.write(self.style.NOTICE(f"DEFAULT_FROM_EMAIL = {getattr(settings, 'DEFAULT_FROM_EMAIL', '')}"))
        if not send_test_email(to_email):
            raise CommandError(f"FAILED • could not send to {to_email} (see email log)")
        self.stdout.write(self.style.SUCCESS(f"OK • Sent to {to_email}"))
