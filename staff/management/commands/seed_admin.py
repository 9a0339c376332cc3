import os

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError, CommandParser

from staff.models import StaffProfile


class Command(BaseCommand):
    help = "Create or update the initial admin from ADMIN_EMAIL / ADMIN_PASSWORD / ADMIN_NAME. Idempotent."

    def add_arguments(self, parser: CommandParser) -> None:
        parser.add_argument("--email", default=os.getenv("ADMIN_EMAIL", ""))
        parser.add_argument("--password", default=os.getenv("ADMIN_PASSWORD", ""))
        parser.add_argument("--name", default=os.getenv("ADMIN_NAME", "Admin"))

    def handle(self, *args, **options):
        email = (options["email"] or "").lower().strip()
        password = options["password"] or ""
        name = (options["name"] or "").strip()

        if not email or not password:
            raise CommandError("ADMIN_EMAIL and ADMIN_PASSWORD must be set.")
        if len(password) < 8:
            raise CommandError("ADMIN_PASSWORD must be at least 8 characters.")

        first, _, last = name.partition(" ")
        User = get_user_model()
        user, created = User.objects.get_or_create(
            username=email,
            defaults={"email": email, "first_name": first, "last_name": last},
        )
        user.email = email
        user.first_name = first
        user.last_name = last
        user.is_staff = True
        user.is_active = True
        user.set_password(password)
        user.save()
        StaffProfile.for_user(user).register_success()

        verb = "Created" if created else "Updated"
        self.stdout.write(self.style.SUCCESS(f"{verb} admin {email}"))
