from django.core.management.base import BaseCommand

from zr_core.owners.services import OwnerService


class Command(BaseCommand):
    help = "Create the default owner account if no owner exists (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument("--email", default=None, help="Defaults to DEFAULT_OWNER_EMAIL.")
        parser.add_argument("--password", default=None, help="Defaults to DEFAULT_OWNER_PASSWORD.")

    def handle(self, *args, **options):
        user, created = OwnerService.ensure_default_owner(email=options["email"], password=options["password"])
        if created:
            self.stdout.write(self.style.SUCCESS(f"Default owner created: {user.username}"))
        else:
            self.stdout.write(self.style.SUCCESS(f"Owner already exists: {user.username}"))
