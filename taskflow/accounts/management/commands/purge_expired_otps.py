from django.core.management.base import BaseCommand

from accounts.services.otp_service import purge_expired


class Command(BaseCommand):
    help = "Delete OTP rows that are used or past their expiry."

    def handle(self, *args, **options):
        deleted = purge_expired()
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} OTP row(s)"))
