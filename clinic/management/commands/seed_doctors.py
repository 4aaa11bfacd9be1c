"""
Management command to seed the doctor registry with a sample roster.

Every serviceable city gets one doctor per speciality.  Running it again
is harmless: doctors are matched on email and left alone if present.
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from clinic.models import Doctor, Speciality
from clinic.rules import SERVICEABLE_CITIES

ROSTER_NAMES = {
    Speciality.ORTHOPAEDIC: 'Arjun Mehta',
    Speciality.GYNECOLOGY: 'Kavita Rao',
    Speciality.DERMATOLOGY: 'Nisha Kapoor',
    Speciality.ENT: 'Rohan Verma',
}


class Command(BaseCommand):
    help = "Ensure one sample doctor per speciality exists in every serviceable city (idempotent)."

    def add_arguments(self, parser):
        parser.add_argument('--flush', action='store_true', help='Delete all doctors before seeding.')

    @transaction.atomic
    def handle(self, *args, **opts):
        if opts['flush']:
            deleted, _ = Doctor.objects.all().delete()
            self.stdout.write(f"deleted {deleted} doctor(s)")

        for n, city in enumerate(sorted(SERVICEABLE_CITIES)):
            for m, speciality in enumerate(Speciality):
                name = ROSTER_NAMES[speciality]
                email = f"{name.split()[0].lower()}.{city.lower()}@referral.example"
                doctor, created = Doctor.objects.get_or_create(
                    email=email,
                    defaults={
                        'name': f"Dr. {name}",
                        'city': city,
                        'phone_number': f"98{n:04d}{m:04d}",
                        'speciality': speciality,
                    },
                )
                verb = 'created' if created else 'exists'
                self.stdout.write(self.style.SUCCESS(f"{verb}: {doctor}"))
        self.stdout.write(self.style.SUCCESS("Doctor roster ensured."))
