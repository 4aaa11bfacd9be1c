"""
Database models for the referral service.

Doctors and patients are independent records; nothing links them in
the schema.  They meet only when a suggestion is computed, by city and
by the speciality implied by the patient's symptom (see
:mod:`clinic.rules`).
"""
from __future__ import annotations

from django.db import models


class Speciality(models.TextChoices):
    ORTHOPAEDIC = 'ORTHOPAEDIC', 'Orthopaedic'
    GYNECOLOGY = 'GYNECOLOGY', 'Gynecology'
    DERMATOLOGY = 'DERMATOLOGY', 'Dermatology'
    ENT = 'ENT', 'ENT'


class Symptom(models.TextChoices):
    ARTHRITIS = 'ARTHRITIS', 'Arthritis'
    BACK_PAIN = 'BACK_PAIN', 'Back pain'
    TISSUE_INJURIES = 'TISSUE_INJURIES', 'Tissue injuries'
    DYSMENORRHEA = 'DYSMENORRHEA', 'Dysmenorrhea'
    SKIN_INFECTION = 'SKIN_INFECTION', 'Skin infection'
    SKIN_BURN = 'SKIN_BURN', 'Skin burn'
    EAR_PAIN = 'EAR_PAIN', 'Ear pain'


class Doctor(models.Model):
    """A doctor available for referral in one city under one speciality."""
    name = models.CharField(max_length=255)
    city = models.CharField(max_length=20, db_index=True)
    email = models.EmailField(max_length=254)
    phone_number = models.CharField(max_length=32)
    speciality = models.CharField(max_length=20, choices=Speciality.choices)

    class Meta:
        ordering = ['id']
        indexes = [
            # Suggestion lookups always filter on both columns
            models.Index(fields=['city', 'speciality'], name='clinic_doctor_city_spec_idx'),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.speciality}, {self.city})"


class Patient(models.Model):
    """A patient with the single symptom they reported."""
    name = models.CharField(max_length=255)
    city = models.CharField(max_length=20)
    email = models.EmailField(max_length=254)
    phone_number = models.CharField(max_length=32)
    symptom = models.CharField(max_length=20, choices=Symptom.choices)

    class Meta:
        ordering = ['id']

    def __str__(self) -> str:
        return f"{self.name} ({self.symptom}, {self.city})"
