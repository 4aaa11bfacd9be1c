"""
Django admin registrations for the clinic models.

Doctors and patients can be inspected and corrected through ``/admin/``
during development.
"""

from django.contrib import admin

from .models import Doctor, Patient


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'speciality', 'city', 'email', 'phone_number')
    list_filter = ('speciality', 'city')
    search_fields = ('name', 'email', 'phone_number')


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ('id', 'name', 'symptom', 'city', 'email', 'phone_number')
    list_filter = ('symptom', 'city')
    search_fields = ('name', 'email', 'phone_number')
