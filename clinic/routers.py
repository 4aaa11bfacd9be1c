"""
URL mappings for the referral API.

Paths carry no trailing slash, matching ``APPEND_SLASH = False`` in the
settings.
"""
from django.urls import path, include

from .views import doctors, health, patients, suggestions

urlpatterns = [
    path('', include('django_prometheus.urls')),
    path('healthz', health.healthz, name='healthz'),
    # Doctors
    path('api/doctors', doctors.create_doctor, name='doctor-create'),
    path('api/doctors/<int:pk>', doctors.remove_doctor, name='doctor-delete'),
    # Patients
    path('api/patients', patients.create_patient, name='patient-create'),
    path('api/patients/<int:pk>', patients.patient_detail, name='patient-detail'),
    # Suggestions
    path('api/suggestions/<int:patient_id>', suggestions.suggest, name='suggestions'),
]
