from rest_framework import serializers

from clinic.models import Doctor, Speciality
from .contact import ContactSerializer


class DoctorSerializer(ContactSerializer):
    speciality = serializers.ChoiceField(choices=Speciality.choices)

    class Meta:
        model = Doctor
        fields = ['id', 'name', 'city', 'email', 'phoneNumber', 'speciality']
        read_only_fields = ['id']
