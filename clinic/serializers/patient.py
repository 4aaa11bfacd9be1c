from rest_framework import serializers

from clinic.models import Patient, Symptom
from clinic.rules import speciality_for
from .contact import ContactSerializer


class PatientSerializer(ContactSerializer):
    symptom = serializers.ChoiceField(choices=Symptom.choices)
    # Derived from the symptom on output; never accepted as input
    speciality = serializers.SerializerMethodField()

    class Meta:
        model = Patient
        fields = ['id', 'name', 'city', 'email', 'phoneNumber', 'symptom', 'speciality']
        read_only_fields = ['id']

    def get_speciality(self, obj) -> str:
        return speciality_for(obj.symptom).value
