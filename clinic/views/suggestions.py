from rest_framework.decorators import api_view
from rest_framework.response import Response

from clinic.serializers.doctor import DoctorSerializer
from clinic.services.suggestions import suggest_doctors


@api_view(['GET'])
def suggest(request, patient_id: int):
    """Return every doctor matching the patient's city and symptom.

    Errors: 404 ``not_found`` for an unknown patient, 422
    ``unsupported_region`` for an unserved city, 404 ``no_match`` when no
    doctor fits.
    """
    doctors = suggest_doctors(patient_id)
    return Response(DoctorSerializer(doctors, many=True).data)
