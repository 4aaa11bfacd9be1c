"""
Patient registry endpoints.

Patients are added, fetched by id and removed.  A missing patient is a
404 on fetch, while deleting one is a silent no-op answering 204.
"""
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from clinic.exceptions import NotFoundError
from clinic.serializers.patient import PatientSerializer
from clinic.services.patients import add_patient, delete_patient, get_patient


@api_view(['POST'])
def create_patient(request):
    patient = add_patient(request.data)
    return Response(PatientSerializer(patient).data, status=status.HTTP_201_CREATED)


@api_view(['GET', 'DELETE'])
def patient_detail(request, pk: int):
    if request.method == 'DELETE':
        delete_patient(pk)
        return Response(status=status.HTTP_204_NO_CONTENT)

    patient = get_patient(pk)
    if patient is None:
        raise NotFoundError('patient', pk)
    return Response(PatientSerializer(patient).data)
