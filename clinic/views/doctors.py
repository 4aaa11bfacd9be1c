"""
Doctor registry endpoints.

Doctors are only ever added or removed; there is no listing or update
endpoint.  Deleting an id that does not exist still answers 204.
"""
from rest_framework.decorators import api_view
from rest_framework.response import Response
from rest_framework import status

from clinic.serializers.doctor import DoctorSerializer
from clinic.services.doctors import add_doctor, delete_doctor


@api_view(['POST'])
def create_doctor(request):
    doctor = add_doctor(request.data)
    return Response(DoctorSerializer(doctor).data, status=status.HTTP_201_CREATED)


@api_view(['DELETE'])
def remove_doctor(request, pk: int):
    delete_doctor(pk)
    return Response(status=status.HTTP_204_NO_CONTENT)
