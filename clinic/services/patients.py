import logging
from typing import Any, Mapping, Optional

from clinic.exceptions import ValidationError
from clinic.models import Patient
from clinic.repositories import PatientRepository, Repository
from clinic.serializers.patient import PatientSerializer

logger = logging.getLogger(__name__)


def check_patient(data: Mapping[str, Any]) -> dict:
    """Validate raw patient input and return model field values ready to insert."""
    s = PatientSerializer(data=data)
    if not s.is_valid():
        raise ValidationError(s.errors)
    return dict(s.validated_data)


def add_patient(data: Mapping[str, Any], *, repo: Optional[Repository[Patient]] = None) -> Patient:
    repo = repo or PatientRepository()
    patient = repo.insert(**check_patient(data))
    logger.info('patient %s added: %s in %s', patient.id, patient.symptom, patient.city)
    return patient


def get_patient(pk: int, *, repo: Optional[Repository[Patient]] = None) -> Optional[Patient]:
    repo = repo or PatientRepository()
    return repo.find_by_id(pk)


def delete_patient(pk: int, *, repo: Optional[Repository[Patient]] = None) -> bool:
    repo = repo or PatientRepository()
    existed = repo.delete_by_id(pk)
    if existed:
        logger.info('patient %s deleted', pk)
    else:
        logger.info('patient %s not found, nothing to delete', pk)
    return existed
