import logging
from typing import Any, Mapping, Optional

from clinic.exceptions import ValidationError
from clinic.models import Doctor, Speciality
from clinic.repositories import DoctorRepository, Repository
from clinic.serializers.doctor import DoctorSerializer

logger = logging.getLogger(__name__)


def check_doctor(data: Mapping[str, Any]) -> dict:
    """Validate raw doctor input and return model field values ready to insert."""
    s = DoctorSerializer(data=data)
    if not s.is_valid():
        raise ValidationError(s.errors)
    return dict(s.validated_data)


def add_doctor(data: Mapping[str, Any], *, repo: Optional[Repository[Doctor]] = None) -> Doctor:
    repo = repo or DoctorRepository()
    doctor = repo.insert(**check_doctor(data))
    logger.info('doctor %s added: %s in %s', doctor.id, doctor.speciality, doctor.city)
    return doctor


def delete_doctor(pk: int, *, repo: Optional[Repository[Doctor]] = None) -> bool:
    repo = repo or DoctorRepository()
    existed = repo.delete_by_id(pk)
    if existed:
        logger.info('doctor %s deleted', pk)
    else:
        logger.info('doctor %s not found, nothing to delete', pk)
    return existed


def find_by_city_and_speciality(city: str, speciality: Speciality, *,
                                repo: Optional[Repository[Doctor]] = None) -> list[Doctor]:
    repo = repo or DoctorRepository()
    # Case-insensitive collations (MySQL utf8mb4 defaults) also return 'delhi' for 'Delhi'
    return [d for d in repo.find_by_filter(city=city, speciality=speciality) if d.city == city]
