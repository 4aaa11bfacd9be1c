"""
Doctor suggestions for a patient.

A patient is matched against doctors practising in the patient's own
city under the speciality their symptom maps to.  There is no ranking:
every match is returned, in the order the doctor registry stores them.
"""
import logging
from typing import Optional

from clinic.exceptions import NoMatchError, NotFoundError, UnsupportedRegionError
from clinic.models import Doctor, Patient
from clinic.repositories import Repository
from clinic.rules import is_serviceable, speciality_for
from clinic.services.doctors import find_by_city_and_speciality
from clinic.services.patients import get_patient

logger = logging.getLogger(__name__)


def suggest_doctors(patient_id: int, *,
                    patients: Optional[Repository[Patient]] = None,
                    doctors: Optional[Repository[Doctor]] = None) -> list[Doctor]:
    """Return the doctors suited to the patient's city and symptom.

    Raises:
      NotFoundError: no patient has ``patient_id``.
      UnsupportedRegionError: the patient's city is not served, whether
        or not doctors exist there.
      NoMatchError: the city is served but no doctor of the required
        speciality practises there.
    """
    patient = get_patient(patient_id, repo=patients)
    if patient is None:
        logger.info('suggestion for unknown patient %s', patient_id)
        raise NotFoundError('patient', patient_id)

    speciality = speciality_for(patient.symptom)
    if not is_serviceable(patient.city):
        logger.info('patient %s is in unserved city %r', patient_id, patient.city)
        raise UnsupportedRegionError()

    matches = find_by_city_and_speciality(patient.city, speciality, repo=doctors)
    if not matches:
        logger.info('no %s doctor in %s for patient %s', speciality.value, patient.city, patient_id)
        raise NoMatchError()

    logger.debug('%d doctor(s) suggested for patient %s', len(matches), patient_id)
    return matches
