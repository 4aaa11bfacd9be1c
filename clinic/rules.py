"""
Referral rules: which speciality treats a symptom and which cities are served.

Both tables are fixed.  They are built once at import time and exposed
read-only; nothing stores or edits them at runtime.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from .models import Speciality, Symptom

SYMPTOM_SPECIALITY: Mapping[str, str] = MappingProxyType({
    Symptom.ARTHRITIS: Speciality.ORTHOPAEDIC,
    Symptom.BACK_PAIN: Speciality.ORTHOPAEDIC,
    Symptom.TISSUE_INJURIES: Speciality.ORTHOPAEDIC,
    Symptom.DYSMENORRHEA: Speciality.GYNECOLOGY,
    Symptom.SKIN_INFECTION: Speciality.DERMATOLOGY,
    Symptom.SKIN_BURN: Speciality.DERMATOLOGY,
    Symptom.EAR_PAIN: Speciality.ENT,
})

SERVICEABLE_CITIES: frozenset[str] = frozenset({'Delhi', 'Noida', 'Faridabad'})


def speciality_for(symptom: str) -> Speciality:
    """Return the speciality treating ``symptom``.

    Raises ``KeyError`` for a value outside :class:`Symptom`; stored
    patients always carry a valid symptom, so that only happens on
    programming errors.
    """
    return Speciality(SYMPTOM_SPECIALITY[symptom])


def is_serviceable(city: str) -> bool:
    # Exact, case-sensitive match
    return city in SERVICEABLE_CITIES
