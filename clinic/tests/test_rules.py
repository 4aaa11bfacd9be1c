import pytest

from clinic.models import Speciality, Symptom
from clinic.rules import SERVICEABLE_CITIES, SYMPTOM_SPECIALITY, is_serviceable, speciality_for

EXPECTED = {
    'ARTHRITIS': 'ORTHOPAEDIC',
    'BACK_PAIN': 'ORTHOPAEDIC',
    'TISSUE_INJURIES': 'ORTHOPAEDIC',
    'DYSMENORRHEA': 'GYNECOLOGY',
    'SKIN_INFECTION': 'DERMATOLOGY',
    'SKIN_BURN': 'DERMATOLOGY',
    'EAR_PAIN': 'ENT',
}


def test_every_symptom_has_exactly_one_speciality():
    assert set(SYMPTOM_SPECIALITY) == set(Symptom.values)
    assert set(EXPECTED) == set(Symptom.values)


@pytest.mark.parametrize('symptom', list(Symptom))
def test_speciality_lookup_matches_table_and_is_stable(symptom):
    first = speciality_for(symptom)
    assert isinstance(first, Speciality)
    assert first.value == EXPECTED[symptom.value]
    # Plain strings from the database resolve the same way
    assert speciality_for(symptom.value) is first


def test_symptom_table_is_read_only():
    with pytest.raises(TypeError):
        SYMPTOM_SPECIALITY[Symptom.EAR_PAIN] = Speciality.DERMATOLOGY  # type: ignore[index]
    assert speciality_for(Symptom.EAR_PAIN) == Speciality.ENT


def test_unknown_symptom_raises_key_error():
    with pytest.raises(KeyError):
        speciality_for('HEADACHE')


def test_serviceable_cities():
    assert SERVICEABLE_CITIES == {'Delhi', 'Noida', 'Faridabad'}
    assert is_serviceable('Noida')
    assert not is_serviceable('Mumbai')
    # Matching is exact
    assert not is_serviceable('delhi')
    assert not is_serviceable(' Delhi')
