"""
Tests for the suggestion engine.

The first half runs the engine against in-memory repositories, the
second half against the real tables.
"""
from types import SimpleNamespace

import pytest

from clinic.exceptions import NoMatchError, NotFoundError, UnsupportedRegionError
from clinic.models import Doctor, Patient
from clinic.services.suggestions import suggest_doctors


class InMemoryRepository:
    """Dict-backed stand-in for :class:`clinic.repositories.ModelRepository`."""

    def __init__(self, *rows):
        self.rows = {}
        self._next_id = 1
        for fields in rows:
            self.insert(**fields)

    def insert(self, **fields):
        # Ids are never reused, even after a delete
        obj = SimpleNamespace(id=self._next_id, **fields)
        self._next_id += 1
        self.rows[obj.id] = obj
        return obj

    def delete_by_id(self, pk):
        return self.rows.pop(pk, None) is not None

    def find_by_id(self, pk):
        return self.rows.get(pk)

    def find_by_filter(self, **equals):
        return [r for r in self.rows.values() if all(getattr(r, k) == v for k, v in equals.items())]


def _patient(city='Delhi', symptom='ARTHRITIS'):
    return {'name': 'Asha', 'city': city, 'email': 'asha@example.com',
            'phone_number': '9876543210', 'symptom': symptom}


def _doctor(name, city, speciality):
    return {'name': name, 'city': city, 'email': f'{name.lower()}@example.com',
            'phone_number': '9123456789', 'speciality': speciality}


def test_fake_engine_returns_only_matching_doctors():
    patients = InMemoryRepository(_patient(city='Noida', symptom='SKIN_BURN'))
    doctors = InMemoryRepository(
        _doctor('Skin1', 'Noida', 'DERMATOLOGY'),
        _doctor('Skin2', 'Delhi', 'DERMATOLOGY'),
        _doctor('Ent1', 'Noida', 'ENT'),
        _doctor('Skin3', 'Noida', 'DERMATOLOGY'),
    )
    result = suggest_doctors(1, patients=patients, doctors=doctors)
    assert [d.name for d in result] == ['Skin1', 'Skin3']


def test_fake_engine_unknown_patient():
    with pytest.raises(NotFoundError):
        suggest_doctors(42, patients=InMemoryRepository(), doctors=InMemoryRepository())


def test_fake_engine_region_checked_before_doctor_lookup():
    class ExplodingRepository(InMemoryRepository):
        def find_by_filter(self, **equals):
            raise AssertionError('doctor registry must not be queried')

    patients = InMemoryRepository(_patient(city='Mumbai'))
    with pytest.raises(UnsupportedRegionError):
        suggest_doctors(1, patients=patients, doctors=ExplodingRepository())


@pytest.mark.django_db
def test_delhi_arthritis_patient_gets_delhi_orthopaedic():
    doctor = Doctor.objects.create(**_doctor('Bone', 'Delhi', 'ORTHOPAEDIC'))
    patient = Patient.objects.create(**_patient())
    assert suggest_doctors(patient.id) == [doctor]


@pytest.mark.django_db
def test_unserved_city_rejected_even_with_doctors_there():
    Doctor.objects.create(**_doctor('Bone', 'Mumbai', 'ORTHOPAEDIC'))
    patient = Patient.objects.create(**_patient(city='Mumbai'))
    with pytest.raises(UnsupportedRegionError):
        suggest_doctors(patient.id)


@pytest.mark.django_db
def test_missing_patient_raises_not_found():
    with pytest.raises(NotFoundError) as exc:
        suggest_doctors(999)
    assert exc.value.resource == 'patient'
    assert exc.value.status_code == 404


@pytest.mark.django_db
def test_no_match_when_speciality_absent_in_city():
    # Right speciality, wrong city; right city, wrong speciality
    Doctor.objects.create(**_doctor('Bone', 'Noida', 'ORTHOPAEDIC'))
    Doctor.objects.create(**_doctor('Ear', 'Faridabad', 'ENT'))
    patient = Patient.objects.create(**_patient(city='Faridabad', symptom='BACK_PAIN'))
    with pytest.raises(NoMatchError):
        suggest_doctors(patient.id)


@pytest.mark.django_db
def test_match_set_is_exact_and_in_storage_order():
    wanted = [
        Doctor.objects.create(**_doctor('Gyn1', 'Faridabad', 'GYNECOLOGY')),
        Doctor.objects.create(**_doctor('Gyn2', 'Faridabad', 'GYNECOLOGY')),
    ]
    Doctor.objects.create(**_doctor('Gyn3', 'Delhi', 'GYNECOLOGY'))
    Doctor.objects.create(**_doctor('Derm', 'Faridabad', 'DERMATOLOGY'))
    patient = Patient.objects.create(**_patient(city='Faridabad', symptom='DYSMENORRHEA'))

    result = suggest_doctors(patient.id)
    assert result == wanted
    assert all(d.city == 'Faridabad' and d.speciality == 'GYNECOLOGY' for d in result)


def test_fake_repository_never_reuses_ids():
    repo = InMemoryRepository(_patient(), _patient(city='Noida'))
    assert repo.delete_by_id(1) is True
    fresh = repo.insert(**_patient(city='Faridabad'))
    assert fresh.id == 3
    assert repo.find_by_id(2).city == 'Noida'
