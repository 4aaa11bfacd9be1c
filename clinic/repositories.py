"""
Repository layer over the clinic models.

Services never touch ``Model.objects`` directly; they go through a
repository exposing four capabilities: insert, delete by id, find by id
and find by equality filter.  Lookups that may miss return ``None``
rather than raising, so every caller has to deal with absence itself.
"""
from __future__ import annotations

from typing import Any, Generic, Optional, Protocol, TypeVar

from django.db import models

from .models import Doctor, Patient

M = TypeVar('M', bound=models.Model)


class Repository(Protocol[M]):
    def insert(self, **fields: Any) -> M: ...

    def delete_by_id(self, pk: int) -> bool: ...

    def find_by_id(self, pk: int) -> Optional[M]: ...

    def find_by_filter(self, **equals: Any) -> list[M]: ...


class ModelRepository(Generic[M]):
    """Django ORM implementation of :class:`Repository`."""

    model: type[M]

    def insert(self, **fields: Any) -> M:
        return self.model.objects.create(**fields)

    def delete_by_id(self, pk: int) -> bool:
        deleted, _ = self.model.objects.filter(pk=pk).delete()
        return deleted > 0

    def find_by_id(self, pk: int) -> Optional[M]:
        return self.model.objects.filter(pk=pk).first()

    def find_by_filter(self, **equals: Any) -> list[M]:
        return list(self.model.objects.filter(**equals).order_by('id'))


class DoctorRepository(ModelRepository[Doctor]):
    model = Doctor


class PatientRepository(ModelRepository[Patient]):
    model = Patient
