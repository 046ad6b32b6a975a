from __future__ import annotations

import logging
from typing import Optional
from uuid import UUID

from django.db import DatabaseError, transaction
from django.db.models import Q, QuerySet
from rest_framework.exceptions import NotFound

from apps.core.exceptions import ResourceConflict
from .merging import full_replace, null_field_names, partial_merge
from .models import PATIENT_FIELDS, Patient
from .pagination import PageRequest, PatientPage

logger = logging.getLogger(__name__)


def not_found(pk=None) -> NotFound:
    path = Patient.RESOURCE_PATH if pk is None else f"{Patient.RESOURCE_PATH}/{pk}"
    return NotFound(f"Resource {path} not found")


class PatientService:
    """
    Persistence-facing operations for the patient resource.

    The queryset is passed in rather than looked up so callers (and tests) can
    scope it; by default it is every patient.
    """

    def __init__(self, queryset: Optional[QuerySet] = None):
        self.queryset = queryset if queryset is not None else Patient.objects.all()

    # ---- Lookup ---------------------------------------------------------------

    def find(self, pk: UUID, for_update: bool = False) -> Optional[Patient]:
        qs = self.queryset.select_for_update() if for_update else self.queryset
        return qs.filter(pk=pk).first()

    def get(self, pk: UUID, for_update: bool = False) -> Patient:
        patient = self.find(pk, for_update=for_update)
        if patient is None:
            raise not_found(pk)
        return patient

    # ---- Writes ---------------------------------------------------------------

    def create(self, source: Patient) -> Patient:
        patient = full_replace(Patient(), source)
        patient.save(force_insert=True)
        logger.info("patient created", extra={"patient_id": str(patient.pk)})
        return patient

    def replace(self, pk: UUID, source: Patient) -> Patient:
        """PUT: every field comes from ``source``; unset fields are cleared."""
        with transaction.atomic():
            patient = full_replace(self.get(pk, for_update=True), source)
            self._save_existing(patient)
        logger.info("patient replaced", extra={"patient_id": str(pk)})
        return patient

    def patch(self, pk: UUID, source: Patient) -> Patient:
        """PATCH: only fields set on ``source`` are copied."""
        absent = null_field_names(source)
        with transaction.atomic():
            patient = partial_merge(self.get(pk, for_update=True), source, absent)
            self._save_existing(patient)
        logger.info(
            "patient patched",
            extra={
                "patient_id": str(pk),
                "fields": sorted(set(PATIENT_FIELDS) - absent),
            },
        )
        return patient

    def delete(self, pk: UUID) -> bool:
        """
        Idempotent delete. Returns whether a row was removed; a missing id is
        not an error.
        """
        deleted, _ = self.queryset.filter(pk=pk).delete()
        logger.info("patient delete", extra={"patient_id": str(pk), "deleted": bool(deleted)})
        return bool(deleted)

    def _save_existing(self, patient: Patient) -> None:
        # force_update so a concurrently deleted row is reported, never re-inserted
        try:
            patient.save(force_update=True)
        except DatabaseError as exc:
            logger.warning(
                "patient update lost a race",
                extra={"patient_id": str(patient.pk), "error": str(exc)},
            )
            raise ResourceConflict(
                f"Resource {patient.resource_path} was modified or removed concurrently."
            ) from exc

    # ---- Listing --------------------------------------------------------------

    def page(self, page_request: PageRequest, condition: Optional[Q] = None) -> PatientPage:
        qs = self.queryset
        if condition is not None:
            qs = qs.filter(condition)
        total = qs.count()
        start = page_request.offset
        contents = list(qs[start:start + page_request.page_size]) if start < total else []
        return PatientPage(request=page_request, total_elements=total, contents=contents)
