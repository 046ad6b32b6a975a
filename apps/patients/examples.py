"""
Query-by-example for patients.

A template is a transient ``Patient`` with some fields set. Unset fields are
ignored, text fields match case-insensitively by substring, everything else
matches exactly. An empty template matches every record.
"""
from __future__ import annotations

import logging
from typing import Any, Mapping

from django.db.models import Q

from .merging import null_field_names
from .models import PATIENT_FIELDS, TEXT_FIELDS, Patient
from .serializers import PatientExampleSerializer

logger = logging.getLogger(__name__)


def _first(value: Any) -> Any:
    # QueryDict.dict() already collapses lists; plain dicts may not.
    if isinstance(value, (list, tuple)):
        return value[-1] if value else None
    return value


def decode_example(params: Mapping[str, Any]) -> Patient:
    """
    Build an unsaved example ``Patient`` from raw request parameters.

    Unknown keys (``page``, ``size``, anything else) are skipped and blank
    values count as absent. Values that do not coerce raise
    ``rest_framework.exceptions.ValidationError``.
    """
    data = {}
    for name in PATIENT_FIELDS:
        value = _first(params.get(name))
        if value is None:
            continue
        if isinstance(value, str):
            value = value.strip()
            if not value:
                continue
        data[name] = value

    serializer = PatientExampleSerializer(data=data)
    serializer.is_valid(raise_exception=True)
    return Patient(id=None, **serializer.validated_data)


def build_example_filter(template: Patient) -> Q:
    absent = null_field_names(template)
    cond = Q()
    for name in PATIENT_FIELDS:
        if name in absent:
            continue
        value = getattr(template, name)
        if name in TEXT_FIELDS:
            cond &= Q(**{f"{name}__icontains": value})
        else:
            cond &= Q(**{name: value})
    logger.debug("patient example filter", extra={"filter": str(cond)})
    return cond
