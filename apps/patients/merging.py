"""
Field-level copy rules behind PUT and PATCH.

Request payloads are decoded into a transient, unsaved ``Patient`` whose
unspecified fields are ``None``. The helpers here decide which of those
fields land on the persisted record:

- ``full_replace`` copies every field, so an unset source field clears the
  destination (PUT).
- ``partial_merge`` skips the fields named in ``absent`` (PATCH), normally
  the result of ``null_field_names(source)``.

The id is never copied; the destination's id is authoritative. Nothing here
saves, the caller owns persistence.
"""
from __future__ import annotations

from typing import AbstractSet, FrozenSet

from .models import PATIENT_FIELDS, Patient


def null_field_names(patient: Patient) -> FrozenSet[str]:
    return frozenset(name for name in PATIENT_FIELDS if getattr(patient, name) is None)


def full_replace(destination: Patient, source: Patient) -> Patient:
    for name in PATIENT_FIELDS:
        setattr(destination, name, getattr(source, name))
    return destination


def partial_merge(destination: Patient, source: Patient, absent: AbstractSet[str]) -> Patient:
    for name in PATIENT_FIELDS:
        if name in absent:
            continue
        setattr(destination, name, getattr(source, name))
    return destination
