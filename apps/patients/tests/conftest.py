import pytest
from rest_framework.test import APIClient

from apps.patients.models import Patient

from .builders import random_patient


@pytest.fixture
def patient_factory(db):
    def make(**overrides) -> Patient:
        patient = random_patient(**overrides)
        patient.save()
        return patient

    return make


@pytest.fixture
def api_client():
    return APIClient()
