import uuid
from datetime import date

import pytest
from rest_framework.exceptions import NotFound

from apps.core.exceptions import ResourceConflict
from apps.patients.models import Patient
from apps.patients.pagination import PageRequest
from apps.patients.services import PatientService


@pytest.mark.django_db
def test_create_assigns_id_and_ignores_source_id():
    source = Patient(given_name="Jane")
    source_id = source.id
    patient = PatientService().create(source)
    assert patient.pk is not None
    assert patient.pk != source_id
    assert Patient.objects.get(pk=patient.pk).given_name == "Jane"


@pytest.mark.django_db
def test_get_missing_raises_not_found():
    missing = uuid.uuid4()
    with pytest.raises(NotFound) as excinfo:
        PatientService().get(missing)
    assert str(excinfo.value.detail) == f"Resource /patients/{missing} not found"


@pytest.mark.django_db
def test_replace_and_patch_persist(patient_factory):
    patient = patient_factory(given_name="Jane", family_name=None)
    service = PatientService()

    service.patch(patient.pk, Patient(family_name="Doe"))
    patient.refresh_from_db()
    assert (patient.given_name, patient.family_name) == ("Jane", "Doe")

    service.replace(patient.pk, Patient(family_name="Doe"))
    patient.refresh_from_db()
    assert (patient.given_name, patient.family_name) == (None, "Doe")
    assert patient.birth_date is None


@pytest.mark.django_db
def test_replace_missing_raises_not_found():
    with pytest.raises(NotFound):
        PatientService().replace(uuid.uuid4(), Patient(family_name="Doe"))


@pytest.mark.django_db
@pytest.mark.parametrize("operation", ["replace", "patch"])
def test_update_of_concurrently_deleted_row_is_a_conflict(patient_factory, monkeypatch, operation):
    stale = patient_factory()
    Patient.objects.filter(pk=stale.pk).delete()
    service = PatientService()
    # the lookup still hands back the row another request has since deleted
    monkeypatch.setattr(service, "get", lambda pk, for_update=False: stale)

    with pytest.raises(ResourceConflict):
        getattr(service, operation)(stale.pk, Patient(family_name="Doe"))
    assert not Patient.objects.filter(pk=stale.pk).exists()


@pytest.mark.django_db
def test_delete_is_idempotent(patient_factory):
    patient = patient_factory()
    service = PatientService()
    assert service.delete(patient.pk) is True
    assert service.delete(patient.pk) is False
    assert service.delete(uuid.uuid4()) is False


@pytest.mark.django_db
def test_service_respects_scoped_queryset(patient_factory):
    inside = patient_factory(birth_date=date(1970, 1, 1))
    outside = patient_factory(birth_date=date(2000, 1, 1))
    service = PatientService(Patient.objects.filter(birth_date__lt=date(1990, 1, 1)))

    assert service.find(inside.pk) == inside
    assert service.find(outside.pk) is None


@pytest.mark.django_db
def test_page_slices_and_counts(patient_factory):
    for i in range(7):
        patient_factory(family_name=f"Family{i}", given_name="X")

    page = PatientService().page(PageRequest(page_number=1, page_size=3))

    assert page.total_elements == 7
    assert page.total_pages == 3
    assert [p.family_name for p in page.contents] == ["Family3", "Family4", "Family5"]


@pytest.mark.django_db
def test_page_past_the_end_is_empty(patient_factory):
    patient_factory()
    page = PatientService().page(PageRequest(page_number=5, page_size=10))
    assert page.contents == []
    assert page.total_elements == 1
