import uuid
from datetime import date

from apps.patients.merging import full_replace, null_field_names, partial_merge
from apps.patients.models import PATIENT_FIELDS, Patient

from .builders import field_values, random_patient


def test_null_field_names_only_family_name_set():
    patient = Patient(family_name="Doe")
    assert null_field_names(patient) == set(PATIENT_FIELDS) - {"family_name"}


def test_null_field_names_ignores_id_and_keeps_falsy_values():
    patient = Patient(id=None, given_name="", height=0)
    absent = null_field_names(patient)
    assert "id" not in absent
    assert "given_name" not in absent
    assert "height" not in absent
    assert "weight" in absent


def test_null_field_names_on_fully_populated_patient_is_empty():
    assert null_field_names(random_patient()) == frozenset()


def test_full_replace_copies_every_field_but_keeps_destination_id():
    destination = random_patient()
    destination_id = destination.id
    source = random_patient(given_name=None, birth_date=None)

    result = full_replace(destination, source)

    assert result is destination
    assert result.id == destination_id
    assert field_values(result) == field_values(source)
    assert result.given_name is None
    assert result.birth_date is None


def test_full_replace_with_empty_source_clears_everything():
    destination = random_patient()
    destination_id = destination.id

    full_replace(destination, Patient(id=None))

    assert destination.id == destination_id
    assert null_field_names(destination) == set(PATIENT_FIELDS)


def test_partial_merge_only_copies_present_fields():
    destination = random_patient(given_name="Jane", family_name=None)
    before = field_values(destination)
    source = Patient(id=uuid.uuid4(), family_name="Doe", birth_date=date(1990, 4, 12))
    absent = null_field_names(source)

    partial_merge(destination, source, absent)

    after = field_values(destination)
    for name in absent:
        assert after[name] == before[name]
    assert destination.family_name == "Doe"
    assert destination.birth_date == date(1990, 4, 12)
    assert destination.given_name == "Jane"
    assert destination.id != source.id


def test_partial_merge_with_all_fields_absent_is_a_no_op():
    destination = random_patient()
    before = field_values(destination)
    destination_id = destination.id

    partial_merge(destination, random_patient(), set(PATIENT_FIELDS))

    assert field_values(destination) == before
    assert destination.id == destination_id


def test_partial_merge_with_entirely_absent_source():
    destination = random_patient()
    before = field_values(destination)
    source = Patient(id=None)

    partial_merge(destination, source, null_field_names(source))

    assert field_values(destination) == before
