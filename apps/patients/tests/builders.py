import random
import string
from datetime import date, timedelta

from apps.patients.models import PATIENT_FIELDS, Gender, Patient


def _letters(lo=2, hi=30) -> str:
    return "".join(random.choices(string.ascii_letters, k=random.randint(lo, hi)))


def random_patient(**overrides) -> Patient:
    """Start out with a valid randomized (unsaved) patient, then apply overrides."""
    start = date(1949, 1, 1)
    days = (date.today() - start).days
    values = {
        "given_name": _letters(),
        "additional_name": _letters(),
        "family_name": _letters(),
        "birth_date": start + timedelta(days=random.randint(0, days)),
        "email": f"{_letters(20, 20)}@{_letters(20, 20)}.com".lower(),
        "gender": random.choice(Gender.values),
        "height": random.randint(140, 220),
        "weight": random.randint(50, 90),
    }
    values.update(overrides)
    return Patient(**values)


def field_values(patient: Patient) -> dict:
    return {name: getattr(patient, name) for name in PATIENT_FIELDS}
