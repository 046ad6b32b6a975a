from __future__ import annotations

import uuid

from django.db import models


class Gender(models.TextChoices):
    MALE = "male", "Male"
    FEMALE = "female", "Female"
    OTHER = "other", "Other"
    UNKNOWN = "unknown", "Unknown"


# First-class fields that merges copy and examples filter on. The id is
# store-assigned and never copied.
PATIENT_FIELDS = (
    "given_name",
    "additional_name",
    "family_name",
    "birth_date",
    "email",
    "gender",
    "height",
    "weight",
)

# Matched case-insensitively by substring in query-by-example.
TEXT_FIELDS = frozenset({"given_name", "additional_name", "family_name", "email"})


# -------------------------- Model -------------------------- #

class Patient(models.Model):
    RESOURCE_PATH = "/patients"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    # --- Demographics (every field may be unset) ---
    given_name = models.CharField(max_length=100, null=True, blank=True)
    additional_name = models.CharField(max_length=100, null=True, blank=True)
    family_name = models.CharField(max_length=100, null=True, blank=True)
    birth_date = models.DateField(null=True, blank=True)
    email = models.EmailField(max_length=100, null=True, blank=True)
    gender = models.CharField(max_length=16, choices=Gender.choices, null=True, blank=True)

    # --- Measurements (cm / kg) ---
    height = models.PositiveSmallIntegerField(null=True, blank=True)
    weight = models.PositiveSmallIntegerField(null=True, blank=True)

    class Meta:
        ordering = ["family_name", "given_name", "id"]
        indexes = [
            models.Index(fields=["family_name", "given_name"], name="patient_name_idx"),
            models.Index(fields=["birth_date"], name="patient_birth_date_idx"),
            models.Index(fields=["email"], name="patient_email_idx"),
        ]

    def __str__(self) -> str:
        dob = self.birth_date.isoformat() if self.birth_date else "—"
        return f"{self.family_name or ''}, {self.given_name or ''} ({dob})"

    @property
    def resource_path(self) -> str:
        return f"{self.RESOURCE_PATH}/{self.pk}"
