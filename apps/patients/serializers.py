# apps/patients/serializers.py
from django.utils import timezone
from rest_framework import serializers

from .models import Gender, Patient, PATIENT_FIELDS


class PatientSerializer(serializers.ModelSerializer):
    class Meta:
        model = Patient
        fields = ["id", *PATIENT_FIELDS]
        read_only_fields = ["id"]

    def validate_birth_date(self, value):
        if value and value > timezone.localdate():
            raise serializers.ValidationError("Birth date cannot be in the future.")
        return value


class PatientExampleSerializer(serializers.Serializer):
    """
    Coerces raw query parameters into typed example values.

    Text fields are matched by substring, so they are accepted as-is (a partial
    email like "example.com" is a legitimate probe). Dates, genders and numbers
    must parse or the request fails.
    """

    given_name = serializers.CharField(required=False)
    additional_name = serializers.CharField(required=False)
    family_name = serializers.CharField(required=False)
    email = serializers.CharField(required=False)
    birth_date = serializers.DateField(required=False)
    gender = serializers.ChoiceField(choices=Gender.choices, required=False)
    height = serializers.IntegerField(required=False, min_value=0, max_value=32767)
    weight = serializers.IntegerField(required=False, min_value=0, max_value=32767)
