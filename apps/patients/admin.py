from django.contrib import admin
from .models import Patient


@admin.register(Patient)
class PatientAdmin(admin.ModelAdmin):
    list_display = ("id", "family_name", "given_name", "additional_name", "birth_date", "gender", "email")
    search_fields = (
        "family_name",
        "given_name",
        "additional_name",
        "email",
    )
    list_filter = ("gender", "birth_date")
    readonly_fields = ("id",)
