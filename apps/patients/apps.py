from django.apps import AppConfig


class PatientsConfig(AppConfig):
    name = "apps.patients"     # full dotted path (app lives under apps/)
    label = "patients"
    verbose_name = "Patients"
