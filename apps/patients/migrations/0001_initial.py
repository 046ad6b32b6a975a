import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Patient",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("given_name", models.CharField(blank=True, max_length=100, null=True)),
                ("additional_name", models.CharField(blank=True, max_length=100, null=True)),
                ("family_name", models.CharField(blank=True, max_length=100, null=True)),
                ("birth_date", models.DateField(blank=True, null=True)),
                ("email", models.EmailField(blank=True, max_length=100, null=True)),
                (
                    "gender",
                    models.CharField(
                        blank=True,
                        choices=[("male", "Male"), ("female", "Female"), ("other", "Other"), ("unknown", "Unknown")],
                        max_length=16,
                        null=True,
                    ),
                ),
                ("height", models.PositiveSmallIntegerField(blank=True, null=True)),
                ("weight", models.PositiveSmallIntegerField(blank=True, null=True)),
            ],
            options={
                "ordering": ["family_name", "given_name", "id"],
                "indexes": [
                    models.Index(fields=["family_name", "given_name"], name="patient_name_idx"),
                    models.Index(fields=["birth_date"], name="patient_birth_date_idx"),
                    models.Index(fields=["email"], name="patient_email_idx"),
                ],
            },
        ),
    ]
