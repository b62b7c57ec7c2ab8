import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="CompanyName",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255, unique=True, verbose_name="Company name")),
                ("code", models.CharField(max_length=4, unique=True, verbose_name="Code")),
                ("contact_name", models.CharField(blank=True, default="", max_length=255, verbose_name="Contact name")),
                ("mobile_number", models.CharField(blank=True, default="", max_length=30, verbose_name="Mobile number")),
                ("notes", models.TextField(blank=True, default="", verbose_name="Notes")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Last modified")),
            ],
            options={
                "verbose_name": "Company name",
                "verbose_name_plural": "Company names",
                "db_table": "company_names",
                "ordering": ["name"],
            },
        ),
    ]
