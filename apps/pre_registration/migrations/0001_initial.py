import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("groups", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="PreRegistration",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255, verbose_name="Contact name")),
                ("mobile_number", models.CharField(max_length=30, verbose_name="Mobile number")),
                ("company_name", models.CharField(db_index=True, max_length=255, verbose_name="Company name")),
                ("code", models.CharField(blank=True, db_index=True, default="", max_length=20, verbose_name="Code")),
                ("status", models.CharField(choices=[("pending", "Pending"), ("completed", "Completed")], default="pending", max_length=20, verbose_name="Status")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Last modified")),
                ("group", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="pre_registrations", to="groups.group", verbose_name="Group")),
            ],
            options={
                "verbose_name": "Pre-registration",
                "verbose_name_plural": "Pre-registrations",
                "db_table": "pre_registrations",
                "ordering": ["-created_at"],
            },
        ),
    ]
