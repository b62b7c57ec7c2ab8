import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        ("groups", "0001_initial"),
        ("pre_registration", "0001_initial"),
    ]

    operations = [
        migrations.CreateModel(
            name="Company",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(db_index=True, max_length=255, verbose_name="Company name")),
                ("code", models.CharField(blank=True, default="", help_text="4-digit code from the company-name directory. Unique when set.", max_length=20, verbose_name="Registration code")),
                ("registrant_name", models.CharField(blank=True, default="", help_text="Person who registered the company.", max_length=255, verbose_name="Registrant name")),
                ("phone_number", models.CharField(blank=True, default="", max_length=30, verbose_name="Phone number")),
                ("email", models.EmailField(blank=True, default="", max_length=254, verbose_name="Email")),
                ("address", models.TextField(blank=True, default="", verbose_name="Address")),
                ("status", models.CharField(choices=[("pending", "Pending"), ("approved", "Approved"), ("rejected", "Rejected")], db_index=True, default="approved", max_length=20, verbose_name="Status")),
                ("rejection_reason", models.TextField(blank=True, default="", verbose_name="Rejection reason")),
                ("paid", models.BooleanField(default=False, verbose_name="Paid")),
                ("spent", models.BooleanField(default=False, verbose_name="Spent")),
                ("payment_date", models.DateField(blank=True, null=True, verbose_name="Payment date")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Last modified")),
                ("approved_at", models.DateTimeField(blank=True, null=True, verbose_name="Approved at")),
                ("rejected_at", models.DateTimeField(blank=True, null=True, verbose_name="Rejected at")),
                ("group", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="companies", to="groups.group", verbose_name="Group")),
                ("pre_registration", models.ForeignKey(blank=True, null=True, on_delete=django.db.models.deletion.SET_NULL, related_name="companies", to="pre_registration.preregistration", verbose_name="Pre-registration")),
            ],
            options={
                "verbose_name": "Company",
                "verbose_name_plural": "Companies",
                "db_table": "companies",
                "ordering": ["-created_at"],
            },
        ),
        migrations.AddConstraint(
            model_name="company",
            constraint=models.UniqueConstraint(condition=models.Q(("code", ""), _negated=True), fields=("code",), name="unique_company_code_when_set"),
        ),
    ]
