import uuid

from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="Group",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=150, unique=True, verbose_name="Name")),
                ("date", models.DateField(verbose_name="Date")),
                ("time_from", models.CharField(max_length=5, verbose_name="From (HH:MM)")),
                ("time_to", models.CharField(max_length=5, verbose_name="To (HH:MM)")),
                ("day", models.CharField(blank=True, default="", max_length=20, verbose_name="Day")),
                ("max_companies", models.PositiveIntegerField(default=0, help_text="0 = unlimited", verbose_name="Maximum companies")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Last modified")),
            ],
            options={
                "verbose_name": "Group",
                "verbose_name_plural": "Groups",
                "db_table": "groups",
                "ordering": ["date", "time_from", "name"],
            },
        ),
    ]
