import apps.translations.models
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="TranslationSet",
            fields=[
                ("key", models.CharField(default="site", editable=False, max_length=20, primary_key=True, serialize=False)),
                ("en", models.JSONField(blank=True, default=apps.translations.models.empty_dict, verbose_name="English")),
                ("ku", models.JSONField(blank=True, default=apps.translations.models.empty_dict, verbose_name="Kurdish")),
                ("ar", models.JSONField(blank=True, default=apps.translations.models.empty_dict, verbose_name="Arabic")),
                ("seeded_at", models.DateTimeField(blank=True, null=True, verbose_name="Seeded at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Last modified")),
            ],
            options={
                "verbose_name": "Translation set",
                "verbose_name_plural": "Translation sets",
                "db_table": "translations",
            },
        ),
    ]
