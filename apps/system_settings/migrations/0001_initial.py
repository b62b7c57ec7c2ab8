from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="WebsiteSettings",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("is_open", models.BooleanField(default=False, help_text="Manual open/closed switch, used when auto schedule is off.", verbose_name="Open (manual flag)")),
                ("auto_schedule", models.BooleanField(default=False, help_text="Derive the open state from open_time / close_time.", verbose_name="Auto schedule")),
                ("open_time", models.CharField(blank=True, default="", max_length=8, verbose_name="Open time (HH:MM)")),
                ("close_time", models.CharField(blank=True, default="", max_length=8, verbose_name="Close time (HH:MM)")),
                ("codes_active", models.BooleanField(default=True, help_text="When enabled, pre-registration requires the company code.", verbose_name="Registration codes active")),
                ("message", models.TextField(blank=True, default="", help_text="Shown to visitors while registration is closed.", verbose_name="Closed message")),
                ("post_registration_message", models.TextField(blank=True, default="", verbose_name="Post-registration message")),
                ("created_at", models.DateTimeField(auto_now_add=True, verbose_name="Created at")),
                ("updated_at", models.DateTimeField(auto_now=True, verbose_name="Last modified")),
            ],
            options={
                "verbose_name": "Website settings",
                "verbose_name_plural": "Website settings",
                "db_table": "website_settings",
            },
        ),
    ]
