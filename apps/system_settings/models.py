from django.db import models


class WebsiteSettings(models.Model):
    """
    Singleton holding the public website / registration configuration.

    Only one row ever exists (pk = SINGLETON_PK). It is created lazily with
    defaults the first time it is read and is never deleted.

    When auto_schedule is enabled and both open_time and close_time are
    valid "HH:MM" strings, the effective open/closed state is derived from
    the clock (see schedule.py) and overrides is_open.
    """

    SINGLETON_PK = 1

    is_open = models.BooleanField(
        default=False,
        verbose_name="Open (manual flag)",
        help_text="Manual open/closed switch, used when auto schedule is off.",
    )

    auto_schedule = models.BooleanField(
        default=False,
        verbose_name="Auto schedule",
        help_text="Derive the open state from open_time / close_time.",
    )

    open_time = models.CharField(
        max_length=8,
        blank=True,
        default="",
        verbose_name="Open time (HH:MM)",
    )

    close_time = models.CharField(
        max_length=8,
        blank=True,
        default="",
        verbose_name="Close time (HH:MM)",
    )

    codes_active = models.BooleanField(
        default=True,
        verbose_name="Registration codes active",
        help_text="When enabled, pre-registration requires the company code.",
    )

    message = models.TextField(
        blank=True,
        default="",
        verbose_name="Closed message",
        help_text="Shown to visitors while registration is closed.",
    )

    post_registration_message = models.TextField(
        blank=True,
        default="",
        verbose_name="Post-registration message",
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Created at")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Last modified")

    class Meta:
        db_table = "website_settings"
        verbose_name = "Website settings"
        verbose_name_plural = "Website settings"

    def __str__(self):
        state = "open" if self.is_open else "closed"
        if self.auto_schedule:
            return f"Website settings ({self.open_time or '--:--'} → {self.close_time or '--:--'}, auto)"
        return f"Website settings ({state})"

    def save(self, *args, **kwargs):
        self.pk = self.SINGLETON_PK
        super().save(*args, **kwargs)

    @classmethod
    def load(cls) -> "WebsiteSettings":
        """Return the singleton, creating it with defaults if missing."""
        obj, _ = cls.objects.get_or_create(pk=cls.SINGLETON_PK)
        return obj
