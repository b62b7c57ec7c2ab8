import uuid

from django.db import models


class Group(models.Model):
    """
    Time-boxed slot in which registered companies are processed in person.

    max_companies = 0 means unlimited. The number of registered companies is
    never stored: it is counted live from Company.group (related_name
    "companies"), see capacity.with_registered_count().
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=150, unique=True, verbose_name="Name")
    date = models.DateField(verbose_name="Date")
    time_from = models.CharField(max_length=5, verbose_name="From (HH:MM)")
    time_to = models.CharField(max_length=5, verbose_name="To (HH:MM)")
    day = models.CharField(max_length=20, blank=True, default="", verbose_name="Day")
    max_companies = models.PositiveIntegerField(
        default=0,
        verbose_name="Maximum companies",
        help_text="0 = unlimited",
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Created at")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Last modified")

    class Meta:
        db_table = "groups"
        verbose_name = "Group"
        verbose_name_plural = "Groups"
        ordering = ["date", "time_from", "name"]

    def __str__(self):
        return f"{self.name} ({self.date} {self.time_from}-{self.time_to})"

    def save(self, *args, **kwargs):
        self.name = (self.name or "").strip()
        if not self.day and self.date:
            self.day = self.date.strftime("%A")
        super().save(*args, **kwargs)
