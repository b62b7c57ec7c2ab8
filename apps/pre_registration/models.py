import uuid

from django.db import models


class PreRegistration(models.Model):
    """
    First step of the registration flow: a contact person reserves a company
    name (and its code, when codes are active) in an optional group.

    Submitting a pre-registration also creates the linked, auto-approved
    Company (Company.pre_registration). The pre-registration is completed
    once the full registration form has been submitted for that company.
    """

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        COMPLETED = "completed", "Completed"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255, verbose_name="Contact name")
    mobile_number = models.CharField(max_length=30, verbose_name="Mobile number")
    company_name = models.CharField(max_length=255, db_index=True, verbose_name="Company name")
    code = models.CharField(max_length=20, blank=True, default="", db_index=True, verbose_name="Code")

    group = models.ForeignKey(
        "groups.Group",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="pre_registrations",
        verbose_name="Group",
    )

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.PENDING,
        verbose_name="Status",
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Created at")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Last modified")

    class Meta:
        db_table = "pre_registrations"
        verbose_name = "Pre-registration"
        verbose_name_plural = "Pre-registrations"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.company_name} ({self.code or 'no code'}) - {self.name}"
