import uuid

from django.db import models
from django.db.models import Q


class Company(models.Model):
    """
    A registered company waiting in the payment queue.

    Created either by a pre-registration (auto-approved, address filled in
    later by the full registration form) or directly by the full
    registration. Registrations are auto-approved so they show up in the
    public queue immediately; admins may still reject them.

    Hierarchy:
        Group → Company (nullable: deleting a group leaves its companies "no-group")
        PreRegistration → Company (the pre-registration that created it, if any)
    """

    class Status(models.TextChoices):
        PENDING = "pending", "Pending"
        APPROVED = "approved", "Approved"
        REJECTED = "rejected", "Rejected"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(
        max_length=255,
        db_index=True,
        verbose_name="Company name",
    )

    code = models.CharField(
        max_length=20,
        blank=True,
        default="",
        verbose_name="Registration code",
        help_text="4-digit code from the company-name directory. Unique when set.",
    )

    registrant_name = models.CharField(
        max_length=255,
        blank=True,
        default="",
        verbose_name="Registrant name",
        help_text="Person who registered the company.",
    )

    phone_number = models.CharField(max_length=30, blank=True, default="", verbose_name="Phone number")
    email = models.EmailField(blank=True, default="", verbose_name="Email")
    address = models.TextField(blank=True, default="", verbose_name="Address")

    group = models.ForeignKey(
        "groups.Group",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="companies",
        verbose_name="Group",
    )

    status = models.CharField(
        max_length=20,
        choices=Status.choices,
        default=Status.APPROVED,
        db_index=True,
        verbose_name="Status",
    )
    rejection_reason = models.TextField(blank=True, default="", verbose_name="Rejection reason")

    paid = models.BooleanField(default=False, verbose_name="Paid")
    spent = models.BooleanField(default=False, verbose_name="Spent")
    payment_date = models.DateField(null=True, blank=True, verbose_name="Payment date")

    pre_registration = models.ForeignKey(
        "pre_registration.PreRegistration",
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name="companies",
        verbose_name="Pre-registration",
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Created at")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Last modified")
    approved_at = models.DateTimeField(null=True, blank=True, verbose_name="Approved at")
    rejected_at = models.DateTimeField(null=True, blank=True, verbose_name="Rejected at")

    class Meta:
        db_table = "companies"
        verbose_name = "Company"
        verbose_name_plural = "Companies"
        ordering = ["-created_at"]
        constraints = [
            models.UniqueConstraint(
                fields=["code"],
                condition=~Q(code=""),
                name="unique_company_code_when_set",
            ),
        ]

    def __str__(self):
        return f"{self.name} ({self.code})" if self.code else self.name
