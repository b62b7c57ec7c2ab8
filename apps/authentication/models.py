import uuid

from django.contrib.auth.models import AbstractUser, UserManager as DjangoUserManager
from django.db import models


class UserManager(DjangoUserManager):
    """
    Manager for the portal User model.
    Superusers created from the CLI get the admin role and an active status.
    """

    def create_superuser(self, username, email=None, password=None, **extra_fields):
        extra_fields.setdefault("role", User.Role.ADMIN)
        extra_fields.setdefault("status", User.AccountStatus.ACTIVE)
        return super().create_superuser(username, email, password, **extra_fields)


class User(AbstractUser):
    """
    Staff account of the registration portal.

    Roles:
        - admin      : manages settings, groups, companies, users, translations
        - accounting : reads every company, exports and updates payment status
        - user       : read-only staff
    """

    # -------------------------------------------------------------------------
    # Choices
    # -------------------------------------------------------------------------

    class Role(models.TextChoices):
        ADMIN = "admin", "Administrator"
        ACCOUNTING = "accounting", "Accounting"
        USER = "user", "User"

    class AccountStatus(models.TextChoices):
        ACTIVE = "active", "Active"
        INACTIVE = "inactive", "Inactive"

    # -------------------------------------------------------------------------
    # Identity
    # -------------------------------------------------------------------------

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=150, unique=True, verbose_name="Display name")
    phone = models.CharField(max_length=30, blank=True, default="", verbose_name="Phone")

    # -------------------------------------------------------------------------
    # Role and status
    # -------------------------------------------------------------------------

    role = models.CharField(
        max_length=20,
        choices=Role.choices,
        default=Role.USER,
        verbose_name="Role",
    )
    status = models.CharField(
        max_length=20,
        choices=AccountStatus.choices,
        default=AccountStatus.ACTIVE,
        verbose_name="Account status",
        help_text="Inactive accounts cannot log in.",
    )

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Created at")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Last modified")

    objects = UserManager()

    REQUIRED_FIELDS = ["email", "name"]

    class Meta:
        db_table = "portal_users"
        verbose_name = "User"
        verbose_name_plural = "Users"
        ordering = ["-created_at"]

    def __str__(self):
        return f"{self.name} ({self.username}) - {self.role}"

    @property
    def is_active_account(self) -> bool:
        return self.status == self.AccountStatus.ACTIVE
