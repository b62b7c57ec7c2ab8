import uuid

from django.db import models


class CompanyName(models.Model):
    """
    Directory of companies allowed to register, each with a unique 4-digit
    code handed out to the company beforehand. Drives the company dropdown
    and the code auto-fill of the registration forms.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)

    name = models.CharField(max_length=255, unique=True, verbose_name="Company name")
    code = models.CharField(max_length=4, unique=True, verbose_name="Code")
    contact_name = models.CharField(max_length=255, blank=True, default="", verbose_name="Contact name")
    mobile_number = models.CharField(max_length=30, blank=True, default="", verbose_name="Mobile number")
    notes = models.TextField(blank=True, default="", verbose_name="Notes")

    created_at = models.DateTimeField(auto_now_add=True, verbose_name="Created at")
    updated_at = models.DateTimeField(auto_now=True, verbose_name="Last modified")

    class Meta:
        db_table = "company_names"
        verbose_name = "Company name"
        verbose_name_plural = "Company names"
        ordering = ["name"]

    def __str__(self):
        return f"{self.name} [{self.code}]"
