import logging
from typing import Dict, Tuple

from django.db import IntegrityError, transaction
from django.utils import timezone
from django.utils.dateparse import parse_date

from apps.company_names.models import CompanyName
from apps.groups.capacity import reserve_slot
from apps.pre_registration.models import PreRegistration
from apps.system_settings.services import WebsiteSettingsService, coerce_bool
from core.exceptions import (
    DuplicateRegistrationException,
    ResourceNotFoundException,
    ValidationException,
)
from .models import Company

logger = logging.getLogger("apps.registration")


def clean(value) -> str:
    return "" if value is None else str(value).strip()


def require_fields(data: Dict, fields) -> None:
    missing = [field for field in fields if not clean(data.get(field))]
    if missing:
        raise ValidationException({
            "detail": f"Missing required fields: {', '.join(missing)}. Please fill in all required fields.",
            "missingFields": missing,
        })


def ensure_code_free(code: str, exclude_pk=None) -> None:
    if not code:
        return
    qs = Company.objects.filter(code=code)
    if exclude_pk is not None:
        qs = qs.exclude(pk=exclude_pk)
    holder = qs.first()
    if holder:
        raise DuplicateRegistrationException(
            f"This company is already registered (code {code}, '{holder.name}')."
        )


class CompanyRegistrationService:
    """
    Full registration form (POST /api/companies/).

    The registration window is re-checked here, server-side, with the same
    schedule functions the clients display. Staff callers (admin,
    accounting) may register while the window is closed.
    """

    REQUIRED_FIELDS = ("name", "phoneNumber", "address")
    # Completing a pre-registration keeps the group chosen at that step.
    NEW_COMPANY_FIELDS = ("groupId",)

    @classmethod
    def register(cls, data: Dict, bypass_gate: bool = False) -> Tuple[Company, bool]:
        """Returns (company, created). created=False when a pre-registered company was completed."""
        if not bypass_gate:
            WebsiteSettingsService.ensure_registration_open()

        require_fields(data, cls.REQUIRED_FIELDS)

        name = clean(data.get("name"))
        code = clean(data.get("code"))
        if not code:
            directory_entry = CompanyName.objects.filter(name=name).first()
            code = directory_entry.code if directory_entry else ""

        group_id = clean(data.get("groupId")) or None

        with transaction.atomic():
            if code:
                existing = (
                    Company.objects.select_for_update()
                    .filter(name=name, code=code)
                    .first()
                )
                if existing and existing.pre_registration_id:
                    return cls._complete_pre_registered(existing, data), False
                if existing:
                    raise DuplicateRegistrationException(
                        "A company with this name and code has already been registered. "
                        "Each company name + code combination can only be registered once."
                    )
                ensure_code_free(code)

            require_fields(data, cls.NEW_COMPANY_FIELDS)
            group = reserve_slot(group_id)

            try:
                company = Company.objects.create(
                    name=name,
                    code=code,
                    email=clean(data.get("email")),
                    phone_number=clean(data.get("phoneNumber")),
                    address=clean(data.get("address")),
                    registrant_name=clean(data.get("registrantName")),
                    group=group,
                    status=Company.Status.APPROVED,
                    approved_at=timezone.now(),
                )
            except IntegrityError:
                raise DuplicateRegistrationException()

        logger.info(f"Company registered: '{company.name}' code={company.code or '-'} group={group_id}")
        return company, True

    @staticmethod
    def _complete_pre_registered(company: Company, data: Dict) -> Company:
        """Second step of a pre-registration: registrant, code and group are kept."""
        company.email = clean(data.get("email")) or company.email
        company.phone_number = clean(data.get("phoneNumber"))
        company.address = clean(data.get("address"))
        company.save()

        PreRegistration.objects.filter(pk=company.pre_registration_id).update(
            status=PreRegistration.Status.COMPLETED,
            updated_at=timezone.now(),
        )
        logger.info(f"Pre-registered company completed: '{company.name}' code={company.code}")
        return company


class CompanyAdminService:
    """Admin-side edits. Group moves go through the same capacity lock as registrations."""

    FIELD_MAP = {
        "name": "name",
        "registrantName": "registrant_name",
        "phoneNumber": "phone_number",
        "email": "email",
        "address": "address",
        "rejectionReason": "rejection_reason",
    }

    @staticmethod
    def get(company_id) -> Company:
        try:
            return Company.objects.select_related("group").get(pk=company_id)
        except (Company.DoesNotExist, ValueError):
            raise ResourceNotFoundException("Company not found.")

    @classmethod
    def update(cls, company: Company, data: Dict) -> Company:
        with transaction.atomic():
            for key, field in cls.FIELD_MAP.items():
                if key in data:
                    setattr(company, field, clean(data[key]))

            if "code" in data:
                code = clean(data["code"])
                ensure_code_free(code, exclude_pk=company.pk)
                company.code = code

            if "status" in data:
                company.status = cls._status(data["status"])

            if "paid" in data or "spent" in data or "paymentDate" in data:
                cls._apply_payment(company, data)

            if "groupId" in data:
                group_id = clean(data["groupId"]) or None
                if group_id is None:
                    company.group = None
                elif str(company.group_id) != group_id:
                    company.group = reserve_slot(group_id, exclude_company_id=company.pk)

            company.save()
        return company

    @staticmethod
    def _status(value) -> str:
        value = clean(value).lower()
        if value not in Company.Status.values:
            raise ValidationException(f"Invalid status '{value}'.")
        return value

    @staticmethod
    def _apply_payment(company: Company, data: Dict) -> None:
        if "spent" in data:
            company.spent = coerce_bool(data["spent"])
        if "paid" in data:
            company.paid = coerce_bool(data["paid"])
        if "paymentDate" in data:
            company.payment_date = parse_payment_date(data["paymentDate"])
        if company.paid and company.payment_date is None:
            company.payment_date = timezone.localdate()

    @classmethod
    def update_payment_status(cls, company: Company, data: Dict) -> Company:
        if not any(key in data for key in ("paid", "spent", "paymentDate")):
            raise ValidationException("At least one field (paid, spent or paymentDate) must be provided.")
        cls._apply_payment(company, data)
        company.save(update_fields=["paid", "spent", "payment_date", "updated_at"])
        return company

    @staticmethod
    def approve(company: Company) -> Company:
        company.status = Company.Status.APPROVED
        company.approved_at = timezone.now()
        company.save(update_fields=["status", "approved_at", "updated_at"])
        return company

    @staticmethod
    def reject(company: Company, reason: str = "") -> Company:
        company.status = Company.Status.REJECTED
        company.rejection_reason = clean(reason)
        company.rejected_at = timezone.now()
        company.save(update_fields=["status", "rejection_reason", "rejected_at", "updated_at"])
        return company


def parse_payment_date(value):
    if value in (None, ""):
        return None
    text = str(value).strip()
    try:
        parsed = parse_date(text[:10])
    except ValueError:
        parsed = None
    if parsed is None:
        raise ValidationException(f"Invalid payment date '{value}'. Expected YYYY-MM-DD.")
    return parsed
