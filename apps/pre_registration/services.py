"""
apps/pre_registration/services.py

Pre-registration flow (POST /api/pre-register/):

    1. Registration window must be open (503 otherwise, with the admin message).
    2. name, mobileNumber, companyName are required.
    3. code is required while registration codes are active.
    4. groupId is required (a resubmission may reuse the group of the
       earlier entry) and the group must exist and still have room.
    5. A company name + code (or name alone when no code) can only be
       registered once. An earlier pre-registration that never produced a
       company is updated instead of being rejected.
    6. The linked, auto-approved Company is created in the same transaction
       as the group slot reservation.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

from django.db import IntegrityError, transaction
from django.utils import timezone

from apps.companies.models import Company
from apps.companies.services import clean, require_fields
from apps.company_names.models import CompanyName
from apps.groups.capacity import reserve_slot
from apps.system_settings.services import WebsiteSettingsService
from core.exceptions import DuplicateRegistrationException, ResourceNotFoundException, ValidationException
from .models import PreRegistration

logger = logging.getLogger("apps.registration")


@dataclass
class PreRegistrationResult:
    pre_registration: PreRegistration
    company: Optional[Company]
    updated: bool


class PreRegistrationService:

    REQUIRED_FIELDS = ("name", "mobileNumber", "companyName")

    @classmethod
    def submit(cls, data: Dict, bypass_gate: bool = False) -> PreRegistrationResult:
        if bypass_gate:
            settings_obj = WebsiteSettingsService.get()
        else:
            settings_obj = WebsiteSettingsService.ensure_registration_open()

        require_fields(data, cls.REQUIRED_FIELDS)

        contact_name = clean(data.get("name"))
        mobile_number = clean(data.get("mobileNumber"))
        company_name = clean(data.get("companyName"))
        code = clean(data.get("code"))
        group_id = clean(data.get("groupId")) or None

        if settings_obj.codes_active and not code:
            raise ValidationException("Code is required when codes are enabled.")

        with transaction.atomic():
            cls._ensure_not_registered(company_name, code)

            existing = cls._find_existing(company_name, code)
            if not group_id and existing and existing.group_id:
                group_id = str(existing.group_id)
            if not group_id:
                require_fields(data, ("groupId",))
            group = reserve_slot(group_id)

            if existing:
                existing.name = contact_name
                existing.mobile_number = mobile_number
                existing.code = code
                existing.group = group
                existing.status = PreRegistration.Status.PENDING
                existing.save()
                pre_registration = existing
            else:
                pre_registration = PreRegistration.objects.create(
                    name=contact_name,
                    mobile_number=mobile_number,
                    company_name=company_name,
                    code=code,
                    group=group,
                )

            company = cls._create_company(pre_registration)

        logger.info(
            f"Pre-registration {'updated' if existing else 'created'}: '{company_name}' "
            f"code={code or '-'} group={group_id} company={company.pk if company else '-'}"
        )
        return PreRegistrationResult(
            pre_registration=pre_registration,
            company=company,
            updated=existing is not None,
        )

    @staticmethod
    def _ensure_not_registered(company_name: str, code: str) -> None:
        if code:
            if Company.objects.filter(name=company_name, code=code).exists():
                raise DuplicateRegistrationException(
                    "This company name with this code has already been registered. "
                    "Each company name + code combination can only be registered once."
                )
        elif Company.objects.filter(name=company_name, code="").exists():
            raise DuplicateRegistrationException("A company with this name has already been registered.")

    @staticmethod
    def _find_existing(company_name: str, code: str) -> Optional[PreRegistration]:
        qs = PreRegistration.objects.select_for_update().filter(company_name=company_name)
        if code:
            qs = qs.filter(code=code)
        return qs.order_by("-created_at").first()

    @staticmethod
    def _create_company(pre_registration: PreRegistration) -> Optional[Company]:
        """
        The code may already belong to another company (registered under a
        different name). The pre-registration is kept and no company is
        created in that case.
        """
        if pre_registration.code and Company.objects.filter(code=pre_registration.code).exists():
            logger.warning(
                f"Duplicate company code {pre_registration.code} while pre-registering "
                f"'{pre_registration.company_name}': company not created"
            )
            return None

        try:
            with transaction.atomic():
                return Company.objects.create(
                    name=pre_registration.company_name,
                    registrant_name=pre_registration.name,
                    phone_number=pre_registration.mobile_number,
                    code=pre_registration.code,
                    group=pre_registration.group,
                    status=Company.Status.APPROVED,
                    pre_registration=pre_registration,
                    approved_at=timezone.now(),
                )
        except IntegrityError:
            logger.warning(f"Duplicate company code {pre_registration.code} detected during insert")
            return None

    @staticmethod
    def verify(mobile_number: str, code: str) -> PreRegistration:
        mobile_number, code = clean(mobile_number), clean(code)
        if not mobile_number or not code:
            raise ValidationException("Mobile number and code are required.")
        entry = PreRegistration.objects.filter(mobile_number=mobile_number, code=code).first()
        if not entry:
            raise ResourceNotFoundException("Invalid mobile number or code.")
        return entry

    @staticmethod
    def get(pre_registration_id) -> PreRegistration:
        try:
            return PreRegistration.objects.select_related("group").get(pk=pre_registration_id)
        except PreRegistration.DoesNotExist:
            raise ResourceNotFoundException("Pre-registration not found.")

    @staticmethod
    def lookup_by_code(code: str) -> Dict:
        """Auto-fill data for a code: company-name directory first, then pre-registrations."""
        code = clean(code)
        if not code:
            raise ValidationException("Code is required.")

        entry = CompanyName.objects.filter(code=code).first()
        if entry:
            return {
                "code": entry.code,
                "name": entry.contact_name,
                "mobileNumber": entry.mobile_number,
                "companyName": entry.name,
            }

        pre_registration = PreRegistration.objects.filter(code=code).order_by("-created_at").first()
        if not pre_registration:
            raise ResourceNotFoundException("Company code not found.")
        return {
            "code": pre_registration.code,
            "name": pre_registration.name,
            "mobileNumber": pre_registration.mobile_number,
            "companyName": pre_registration.company_name,
        }
