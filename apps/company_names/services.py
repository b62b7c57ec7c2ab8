import logging
import random
import re
from typing import Dict, Iterable, List

from django.db import transaction

from core.exceptions import ConflictException, ValidationException
from .models import CompanyName

logger = logging.getLogger(__name__)

CODE_PATTERN = re.compile(r"^\d{4}$")
MAX_CODE_ATTEMPTS = 100


def generate_unique_code() -> str:
    """Random 4-digit code (1000-9999) not yet used in the directory."""
    for _ in range(MAX_CODE_ATTEMPTS):
        code = str(random.randint(1000, 9999))
        if not CompanyName.objects.filter(code=code).exists():
            return code
    raise ConflictException("Unable to generate unique code. Please try again.")


def is_valid_code(code: str) -> bool:
    return bool(CODE_PATTERN.match(code or ""))


class CompanyNameService:

    @staticmethod
    def create(name: str, contact_name: str = "", mobile_number: str = "", notes: str = "") -> CompanyName:
        name = (name or "").strip()
        if not name:
            raise ValidationException("Company name is required.")
        if CompanyName.objects.filter(name=name).exists():
            raise ValidationException("Company name already exists.")

        return CompanyName.objects.create(
            name=name,
            code=generate_unique_code(),
            contact_name=(contact_name or "").strip(),
            mobile_number=(mobile_number or "").strip(),
            notes=notes or "",
        )

    @staticmethod
    def update(instance: CompanyName, data: Dict) -> CompanyName:
        if "name" in data:
            name = str(data["name"] or "").strip()
            if not name:
                raise ValidationException("Company name is required.")
            if CompanyName.objects.filter(name=name).exclude(pk=instance.pk).exists():
                raise ValidationException("Company name already exists.")
            instance.name = name

        if "contactName" in data:
            instance.contact_name = str(data["contactName"] or "").strip()
        if "mobileNumber" in data:
            instance.mobile_number = str(data["mobileNumber"] or "").strip()
        if "notes" in data:
            instance.notes = data["notes"] or ""

        if "code" in data:
            code = str(data["code"] or "").strip()
            if not code:
                code = generate_unique_code()
            elif not is_valid_code(code):
                raise ValidationException("Code must be exactly 4 digits.")
            elif CompanyName.objects.filter(code=code).exclude(pk=instance.pk).exists():
                raise ValidationException("Code already exists for another company.")
            instance.code = code

        instance.save()
        return instance

    @staticmethod
    def import_companies(entries: Iterable) -> Dict:
        """
        Bulk import. Each entry is a dict (name, contactName, mobileNumber,
        code, notes) or a bare company-name string. Existing names are
        skipped; a provided code is kept when it is 4 digits and free,
        otherwise a new one is generated.
        """
        imported: List[str] = []
        skipped: List[Dict] = []
        errors: List[Dict] = []

        with transaction.atomic():
            for entry in entries:
                data = {"name": entry} if isinstance(entry, str) else (entry or {})
                if not isinstance(data, dict):
                    errors.append({"company": str(entry), "error": "Invalid entry"})
                    continue

                name = str(data.get("name") or "").strip()
                if not name:
                    errors.append({"company": data, "error": "Empty name"})
                    continue

                if CompanyName.objects.filter(name=name).exists():
                    skipped.append({"name": name, "reason": "Already exists"})
                    continue

                code = str(data.get("code") or "").strip()
                if not is_valid_code(code) or CompanyName.objects.filter(code=code).exists():
                    code = generate_unique_code()

                obj = CompanyName.objects.create(
                    name=name,
                    code=code,
                    contact_name=str(data.get("contactName") or "").strip(),
                    mobile_number=str(data.get("mobileNumber") or "").strip(),
                    notes=str(data.get("notes") or "").strip(),
                )
                imported.append(str(obj.pk))

        logger.info(
            f"Company names import: {len(imported)} imported, "
            f"{len(skipped)} skipped, {len(errors)} errors"
        )
        return {
            "success": True,
            "imported": len(imported),
            "skipped": len(skipped),
            "errors": len(errors),
            "importedIds": imported,
            "skippedDetails": skipped,
            "errorDetails": errors,
        }

    @staticmethod
    def unregistered():
        """
        Directory entries with no Company and no PreRegistration matching
        them by code or by case-insensitive trimmed name.
        """
        from apps.companies.models import Company
        from apps.pre_registration.models import PreRegistration

        taken_codes = set()
        taken_names = set()

        for code, name in Company.objects.values_list("code", "name"):
            if code:
                taken_codes.add(code.strip())
            if name:
                taken_names.add(name.strip().lower())

        for code, name in PreRegistration.objects.values_list("code", "company_name"):
            if code:
                taken_codes.add(code.strip())
            if name:
                taken_names.add(name.strip().lower())

        return [
            entry for entry in CompanyName.objects.order_by("name")
            if entry.code.strip() not in taken_codes
            and entry.name.strip().lower() not in taken_names
        ]
