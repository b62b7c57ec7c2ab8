"""
apps/company_names/excel.py

Reads the company-name directory spreadsheet uploaded by administrators.

Expected columns (first sheet, header row optional):
    1. company name
    2. contact name
    3. mobile number
    4. code (4 digits, optional: generated when empty or invalid)
"""

import logging
from typing import Any, Dict, List

import openpyxl

from core.exceptions import ValidationException

logger = logging.getLogger(__name__)

HEADER_LABELS = {
    "name", "company", "company name", "contact", "contact name",
    "mobile", "mobile number", "phone", "code",
    "اسم الشركة", "الاسم", "الرمز", "ناوی کۆمپانیا", "ناو", "کۆد",
}


def _to_str(value: Any) -> str:
    if value is None:
        return ""
    # Excel stores codes typed as numbers as floats (1234.0)
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def _looks_like_header(row: tuple) -> bool:
    return any(_to_str(c).lower() in HEADER_LABELS for c in row)


def read_company_rows(file_obj, filename: str = "") -> List[Dict[str, str]]:
    """Return one dict per non-empty row: name, contactName, mobileNumber, code."""
    try:
        wb = openpyxl.load_workbook(file_obj, read_only=True, data_only=True)
        ws = wb.active
        rows = list(ws.iter_rows(values_only=True))
        wb.close()
    except Exception as e:
        raise ValidationException(f"Cannot read Excel file '{filename}': {e}") from e

    if not rows:
        raise ValidationException("The uploaded file is empty.")

    if _looks_like_header(rows[0]):
        rows = rows[1:]

    companies = []
    for row in rows:
        cells = list(row) + [None] * (4 - len(row))
        if not any(_to_str(c) for c in cells[:4]):
            continue
        companies.append({
            "name": _to_str(cells[0]),
            "contactName": _to_str(cells[1]),
            "mobileNumber": _to_str(cells[2]),
            "code": _to_str(cells[3]),
        })

    logger.info(f"[read_company_rows] '{filename}' → {len(companies)} data rows.")
    return companies
