"""
apps/companies/export.py

Excel export of the company list (admin / accounting).
"""

from io import BytesIO

import openpyxl
from openpyxl.styles import Font, PatternFill
from openpyxl.utils import get_column_letter

COLUMNS = [
    ("Company", 32, lambda c: c.name),
    ("Code", 10, lambda c: c.code),
    ("Registrant", 26, lambda c: c.registrant_name),
    ("Phone", 18, lambda c: c.phone_number),
    ("Email", 28, lambda c: c.email),
    ("Address", 36, lambda c: c.address),
    ("Group", 20, lambda c: c.group.name if c.group_id else "no-group"),
    ("Status", 12, lambda c: c.get_status_display()),
    ("Paid", 8, lambda c: "Yes" if c.paid else "No"),
    ("Spent", 8, lambda c: "Yes" if c.spent else "No"),
    ("Payment date", 14, lambda c: c.payment_date.isoformat() if c.payment_date else ""),
    ("Registered at", 20, lambda c: c.created_at.strftime("%Y-%m-%d %H:%M") if c.created_at else ""),
]

HEADER_FONT = Font(bold=True, color="FFFFFF")
HEADER_FILL = PatternFill(start_color="1F4E78", end_color="1F4E78", fill_type="solid")


def build_companies_workbook(companies) -> bytes:
    wb = openpyxl.Workbook()
    ws = wb.active
    ws.title = "Companies"

    ws.append([title for title, _, _ in COLUMNS])
    for idx, (_, width, _) in enumerate(COLUMNS, start=1):
        cell = ws.cell(row=1, column=idx)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        ws.column_dimensions[get_column_letter(idx)].width = width
    ws.freeze_panes = "A2"

    for company in companies:
        ws.append([getter(company) for _, _, getter in COLUMNS])

    buffer = BytesIO()
    wb.save(buffer)
    return buffer.getvalue()
