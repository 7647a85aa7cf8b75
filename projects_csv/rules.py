"""
Fixed domain rules for project-tracker spreadsheets.

Column names are the CSV header names used by the spreadsheet export.
"""

from __future__ import annotations

from typing import Optional

TARGET_ENCODING = "utf-8"
NORMALIZED_DELIMITER = ","
BOM = "\ufeff"

# Column order used when writing projects back out
EXPORT_COLUMNS = (
    "id",
    "name",
    "group",
    "startMonth",
    "budget",
    "color",
    "status",
    "meetingStartDate",
    "meetingEndDate",
)

# not started / in progress / done
PROJECT_STATUSES = ("ยังไม่เริ่ม", "กำลังดำเนินการ", "เสร็จสิ้น")

# Fiscal year runs October -> September; startMonth 0 is October
FISCAL_MONTHS = (
    "ต.ค.",
    "พ.ย.",
    "ธ.ค.",
    "ม.ค.",
    "ก.พ.",
    "มี.ค.",
    "เม.ย.",
    "พ.ค.",
    "มิ.ย.",
    "ก.ค.",
    "ส.ค.",
    "ก.ย.",
)


def month_label(start_month: int) -> Optional[str]:
    """Fiscal month label for a startMonth index, None when out of range."""
    if 0 <= start_month < len(FISCAL_MONTHS):
        return FISCAL_MONTHS[start_month]
    return None
