from __future__ import annotations

from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class ProjectRecord(BaseModel):
    """
    One project row from the tracker spreadsheet.

    Known columns are named fields (aliased to their CSV header names);
    any other header lands in `extra`.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: Optional[str] = None
    group: Optional[str] = None
    start_month: int = Field(default=0, alias="startMonth")
    budget: int = 0
    color: Optional[str] = None
    status: Optional[str] = None
    meeting_start_date: Optional[str] = Field(default=None, alias="meetingStartDate")
    meeting_end_date: Optional[str] = Field(default=None, alias="meetingEndDate")
    extra: Dict[str, Optional[str]] = Field(default_factory=dict)

    def value_for(self, column: str) -> Any:
        """Value of a CSV column, looked up by header name."""
        attr = _ATTR_BY_COLUMN.get(column)
        if attr is not None:
            return getattr(self, attr)
        return self.extra.get(column)

    def to_row(self) -> Dict[str, Any]:
        """Flat mapping keyed by CSV column name, extra columns included."""
        row: Dict[str, Any] = dict(self.extra)
        row.update(self.model_dump(by_alias=True, exclude={"extra"}))
        return row


_ATTR_BY_COLUMN: Dict[str, str] = {
    (info.alias or attr): attr
    for attr, info in ProjectRecord.model_fields.items()
    if attr != "extra"
}


class ParseReport(BaseModel):
    encoding: str
    rows: int = 0
    projects: int = 0
    dropped: int = 0
    unknown_statuses: List[str] = Field(default_factory=list)


class ParseResponse(BaseModel):
    projects: List[Dict[str, Any]] = Field(default_factory=list)
    report: ParseReport


class HealthResponse(BaseModel):
    ok: bool = True
