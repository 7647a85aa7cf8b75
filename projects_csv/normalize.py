"""
Turn tokenized CSV rows into typed project records.

Spreadsheet input is messy, so nothing here raises:
- unparseable numbers become 0
- short rows leave the missing columns absent
- rows without an id are dropped
"""

from __future__ import annotations

import enum
import logging
import math
import re
from typing import Any, Callable, Dict, List, Optional, Sequence, TypeVar

from .models import ProjectRecord
from .rules import BOM
from .tokenizer import parse_csv

log = logging.getLogger(__name__)

T = TypeVar("T")

# Plain decimal literal: sign, ASCII digits, optional fraction, optional exponent
_NUMBER = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_NOT_BUDGET_CHAR = re.compile(r"[^0-9.\-]+")


class Coercion(enum.Enum):
    INTEGER = "integer"
    OPTIONAL_STRING = "optional_string"
    RAW_STRING = "raw_string"
    IDENTIFIER = "identifier"


def parse_or_default(parser: Callable[[Any], T], default: T) -> Callable[[Any], T]:
    """Wrap a fallible parser so that ValueError/TypeError yield `default`."""

    def _parse(value: Any) -> T:
        try:
            return parser(value)
        except (ValueError, TypeError):
            return default

    return _parse


def parse_int(value: Optional[str]) -> int:
    """
    Parse a decimal literal and truncate it toward zero.

    Raises ValueError for anything that is not a finite plain number
    (empty text, words, "nan", "inf", "1-2").
    """
    if value is None:
        raise TypeError("no value")
    text = value.strip()
    if not _NUMBER.fullmatch(text):
        raise ValueError(f"not a number: {value!r}")
    number = float(text)
    if not math.isfinite(number):
        raise ValueError(f"not a finite number: {value!r}")
    return int(number)


to_int = parse_or_default(parse_int, 0)


def to_budget(value: Optional[str]) -> int:
    """Integer budget; thousands separators and currency marks are ignored."""
    if value is None:
        return 0
    return to_int(_NOT_BUDGET_CHAR.sub("", value))


def to_optional_str(value: Optional[str]) -> Optional[str]:
    return value or None


def to_raw_str(value: Optional[str]) -> Optional[str]:
    return value


def to_identifier(value: Optional[str]) -> str:
    # absent id is "" so the row gets dropped, never a placeholder string
    return "" if value is None else str(value)


COERCERS: Dict[Coercion, Callable[[Optional[str]], Any]] = {
    Coercion.INTEGER: to_int,
    Coercion.OPTIONAL_STRING: to_optional_str,
    Coercion.RAW_STRING: to_raw_str,
    Coercion.IDENTIFIER: to_identifier,
}

COLUMN_COERCIONS: Dict[str, Coercion] = {
    "id": Coercion.IDENTIFIER,
    "startMonth": Coercion.INTEGER,
    "budget": Coercion.INTEGER,
    "meetingStartDate": Coercion.OPTIONAL_STRING,
    "meetingEndDate": Coercion.OPTIONAL_STRING,
    "status": Coercion.RAW_STRING,
}

# budget shares the INTEGER kind but strips non-numeric characters first
_COLUMN_OVERRIDES: Dict[str, Callable[[Optional[str]], Any]] = {
    "budget": to_budget,
}

# Columns that map onto named ProjectRecord fields
_NAMED_COLUMNS = frozenset(
    (info.alias or attr)
    for attr, info in ProjectRecord.model_fields.items()
    if attr != "extra"
)


def clean_header(header: Optional[str]) -> str:
    return (header or "").replace(BOM, "").strip()


def coerce_value(column: str, value: Optional[str]) -> Any:
    """Apply the coercion registered for `column` (raw text otherwise)."""
    override = _COLUMN_OVERRIDES.get(column)
    if override is not None:
        return override(value)
    kind = COLUMN_COERCIONS.get(column, Coercion.RAW_STRING)
    return COERCERS[kind](value)


def build_record(headers: Sequence[str], values: Sequence[str]) -> ProjectRecord:
    """
    Zip one row against the headers and coerce it.

    Missing trailing values are None; values beyond the headers are ignored;
    a repeated header keeps the value of its last column.
    """
    raw: Dict[str, Optional[str]] = {}
    for idx, header in enumerate(headers):
        raw[header] = values[idx] if idx < len(values) else None

    named: Dict[str, Any] = {"id": to_identifier(None)}
    extra: Dict[str, Optional[str]] = {}
    for column, value in raw.items():
        coerced = coerce_value(column, value)
        if column in _NAMED_COLUMNS:
            named[column] = coerced
        else:
            extra[column] = coerced

    return ProjectRecord.model_validate({**named, "extra": extra})


def normalize_rows(rows: Sequence[Sequence[str]]) -> List[ProjectRecord]:
    """First row is the header; returns the records that carry an id, in input order."""
    if not rows:
        return []

    headers = [clean_header(h) for h in rows[0]]
    records: List[ProjectRecord] = []
    for line_no, values in enumerate(rows[1:], start=2):
        record = build_record(headers, values)
        if not record.id:
            log.debug("row %d dropped: empty id", line_no)
            continue
        records.append(record)
    return records


def parse_projects_from_csv(text: str) -> List[ProjectRecord]:
    """Tokenize CSV text (BOMs removed) and normalize it into project records."""
    return normalize_rows(parse_csv(text.replace(BOM, "")))
