"""Write project records back out as CSV text."""

from __future__ import annotations

from typing import Any, Iterable, Sequence

from .models import ProjectRecord
from .rules import EXPORT_COLUMNS, NORMALIZED_DELIMITER


def escape_cell(value: Any) -> str:
    """Quote a cell when it holds a comma, a quote or a newline."""
    if value is None:
        return ""
    text = str(value)
    if NORMALIZED_DELIMITER in text or '"' in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def serialize_projects(
    records: Iterable[ProjectRecord],
    columns: Sequence[str] = EXPORT_COLUMNS,
) -> str:
    """Header line plus one line per record, LF-separated, no trailing newline."""
    lines = [NORMALIZED_DELIMITER.join(escape_cell(c) for c in columns)]
    for record in records:
        lines.append(
            NORMALIZED_DELIMITER.join(escape_cell(record.value_for(c)) for c in columns)
        )
    return "\n".join(lines)
