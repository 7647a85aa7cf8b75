"""
Comma-delimited, double-quote-escaped CSV tokenizer.

Single pass over the text with two states (inside / outside quotes).
Never raises: an unterminated quote is closed by the end of input.
"""

from __future__ import annotations

from typing import List


def parse_csv(text: str) -> List[List[str]]:
    """
    Split CSV text into rows of trimmed fields.

    - `""` inside a quoted span is a literal quote
    - newlines inside quotes stay part of the field
    - `\\r` outside quotes is dropped, so CRLF input works
    - a trailing newline does not produce an empty last row
    """
    rows: List[List[str]] = []
    row: List[str] = []
    field: List[str] = []
    in_quotes = False

    i = 0
    n = len(text)
    while i < n:
        ch = text[i]
        if in_quotes:
            if ch == '"':
                if i + 1 < n and text[i + 1] == '"':
                    field.append('"')
                    i += 1
                else:
                    in_quotes = False
            else:
                field.append(ch)
        elif ch == '"':
            in_quotes = True
        elif ch == ",":
            row.append("".join(field))
            field = []
        elif ch == "\r":
            pass
        elif ch == "\n":
            row.append("".join(field))
            rows.append(row)
            row = []
            field = []
        else:
            field.append(ch)
        i += 1

    row.append("".join(field))
    if not (len(row) == 1 and row[0] == ""):
        rows.append(row)

    return [[cell.strip() for cell in r] for r in rows]
