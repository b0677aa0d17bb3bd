"""Escape-aware splitter for the ``.TH`` title line.

The title directive carries five space-separated fields::

    .TH name section date source manual-title

A backslash protects the following character from being treated as a
delimiter, so ``My\\ Title`` stays one field. The backslash itself is kept
in the field content.
"""

from __future__ import annotations

from mansite.nodes import TITLE_FIELDS

ESCAPE_CHAR = "\\"
DELIMITER = " "


def split_title_fields(line: str) -> tuple[str, str, str, str, str]:
    """Split a title line into exactly five fields.

    A field runs from the current start through the delimiter that closes
    it, inclusive, and is then left-trimmed only, so every field except the
    last keeps its trailing space. The next field starts at the delimiter
    position itself, so consecutive unescaped spaces produce empty fields.
    Anything after the fifth field is discarded, and missing fields are
    empty strings.

    Args:
        line: Remainder of the ``.TH`` line, leading whitespace removed

    Returns:
        Tuple of (name, section, date, source, manual title)

    Example:
        >>> split_title_fields("LS 1 2024-01-01 GNU User\\\\ Commands")[4]
        'User\\\\ Commands'
        >>> split_title_fields("LS 1")
        ('LS ', '1', '', '', '')
    """
    fields: list[str] = []
    escape = False
    start = 0
    last = len(line) - 1

    for i, ch in enumerate(line):
        if len(fields) == TITLE_FIELDS:
            break

        at_delimiter = not escape and ch == DELIMITER
        if at_delimiter or i == last:
            fields.append(line[start : i + 1].lstrip())
            start = i
            continue

        escape = ch == ESCAPE_CHAR

    fields.extend([""] * (TITLE_FIELDS - len(fields)))
    return tuple(fields)  # type: ignore[return-value]
