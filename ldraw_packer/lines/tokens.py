"""Whitespace tokenizing helpers for LDraw lines."""

from __future__ import annotations

_BLANKS = " \t"


def skip_blanks(text: str, start: int = 0) -> int:
    """Return the index of the first non-space, non-tab character at or after start."""
    index = start
    length = len(text)
    while index < length and text[index] in _BLANKS:
        index += 1
    return index


def skip_fields(text: str, count: int, start: int = 0) -> int:
    """Skip `count` whitespace-delimited fields.

    Each field is consumed together with the blanks around it, so the
    returned index points at the first character of the next field (or at
    the end of the text when it runs out of fields early). Repeated
    separators never count as empty fields.

    Args:
        text: Line to scan.
        count: Number of fields to skip.
        start: Index to start scanning at.

    Returns:
        Index just past the skipped fields and their trailing blanks.

    Example:
        >>> line = "1 16 0 0 0 1 0 0 0 1 0 0 0 1 3001.dat"
        >>> line[skip_fields(line, 13, start=2):]
        '3001.dat'
    """
    index = start
    length = len(text)
    for _ in range(count):
        index = skip_blanks(text, index)
        if index >= length:
            break
        while index < length and text[index] not in _BLANKS:
            index += 1
        index = skip_blanks(text, index)
    return index


def normalize_reference(name: str) -> str:
    """Trim a reference name and convert DOS separators to forward slashes."""
    return name.strip().replace("\\", "/")


def split_document(content: str) -> list[str]:
    """Split document text into lines, normalizing CRLF endings first."""
    if "\r\n" in content:
        content = content.replace("\r\n", "\n")
    return content.split("\n")
