"""Data models for classified LDraw lines."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class FileBoundary:
    """A `0 FILE <name>` line opening an embedded section."""

    line: str
    name: str  # Slash-normalized section name


@dataclass(frozen=True)
class SuppressedBoundary:
    """A `0 FILE` line on the first line of a document.

    The document's self-declaration is replaced by the synthesized header
    (or dropped, for the root), so it is never re-emitted.
    """

    line: str


@dataclass(frozen=True)
class SubpartRef:
    """A `1 <colour> <x y z> <a b c d e f g h i> <name>` line."""

    line: str
    prefix_text: str  # Token, 13 fields and the whitespace after them, verbatim
    name: str  # Slash-normalized reference name

    def rewrite(self, resolved_path: str) -> str:
        """Return the line with its trailing name replaced."""
        return self.prefix_text + resolved_path


@dataclass(frozen=True)
class PlainLine:
    """Any other line; passed through unchanged."""

    line: str


LineKind = FileBoundary | SuppressedBoundary | SubpartRef | PlainLine
