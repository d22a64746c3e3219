"""Classification of raw LDraw lines."""

from __future__ import annotations

from .models import FileBoundary
from .models import LineKind
from .models import PlainLine
from .models import SubpartRef
from .models import SuppressedBoundary
from .tokens import normalize_reference
from .tokens import skip_blanks
from .tokens import skip_fields

FILE_DIRECTIVE = "0 FILE "
SUBPART_TOKEN = "1 "

# Colour code plus the 12 numbers of position and transform matrix
SUBPART_FIELD_COUNT = 13


def classify_line(raw_line: str, index: int) -> LineKind:
    """Classify one line of a document.

    Leading spaces and tabs are stripped before classification and are not
    part of the returned `line`. Line endings must already be normalized
    (see `split_document`).

    Args:
        raw_line: Line text without its newline.
        index: Zero-based position of the line in its document.

    Returns:
        The classified line. A `1` line too short to carry a name is a
        `PlainLine`.
    """
    line = raw_line[skip_blanks(raw_line) :]

    if line.startswith(FILE_DIRECTIVE):
        if index == 0:
            return SuppressedBoundary(line=line)
        return FileBoundary(line=line, name=normalize_reference(line[len(FILE_DIRECTIVE) :]))

    if line.startswith(SUBPART_TOKEN):
        name_start = skip_fields(line, SUBPART_FIELD_COUNT, start=len(SUBPART_TOKEN))
        name = normalize_reference(line[name_start:])
        if name:
            return SubpartRef(line=line, prefix_text=line[:name_start], name=name)

    return PlainLine(line=line)
