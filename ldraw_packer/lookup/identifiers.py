"""Part identifier normalization.

Models exported from BrickLink-based tools reference printed parts by
BrickLink ids (e.g. `3001bpb001`) which have no file in the LDraw library.
These helpers turn such ids into query variants and into a last-resort
LDraw id.
"""

from __future__ import annotations

import posixpath
import re

CONTENT_EXTENSIONS: tuple[str, ...] = (".ldr", ".dat", ".mpd")
DEFAULT_EXTENSION = ".dat"

_DIGITS = re.compile(r"\d+")
# Last run of digits in the string
_LAST_DIGITS = re.compile(r"(\d+)(?!.*\d)")


def has_content_extension(name: str) -> bool:
    """True if the name ends in a model or part extension (any case)."""
    return name.lower().endswith(CONTENT_EXTENSIONS)


def part_id_for(name: str) -> str:
    """Strip folders and extension from a reference name."""
    stem, _ = posixpath.splitext(posixpath.basename(name))
    return stem


def header_normalized(part_id: str) -> str:
    """Rewrite BrickLink `bpb` print headers to the `pb` form."""
    return part_id.replace("bpb", "pb")


def zero_padded(part_id: str) -> str:
    """Insert a leading zero before the last digit run (`3001pb01` -> `3001pb001`)."""
    return _LAST_DIGITS.sub(r"0\1", part_id, count=1)


def default_identifier(part_id: str) -> str:
    """Best-effort LDraw file name for an untranslatable part id.

    Keeps the first digit run, which is the base mould number, and drops any
    print or variant suffix: `3001pr0001` -> `3001.dat`. Ids without digits
    are kept whole.
    """
    match = _DIGITS.search(part_id)
    base = match.group(0) if match else part_id
    return base + DEFAULT_EXTENSION
