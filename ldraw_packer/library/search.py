"""Locate LDraw documents in a part library.

A library root follows the official LDraw layout:

    <root>/LDConfig.ldr
    <root>/parts/        standard parts (and parts/s/ subparts)
    <root>/p/            shared primitives (and p/48/ hi-res primitives)
    <root>/models/       user models

References inside documents are written relative to whichever of those
folders holds the file, so a name is tried against each folder in a fixed
order, first as written and then lower-cased for case-sensitive filesystems.
"""

from __future__ import annotations

import logging
import posixpath
from collections.abc import Iterator
from pathlib import Path

from ldraw_packer.io.files import read_document
from ldraw_packer.lines.tokens import normalize_reference

from .models import Candidate
from .models import LocatedDocument

logger = logging.getLogger(__name__)

PARTS_PREFIX = "parts/"
PRIMITIVES_PREFIX = "p/"
MODELS_PREFIX = "models/"

# Searched in this order after the root-relative candidate
SEARCH_PREFIXES: tuple[str, ...] = (PARTS_PREFIX, PRIMITIVES_PREFIX, MODELS_PREFIX)

# Root-relative names that live under a library folder
_MARKER_PREFIXES: tuple[tuple[str, str], ...] = (
    ("48/", PRIMITIVES_PREFIX),
    ("s/", PARTS_PREFIX),
)


def resolved_path_for(prefix: str, name: str) -> str:
    """Build the canonical resolved path for a name filed under prefix."""
    return normalize_reference(posixpath.normpath(posixpath.join(prefix, normalize_reference(name))))


def _marker_prefix(name: str) -> str:
    for marker, prefix in _MARKER_PREFIXES:
        if name.startswith(marker):
            return prefix
    return ""


def iter_candidates(name: str) -> Iterator[Candidate]:
    """Yield search candidates for a name in priority order.

    Two passes: the name as written, then lower-cased. Each pass tries the
    root-relative path first, then every folder in SEARCH_PREFIXES.
    """
    for variant in (name, name.lower()):
        yield Candidate(read_path=variant, prefix=_marker_prefix(variant), name=variant)
        for prefix in SEARCH_PREFIXES:
            yield Candidate(read_path=prefix + variant, prefix=prefix, name=variant)


class PartLibrary:
    """Read-only view of an LDraw library directory."""

    def __init__(self, root: Path) -> None:
        """Initialize library.

        Args:
            root: Library root directory (the folder holding LDConfig.ldr).
        """
        self.root = root

    async def read(self, relative_path: str) -> str:
        """Read a library file by root-relative path.

        Raises:
            OSError: If the file can't be read.
        """
        return await read_document(self.root / relative_path)

    async def locate(self, name: str) -> LocatedDocument | None:
        """Find the first readable candidate for a reference name.

        Args:
            name: Reference name as written in a document, slash-normalized.

        Returns:
            The located document, or None if no candidate could be read.
        """
        for candidate in iter_candidates(name):
            source_path = self.root / candidate.read_path
            try:
                content = await read_document(source_path)
            except OSError as e:
                logger.debug(f"Not at {candidate.read_path}: {type(e).__name__}")
                continue

            resolved_path = resolved_path_for(candidate.prefix, candidate.name)
            logger.debug(f"Located {name} at {source_path} as {resolved_path}")
            return LocatedDocument(
                content=content,
                prefix=candidate.prefix,
                resolved_path=resolved_path,
                source_path=source_path,
            )

        return None
