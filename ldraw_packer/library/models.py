"""Data models for part library search."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class Candidate:
    """One location to try for a reference name.

    `read_path` is relative to the library root. `prefix` is the folder the
    document is filed under in the packed output; for the root-relative
    candidate of `48/` and `s/` names it differs from where it is read.
    """

    read_path: str
    prefix: str
    name: str


@dataclass
class LocatedDocument:
    """A document found in the library."""

    content: str
    prefix: str
    resolved_path: str  # Canonical name, used as cache key and 0 FILE name
    source_path: Path  # File that was actually read
