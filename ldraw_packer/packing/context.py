"""State of one packing run."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field

from .cache import PathCache


@dataclass
class PackContext:
    """Mutable state threaded through every recursive resolve call.

    Owned by a single `ModelPacker.pack()` call; never shared between runs
    or tasks.
    """

    cache: PathCache = field(default_factory=PathCache)
    paths: list[str] = field(default_factory=list)  # Resolved paths, completion order
    bodies: list[str] = field(default_factory=list)  # Rewritten bodies, parallel to paths
    unsupported: list[str] = field(default_factory=list)

    def add_body(self, resolved_path: str, body: str) -> bool:
        """Append a rewritten document unless its path is already present.

        Returns:
            True if appended.
        """
        if resolved_path in self.paths:
            return False
        self.paths.append(resolved_path)
        self.bodies.append(body)
        return True

    def add_unsupported(self, name: str) -> None:
        """Record a reference that no lookup could translate."""
        if name not in self.unsupported:
            self.unsupported.append(name)


@dataclass
class PackResult:
    """Outcome of packing one model."""

    root_path: str
    context: PackContext

    @property
    def paths(self) -> list[str]:
        return self.context.paths

    @property
    def unsupported(self) -> list[str]:
        return self.context.unsupported
