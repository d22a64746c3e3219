"""Deduplication of resolved documents."""

from __future__ import annotations


class PathCache:
    """Visited-set of the reference graph.

    Keyed by resolved path so that two spellings of one file (`3001.DAT`,
    `parts/3001.dat`) embed it once. Raw reference names are kept as aliases
    of the path they resolved to, so repeating a name costs no I/O.
    """

    def __init__(self) -> None:
        """Initialize empty cache."""
        self._paths: dict[str, str] = {}
        self._aliases: dict[str, str] = {}

    def lookup(self, name: str) -> str | None:
        """Return the resolved path for a name, if known.

        Args:
            name: Raw reference name or resolved path.

        Returns:
            Resolved path, or None on a miss.
        """
        return self._aliases.get(name) or self._paths.get(name)

    def remember(self, name: str, resolved_path: str) -> None:
        """Record that a reference name resolved to resolved_path."""
        self._aliases[name] = resolved_path
        self._paths.setdefault(resolved_path, resolved_path)

    def reserve(self, resolved_path: str) -> bool:
        """Claim a located document for embedding.

        Called before the document's own references are resolved, which
        breaks reference cycles.

        Returns:
            True if the caller should rewrite and embed the document, False
            if it is already embedded or being embedded.
        """
        if resolved_path in self._paths:
            return False
        self._paths[resolved_path] = resolved_path
        return True

    def mark_boundary(self, name: str) -> None:
        """Record a `0 FILE` section name as already embedded."""
        self._paths.setdefault(name, name)

    def __contains__(self, name: str) -> bool:
        """Check if name is known."""
        return self.lookup(name) is not None

    def __len__(self) -> int:
        return len(self._paths)
