"""Protocol for translating part identifiers."""

from __future__ import annotations

from typing import Protocol


class IdentifierLookupProtocol(Protocol):
    """Protocol for finding the LDraw equivalent of a foreign part id.

    ldraw-packer provides RebrickableLookup. Tests and offline runs may pass
    any object with a matching `translate` coroutine.
    """

    async def translate(self, part_id: str) -> str | None:
        """Translate a part id to an LDraw part id.

        Args:
            part_id: Part id without extension (e.g. "3001pr0001").

        Returns:
            LDraw part id without extension, or None if there is no match.
        """
        ...
