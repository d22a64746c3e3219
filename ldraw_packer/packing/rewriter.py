"""Rewrite a document's part references to resolved paths."""

from __future__ import annotations

from collections.abc import Awaitable
from collections.abc import Callable

from ldraw_packer.lines.classifier import FILE_DIRECTIVE
from ldraw_packer.lines.classifier import classify_line
from ldraw_packer.lines.models import FileBoundary
from ldraw_packer.lines.models import SubpartRef
from ldraw_packer.lines.models import SuppressedBoundary
from ldraw_packer.lines.tokens import split_document


def boundary_header(resolved_path: str) -> str:
    """Return the `0 FILE` line that opens an embedded document."""
    return f"{FILE_DIRECTIVE}{resolved_path}\n"


async def rewrite_document(
    content: str,
    resolved_path: str,
    *,
    is_root: bool,
    resolve_reference: Callable[[str], Awaitable[str]],
    on_boundary: Callable[[str], None] | None = None,
) -> str:
    """Rewrite one document for embedding.

    Every `1` line has its trailing name replaced by whatever
    `resolve_reference` returns for it; references are awaited one at a time,
    in line order. `0 FILE` sections already present in the document are
    reported to `on_boundary` before any reference is resolved, so references
    to sections further down the same file are recognised.

    Args:
        content: Raw document text.
        resolved_path: The document's own resolved path.
        is_root: True for the model being packed. Its body gets no header.
        resolve_reference: Coroutine mapping a reference name to a resolved path.
        on_boundary: Called with the name of every embedded section.

    Returns:
        Rewritten body, every line newline-terminated.
    """
    classified = [classify_line(line, index) for index, line in enumerate(split_document(content))]

    if on_boundary is not None:
        for item in classified:
            if isinstance(item, FileBoundary) and item.name:
                on_boundary(item.name)

    parts: list[str] = [] if is_root else [boundary_header(resolved_path)]
    for item in classified:
        if isinstance(item, SuppressedBoundary):
            continue
        if isinstance(item, SubpartRef):
            target = await resolve_reference(item.name)
            parts.append(item.rewrite(target) + "\n")
        else:
            parts.append(item.line + "\n")

    return "".join(parts)
