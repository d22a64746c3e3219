"""File reads and atomic writes.

Library files are read once through `read_document`; a failed read is the
caller's signal to move on. The packed model is written with `write_atomic`
so an interrupted run never leaves a half-written file.
"""

from __future__ import annotations

import contextlib
import tempfile
from pathlib import Path


async def read_document(path: Path) -> str:
    """Read a library document as text.

    A leading UTF-8 byte order mark is dropped. Invalid UTF-8 sequences are
    replaced rather than rejected; some older library files carry Latin-1
    author names.

    Args:
        path: Path to file to read.

    Returns:
        File content as string.

    Raises:
        FileNotFoundError: If file doesn't exist.
        OSError: If file can't be read.
    """
    return path.read_text(encoding="utf-8-sig", errors="replace")


def write_atomic(path: Path, content: str, *, encoding: str = "utf-8") -> None:
    """Write file atomically using temp file + rename pattern.

    Newlines in content are written unchanged on every platform.

    Raises:
        OSError: If write or rename fails
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_path: Path | None = None
    try:
        # Same directory keeps the rename on one filesystem
        with tempfile.NamedTemporaryFile(
            mode="w",
            encoding=encoding,
            newline="",
            dir=path.parent,
            prefix=f".{path.stem}_",
            suffix=".tmp",
            delete=False,
        ) as tmp_file:
            temp_path = Path(tmp_file.name)
            tmp_file.write(content)
            tmp_file.flush()

        temp_path.replace(path)

    except Exception as e:
        if temp_path:
            with contextlib.suppress(Exception):
                temp_path.unlink()
        raise OSError(f"Failed to write atomically to {path}: {e}") from e
