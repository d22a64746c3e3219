"""Assemble the packed multi-part document."""

from __future__ import annotations

from pathlib import Path

from ldraw_packer.exceptions import MaterialsNotFoundError
from ldraw_packer.library.search import PartLibrary

from .context import PackResult

MATERIALS_FILE_NAME = "LDConfig.ldr"
PACKED_SUFFIX = "_Packed.mpd"


async def load_materials(library: PartLibrary, file_name: str = MATERIALS_FILE_NAME) -> str:
    """Read the colour definitions that head every packed file.

    Raises:
        MaterialsNotFoundError: If the file can't be read.
    """
    try:
        return await library.read(file_name)
    except OSError as e:
        raise MaterialsNotFoundError(f"Could not read materials file {library.root / file_name}: {e}") from e


def assemble(materials: str, result: PackResult) -> str:
    """Concatenate the materials header and every rewritten body.

    Bodies are emitted last-completed first, which puts the root model
    directly after the header.
    """
    return materials + "\n" + "".join(reversed(result.context.bodies)) + "\n"


def packed_output_path(model_path: Path, suffix: str = PACKED_SUFFIX) -> Path:
    """Return the output file that sits next to the model."""
    return model_path.with_name(model_path.name + suffix)
