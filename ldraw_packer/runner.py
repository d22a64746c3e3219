"""End-to-end packing of one model: materials, graph, assembly, output."""

from __future__ import annotations

import contextlib
import logging
from dataclasses import dataclass
from pathlib import Path

from rich.markup import escape

from ldraw_packer.console import console
from ldraw_packer.io.files import write_atomic
from ldraw_packer.library.search import PartLibrary
from ldraw_packer.lookup.rebrickable import RebrickableLookup
from ldraw_packer.packing.assembly import assemble
from ldraw_packer.packing.assembly import load_materials
from ldraw_packer.packing.assembly import packed_output_path
from ldraw_packer.packing.context import PackResult
from ldraw_packer.packing.packer import ModelPacker
from ldraw_packer.settings import PackerSettings

logger = logging.getLogger(__name__)


@dataclass
class PackOutcome:
    """What a finished run produced."""

    result: PackResult
    output_path: Path
    content: str


async def pack_model(
    model_name: str,
    settings: PackerSettings,
    output_path: Path | None = None,
) -> PackOutcome:
    """Pack a model into a single multi-part file and write it.

    Args:
        model_name: Model path relative to the library root.
        settings: Resolved settings.
        output_path: Where to write. Defaults to `<model><output_suffix>`
                     next to the model.

    Raises:
        MaterialsNotFoundError: If the materials header can't be read.
        RootNotFoundError: If the model can't be read.
        OSError: If the output can't be written.
    """
    library = PartLibrary(settings.ldraw_dir)

    console.print(f'Loading materials file "{escape(str(library.root / settings.materials_file))}"...')
    materials = await load_materials(library, settings.materials_file)

    console.print(f'Packing "{escape(model_name)}"...')
    async with contextlib.AsyncExitStack() as stack:
        lookup = None
        if settings.lookup_enabled:
            lookup = await stack.enter_async_context(
                RebrickableLookup(
                    settings.api_key,
                    base_url=settings.base_url,
                    timeout=settings.lookup_timeout,
                )
            )
        result = await ModelPacker(library, lookup).pack(model_name)

    content = assemble(materials, result)
    if output_path is None:
        output_path = packed_output_path(settings.ldraw_dir / model_name, settings.output_suffix)

    console.print(f'Writing "{escape(str(output_path))}"...')
    write_atomic(output_path, content)
    logger.info(f"Embedded {len(result.paths)} documents into {output_path}")
    console.print("Done.")

    return PackOutcome(result=result, output_path=output_path, content=content)
