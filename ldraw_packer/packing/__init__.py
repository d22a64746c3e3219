"""Reference graph packing."""

from .assembly import assemble
from .assembly import load_materials
from .assembly import packed_output_path
from .cache import PathCache
from .context import PackContext
from .context import PackResult
from .packer import ModelPacker
from .rewriter import boundary_header
from .rewriter import rewrite_document

__all__ = [
    "ModelPacker",
    "PackContext",
    "PackResult",
    "PathCache",
    "assemble",
    "boundary_header",
    "load_materials",
    "packed_output_path",
    "rewrite_document",
]
