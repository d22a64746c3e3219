"""ldraw-packer - flatten an LDraw model into one self-contained MPD file.

A model references parts by name; parts reference subparts and primitives.
The packer walks that graph depth first, finds each document in an LDraw
library, rewrites every reference to the document's canonical path and
embeds each document exactly once as a `0 FILE` section.

Parts missing from the library (typically printed parts exported with
BrickLink ids) are translated through the Rebrickable API, falling back to
the unprinted base part.
"""

from __future__ import annotations

# Exceptions
from ldraw_packer.exceptions import LookupServiceError
from ldraw_packer.exceptions import MaterialsNotFoundError
from ldraw_packer.exceptions import PackerError
from ldraw_packer.exceptions import RootNotFoundError
from ldraw_packer.exceptions import SettingsError

# Library search
from ldraw_packer.library.models import LocatedDocument
from ldraw_packer.library.search import PartLibrary

# Line classification
from ldraw_packer.lines.classifier import classify_line
from ldraw_packer.lines.tokens import skip_fields

# Lookup
from ldraw_packer.lookup.protocol import IdentifierLookupProtocol
from ldraw_packer.lookup.rebrickable import RebrickableLookup

# Packing
from ldraw_packer.packing.assembly import assemble
from ldraw_packer.packing.cache import PathCache
from ldraw_packer.packing.context import PackContext
from ldraw_packer.packing.context import PackResult
from ldraw_packer.packing.packer import ModelPacker
from ldraw_packer.packing.rewriter import rewrite_document

# Running
from ldraw_packer.runner import pack_model
from ldraw_packer.settings import PackerSettings
from ldraw_packer.settings import load_settings

__all__ = [
    "IdentifierLookupProtocol",
    "LocatedDocument",
    "LookupServiceError",
    "MaterialsNotFoundError",
    "ModelPacker",
    "PackContext",
    "PackResult",
    "PackerError",
    "PackerSettings",
    "PartLibrary",
    "PathCache",
    "RebrickableLookup",
    "RootNotFoundError",
    "SettingsError",
    "assemble",
    "classify_line",
    "load_settings",
    "pack_model",
    "rewrite_document",
    "skip_fields",
]
