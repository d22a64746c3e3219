"""External part identifier lookup."""

from .identifiers import CONTENT_EXTENSIONS
from .identifiers import default_identifier
from .identifiers import has_content_extension
from .identifiers import header_normalized
from .identifiers import part_id_for
from .identifiers import zero_padded
from .protocol import IdentifierLookupProtocol
from .rebrickable import DEFAULT_BASE_URL
from .rebrickable import RebrickableLookup
from .rebrickable import extract_ldraw_id

__all__ = [
    "CONTENT_EXTENSIONS",
    "DEFAULT_BASE_URL",
    "IdentifierLookupProtocol",
    "RebrickableLookup",
    "default_identifier",
    "extract_ldraw_id",
    "has_content_extension",
    "header_normalized",
    "part_id_for",
    "zero_padded",
]
