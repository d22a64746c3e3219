"""LDraw line classification utilities."""

from .classifier import classify_line
from .models import FileBoundary
from .models import LineKind
from .models import PlainLine
from .models import SubpartRef
from .models import SuppressedBoundary
from .tokens import normalize_reference
from .tokens import skip_fields
from .tokens import split_document

__all__ = [
    "classify_line",
    "normalize_reference",
    "skip_fields",
    "split_document",
    "FileBoundary",
    "LineKind",
    "PlainLine",
    "SubpartRef",
    "SuppressedBoundary",
]
