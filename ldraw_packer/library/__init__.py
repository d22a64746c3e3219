"""Part library search."""

from .models import Candidate
from .models import LocatedDocument
from .search import PartLibrary
from .search import iter_candidates
from .search import resolved_path_for

__all__ = [
    "Candidate",
    "LocatedDocument",
    "PartLibrary",
    "iter_candidates",
    "resolved_path_for",
]
