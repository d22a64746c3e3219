"""I/O utilities for reading and writing files."""

from ldraw_packer.io.files import read_document
from ldraw_packer.io.files import write_atomic
from ldraw_packer.io.yaml import read_yaml

__all__ = [
    "read_document",
    "write_atomic",
    "read_yaml",
]
