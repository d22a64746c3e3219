"""YAML file reading utilities."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from .files import read_document


async def read_yaml(path: Path) -> dict[str, Any] | None:
    """Read YAML file and return parsed content.

    Args:
        path: Path to YAML file.

    Returns:
        Parsed YAML content as dict, or None if file doesn't exist.

    Raises:
        yaml.YAMLError: If file contains invalid YAML.
        OSError: If file can't be read.
    """
    if not path.exists():
        return None

    content = await read_document(path)
    return yaml.safe_load(content) or {}
