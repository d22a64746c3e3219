"""API key loading from a dotenv-style file in the library root."""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

KEYS_FILE_NAME = ".env"


def _parse_line(line: str) -> tuple[str, str] | None:
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None

    key, value = line.split("=", 1)
    key = key.strip()
    if key.startswith("export "):
        key = key[len("export ") :].strip()
    value = value.strip()
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        value = value[1:-1]
    return (key, value) if key else None


class KeyManager:
    """Load `KEY=value` lines into the process environment.

    Variables that are already set are left alone, so an exported
    REBRICKABLE_API_KEY wins over the file.
    """

    def __init__(self, keys_file: Path) -> None:
        self.keys_file = keys_file
        self.loaded: list[str] = []
        self._load_keys()

    def _load_keys(self) -> None:
        if not self.keys_file.is_file():
            return

        try:
            content = self.keys_file.read_text(encoding="utf-8")
        except OSError as e:
            logger.warning(f"Could not read keys file {self.keys_file}: {e}")
            return

        for line in content.splitlines():
            parsed = _parse_line(line)
            if parsed is None:
                continue
            key, value = parsed
            if key not in os.environ:
                os.environ[key] = value
                self.loaded.append(key)

        if self.loaded:
            logger.debug(f"Loaded {', '.join(self.loaded)} from {self.keys_file}")

    def has_key(self, name: str) -> bool:
        """True if the variable is set and non-empty."""
        return bool(os.environ.get(name))

    def get_key(self, name: str) -> str | None:
        """Return the variable's value, or None if unset or empty."""
        return os.environ.get(name) or None
