"""Shared fixtures: throwaway LDraw libraries under tmp_path."""

from __future__ import annotations

from pathlib import Path

import pytest

from ldraw_packer.settings import API_KEY_ENV_VARS
from ldraw_packer.settings import BASE_URL_ENV_VAR
from ldraw_packer.settings import LDRAW_DIR_ENV_VAR

IDENTITY = "0 0 0 1 0 0 0 1 0 0 0 1"


def ref(name: str, colour: int = 16) -> str:
    """Build a `1` line placing name at the origin."""
    return f"1 {colour} {IDENTITY} {name}"


class Library:
    """Writes files into a fake LDraw library."""

    def __init__(self, root: Path) -> None:
        self.root = root
        for folder in ("parts", "parts/s", "p", "p/48", "models"):
            (root / folder).mkdir(parents=True, exist_ok=True)

    def add(self, relative_path: str, *lines: str) -> Path:
        path = self.root / relative_path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path


@pytest.fixture
def library(tmp_path: Path) -> Library:
    """Empty library with the standard folders."""
    lib = Library(tmp_path / "ldraw")
    lib.add("LDConfig.ldr", "0 LDraw.org Configuration File")
    return lib


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove packer variables for the test and restore them afterwards.

    setenv before delenv makes monkeypatch undo values that KeyManager
    writes straight into os.environ.
    """
    for var in (*API_KEY_ENV_VARS, BASE_URL_ENV_VAR, LDRAW_DIR_ENV_VAR, "LDRAW_PACKER_LOG_LEVEL"):
        monkeypatch.setenv(var, "")
        monkeypatch.delenv(var)
