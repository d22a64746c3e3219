"""Packer settings.

Resolved in order, later sources winning:

1. defaults below
2. `ldraw-packer.yaml` in the library root
3. environment variables (after `.env` in the library root is loaded)
4. command-line options

Secrets never go in the YAML file; the API key comes from the environment,
`.env`, or `--api-key`.

Example `ldraw-packer.yaml`:

    materials_file: LDConfig.ldr
    output_suffix: _Packed.mpd
    lookup:
      enabled: true
      base_url: https://rebrickable.com/api/v3
      timeout: 10
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from ldraw_packer.exceptions import SettingsError
from ldraw_packer.io.yaml import read_yaml
from ldraw_packer.keys import KEYS_FILE_NAME
from ldraw_packer.keys import KeyManager
from ldraw_packer.lookup.rebrickable import DEFAULT_BASE_URL
from ldraw_packer.lookup.rebrickable import DEFAULT_TIMEOUT
from ldraw_packer.packing.assembly import MATERIALS_FILE_NAME
from ldraw_packer.packing.assembly import PACKED_SUFFIX

logger = logging.getLogger(__name__)

SETTINGS_FILE_NAME = "ldraw-packer.yaml"

LDRAW_DIR_ENV_VAR = "LDRAW_DIR"
API_KEY_ENV_VARS = ("REBRICKABLE_API_KEY", "API_KEY")
BASE_URL_ENV_VAR = "REBRICKABLE_BASE_URL"

_TOP_LEVEL_KEYS = {"materials_file", "output_suffix", "lookup"}
_LOOKUP_KEYS = {"enabled", "base_url", "timeout"}


@dataclass
class PackerSettings:
    """Everything a packing run needs besides the model name."""

    ldraw_dir: Path
    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    lookup_timeout: float = DEFAULT_TIMEOUT
    lookup_enabled: bool = True
    materials_file: str = MATERIALS_FILE_NAME
    output_suffix: str = PACKED_SUFFIX

    def apply_file(self, data: dict[str, Any], source: Path) -> None:
        """Apply values from a parsed settings file.

        Raises:
            SettingsError: If a value has the wrong shape.
        """
        for key in sorted(set(data) - _TOP_LEVEL_KEYS):
            logger.warning(f"Ignoring unknown setting '{key}' in {source}")

        if "materials_file" in data:
            self.materials_file = str(data["materials_file"])
        if "output_suffix" in data:
            self.output_suffix = str(data["output_suffix"])

        lookup = data.get("lookup") or {}
        if not isinstance(lookup, dict):
            raise SettingsError(f"'lookup' in {source} must be a mapping")
        for key in sorted(set(lookup) - _LOOKUP_KEYS):
            logger.warning(f"Ignoring unknown setting 'lookup.{key}' in {source}")

        if "enabled" in lookup:
            self.lookup_enabled = bool(lookup["enabled"])
        if "base_url" in lookup:
            self.base_url = str(lookup["base_url"])
        if "timeout" in lookup:
            try:
                self.lookup_timeout = float(lookup["timeout"])
            except (TypeError, ValueError) as e:
                raise SettingsError(f"'lookup.timeout' in {source} must be a number") from e

    def apply_env(self) -> None:
        """Apply values from environment variables."""
        for var in API_KEY_ENV_VARS:
            if value := os.environ.get(var):
                self.api_key = value
                break
        if value := os.environ.get(BASE_URL_ENV_VAR):
            self.base_url = value


def default_ldraw_dir() -> Path:
    """Library root from LDRAW_DIR, or the current directory."""
    env_dir = os.environ.get(LDRAW_DIR_ENV_VAR)
    if env_dir:
        return Path(env_dir).expanduser()
    return Path.cwd()


async def load_settings(
    ldraw_dir: Path | None = None,
    *,
    api_key: str | None = None,
    lookup_enabled: bool | None = None,
) -> PackerSettings:
    """Resolve settings for a run.

    Args:
        ldraw_dir: Library root. Defaults to LDRAW_DIR or the current directory.
        api_key: Overrides any configured API key.
        lookup_enabled: Overrides the configured lookup switch.

    Raises:
        SettingsError: If the settings file is invalid.
    """
    root = ldraw_dir if ldraw_dir is not None else default_ldraw_dir()
    KeyManager(root / KEYS_FILE_NAME)

    settings = PackerSettings(ldraw_dir=root)

    settings_path = root / SETTINGS_FILE_NAME
    try:
        data = await read_yaml(settings_path)
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in {settings_path}: {e}") from e
    if data is not None:
        if not isinstance(data, dict):
            raise SettingsError(f"{settings_path} must contain a mapping")
        settings.apply_file(data, settings_path)

    settings.apply_env()

    if api_key:
        settings.api_key = api_key
    if lookup_enabled is not None:
        settings.lookup_enabled = lookup_enabled

    return settings
