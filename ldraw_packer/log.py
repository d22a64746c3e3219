"""Console logging setup."""

from __future__ import annotations

import logging
import os

from rich.logging import RichHandler

LOG_LEVEL_ENV_VAR = "LDRAW_PACKER_LOG_LEVEL"
_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"}


def setup_logging(level: str | None = None) -> None:
    """Configure console logging through RichHandler. Safe to call multiple times.

    Level resolution (first match wins):
      1) argument `level`
      2) env var `LDRAW_PACKER_LOG_LEVEL`
      3) default = "WARNING"
    """
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING")

    level = str(level).upper().strip()
    if level not in _LEVELS:
        level = "WARNING"

    root = logging.getLogger()
    for h in list(root.handlers):
        root.removeHandler(h)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%H:%M:%S]",
        handlers=[
            RichHandler(
                rich_tracebacks=True,
                show_path=False,
                show_time=level == "DEBUG",
            )
        ],
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING if level != "DEBUG" else logging.DEBUG)
