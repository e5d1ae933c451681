"""Utility helpers for logging and filesystem output."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any


LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def setup_logging(log_file: Path | None = None, verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging to stderr and optionally a file.

    `quiet` only raises the console threshold. The log file keeps INFO, or
    DEBUG with `verbose`.
    """
    level = logging.DEBUG if verbose else logging.INFO
    console = logging.StreamHandler(sys.stderr)
    if quiet:
        console.setLevel(logging.WARNING)
    handlers: list[logging.Handler] = [console]
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(level=level, format=LOG_FORMAT, handlers=handlers, force=True)


def write_json(path: Path, payload: Any, *, sort_keys: bool = True) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(payload, fh, indent=2, sort_keys=sort_keys, ensure_ascii=False)
        fh.write("\n")
    return path
