"""Country name to world-atlas numeric id lookup."""

from __future__ import annotations

from pathlib import Path
from types import MappingProxyType
from typing import Mapping

import yaml

DEFAULT_COUNTRY_CODES_PATH = Path(__file__).resolve().parent / "data" / "country_codes.yaml"


def load_country_codes(path: Path) -> Mapping[str, int]:
    """Load and validate a country name -> numeric id table."""
    if not path.exists():
        raise FileNotFoundError(f"Country code table not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if not isinstance(raw, dict):
        raise ValueError(f"Expected mapping in {path}")

    table: dict[str, int] = {}
    for name, code in raw.items():
        if not isinstance(name, str) or not name:
            raise ValueError(f"Country name must be a non-empty string in {path}: {name!r}")
        if isinstance(code, bool) or not isinstance(code, int) or code < 0:
            raise ValueError(f"Invalid numeric code for '{name}' in {path}: {code!r}")
        table[name] = code
    return MappingProxyType(table)


def duplicate_codes(table: Mapping[str, int]) -> dict[int, tuple[str, ...]]:
    """Return codes shared by more than one name (aliases)."""
    by_code: dict[int, list[str]] = {}
    for name, code in table.items():
        by_code.setdefault(code, []).append(name)
    return {code: tuple(names) for code, names in by_code.items() if len(names) > 1}


COUNTRY_CODES: Mapping[str, int] = load_country_codes(DEFAULT_COUNTRY_CODES_PATH)


def resolve_country_code(name: str, table: Mapping[str, int] = COUNTRY_CODES) -> int | None:
    """Exact, case-sensitive lookup; `None` when the name is unknown."""
    return table.get(name)
