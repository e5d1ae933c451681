"""Typed configuration loader for `config.yaml`."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, cast

import yaml

from .atlas import DEFAULT_FEATURE, DEFAULT_WORLD_ATLAS_URL
from .country_codes import DEFAULT_COUNTRY_CODES_PATH

SIZE_PRESETS: Mapping[str, tuple[int, int]] = {
    "small": (250, 175),
    "large": (500, 350),
}

DEFAULT_QUANTITATIVE_RANGE = ("#C2D5EE", "#1A73E8")
DEFAULT_NOMINAL_RANGE = (
    "#1A73E8",
    "#12B5CB",
    "#E52592",
    "#E8710A",
    "#F9AB00",
    "#7CB342",
    "#9334E6",
    "#80868B",
    "#079C98",
    "#A142F4",
)


def _mapping(value: Any, field_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"Expected mapping for '{field_name}'")
    return cast(Mapping[str, Any], value)


def _str(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Expected non-empty string for '{field_name}'")
    return value.strip()


def _opt_str(value: Any, field_name: str) -> str | None:
    return None if value is None else _str(value, field_name)


def _int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Expected integer for '{field_name}'")
    return value


def _opt_positive_int(value: Any, field_name: str) -> int | None:
    if value is None:
        return None
    parsed = _int(value, field_name)
    if parsed <= 0:
        raise ValueError(f"{field_name} must be > 0")
    return parsed


def _bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ValueError(f"Expected bool for '{field_name}'")
    return value


def _str_list(value: Any, field_name: str) -> tuple[str, ...]:
    if not isinstance(value, list) or not value:
        raise ValueError(f"Expected non-empty list for '{field_name}'")
    out: list[str] = []
    for idx, item in enumerate(value):
        out.append(_str(item, f"{field_name}[{idx}]"))
    return tuple(out)


def _path_from_cfg(value: Any, field_name: str, root_dir: Path) -> Path:
    raw = _str(value, field_name)
    p = Path(raw)
    return p if p.is_absolute() else root_dir / p


@dataclass(frozen=True, slots=True)
class ChartConfig:
    size: str = "small"
    width: int | None = None
    height: int | None = None
    title_case: bool = False
    labels: Mapping[str, str] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> ChartConfig:
        size = _str(raw.get("size", "small"), "chart.size").casefold()
        if size not in SIZE_PRESETS:
            raise ValueError("chart.size must be one of: " + ", ".join(sorted(SIZE_PRESETS)))

        labels_raw = _mapping(raw.get("labels"), "chart.labels")
        labels = {
            _str(k, "chart.labels key"): _str(v, f"chart.labels.{k}") for k, v in labels_raw.items()
        }
        return cls(
            size=size,
            width=_opt_positive_int(raw.get("width"), "chart.width"),
            height=_opt_positive_int(raw.get("height"), "chart.height"),
            title_case=_bool(raw.get("title_case", False), "chart.title_case"),
            labels=labels,
        )


@dataclass(frozen=True, slots=True)
class ColorsConfig:
    ocean: str = "aliceblue"
    land: str = "mintcream"
    border: str = "black"
    quantitative_range: tuple[str, ...] = DEFAULT_QUANTITATIVE_RANGE
    nominal_range: tuple[str, ...] = DEFAULT_NOMINAL_RANGE
    ordinal_scheme: str = "blues"

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> ColorsConfig:
        quantitative_range = (
            _str_list(raw["quantitative_range"], "colors.quantitative_range")
            if raw.get("quantitative_range") is not None
            else DEFAULT_QUANTITATIVE_RANGE
        )
        if len(quantitative_range) < 2:
            raise ValueError("colors.quantitative_range needs at least two colors")
        nominal_range = (
            _str_list(raw["nominal_range"], "colors.nominal_range")
            if raw.get("nominal_range") is not None
            else DEFAULT_NOMINAL_RANGE
        )
        return cls(
            ocean=_str(raw.get("ocean", "aliceblue"), "colors.ocean"),
            land=_str(raw.get("land", "mintcream"), "colors.land"),
            border=_str(raw.get("border", "black"), "colors.border"),
            quantitative_range=quantitative_range,
            nominal_range=nominal_range,
            ordinal_scheme=_str(raw.get("ordinal_scheme", "blues"), "colors.ordinal_scheme"),
        )


@dataclass(frozen=True, slots=True)
class WorldAtlasConfig:
    url: str | None = DEFAULT_WORLD_ATLAS_URL
    path: Path | None = None
    feature: str = DEFAULT_FEATURE

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], root_dir: Path) -> WorldAtlasConfig:
        path = (
            _path_from_cfg(raw["path"], "world_atlas.path", root_dir)
            if raw.get("path") is not None
            else None
        )
        url = _opt_str(raw.get("url"), "world_atlas.url")
        if path is not None and url is not None:
            raise ValueError("Use only one of 'world_atlas.url' or 'world_atlas.path'")
        if path is None and url is None:
            url = DEFAULT_WORLD_ATLAS_URL
        return cls(
            url=url,
            path=path,
            feature=_str(raw.get("feature", DEFAULT_FEATURE), "world_atlas.feature"),
        )


@dataclass(frozen=True, slots=True)
class PathsConfig:
    country_codes: Path = DEFAULT_COUNTRY_CODES_PATH
    output_dir: Path = Path("build")
    logs_dir: Path = Path("build") / "logs"

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], root_dir: Path) -> PathsConfig:
        country_codes = (
            _path_from_cfg(raw["country_codes"], "paths.country_codes", root_dir)
            if raw.get("country_codes") is not None
            else DEFAULT_COUNTRY_CODES_PATH
        )
        output_dir = _path_from_cfg(raw.get("output_dir", "build"), "paths.output_dir", root_dir)
        logs_dir = (
            _path_from_cfg(raw["logs_dir"], "paths.logs_dir", root_dir)
            if raw.get("logs_dir") is not None
            else output_dir / "logs"
        )
        return cls(country_codes=country_codes, output_dir=output_dir, logs_dir=logs_dir)


@dataclass(frozen=True, slots=True)
class AppConfig:
    source_path: Path | None
    chart: ChartConfig
    colors: ColorsConfig
    world_atlas: WorldAtlasConfig
    paths: PathsConfig

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], source_path: Path) -> AppConfig:
        root_dir = source_path.parent.resolve()
        return cls(
            source_path=source_path.resolve(),
            chart=ChartConfig.from_mapping(_mapping(raw.get("chart"), "chart")),
            colors=ColorsConfig.from_mapping(_mapping(raw.get("colors"), "colors")),
            world_atlas=WorldAtlasConfig.from_mapping(
                _mapping(raw.get("world_atlas"), "world_atlas"), root_dir
            ),
            paths=PathsConfig.from_mapping(_mapping(raw.get("paths"), "paths"), root_dir),
        )

    @classmethod
    def default(cls) -> AppConfig:
        return cls(
            source_path=None,
            chart=ChartConfig(),
            colors=ColorsConfig(),
            world_atlas=WorldAtlasConfig(),
            paths=PathsConfig(),
        )


def load_config(path: str | Path) -> AppConfig:
    """Load and validate the YAML config file into typed settings."""
    cfg_path = Path(path).resolve()
    if not cfg_path.exists():
        raise FileNotFoundError(f"Config file not found: {cfg_path}")
    with cfg_path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if raw is None:
        raw = {}
    if not isinstance(raw, Mapping):
        raise ValueError("Top-level config must be a YAML mapping")
    return AppConfig.from_mapping(cast(Mapping[str, Any], raw), cfg_path)
