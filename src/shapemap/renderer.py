"""Country shape map renderer: result value in, Vega-Lite spec out."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Sequence

from .atlas import WorldAtlas, load_world_atlas
from .config import AppConfig, WorldAtlasConfig
from .country_codes import COUNTRY_CODES, DEFAULT_COUNTRY_CODES_PATH, load_country_codes
from .encoding import classify_field
from .errors import InvalidInputShapeError, ShapeMapError
from .models import DataValue, EncodingType, Field
from .reports import Report, format_limited_list
from .results import load_result
from .roles import color_field, has_required_fields, region_field, resolve_roles
from .rows import MappedRow, RowMappingStats, map_rows, map_value
from .spec import build_shape_map_spec
from .styling import chart_size, color_scale, format_title

_LOGGER = logging.getLogger("shapemap.renderer")


class CountryShapeMapRenderer:
    """Builds a fresh choropleth spec for every result it is given."""

    def __init__(
        self,
        cfg: AppConfig | None = None,
        *,
        atlas: WorldAtlas | None = None,
        country_codes: Mapping[str, int] = COUNTRY_CODES,
    ) -> None:
        self.cfg = cfg or AppConfig.default()
        self.atlas = atlas or WorldAtlas()
        self.country_codes = country_codes
        self.last_stats: RowMappingStats | None = None

    def region_field(self, struct: Field) -> Field:
        return region_field(struct)

    def color_field(self, struct: Field) -> Field:
        return color_field(struct)

    def data_value(self, cell: DataValue, struct: Field) -> int | float | str | None:
        return map_value(cell, self.region_field(struct), self.country_codes)

    def data_type(self, target: Field, struct: Field) -> EncodingType:
        return classify_field(target, self.region_field(struct))

    def map_data(self, data: DataValue) -> tuple[list[MappedRow], RowMappingStats]:
        struct = data.field
        return map_rows(data.rows(), struct.fields, self.region_field(struct), self.country_codes)

    def build_spec(self, data: DataValue) -> dict[str, Any]:
        if data.is_null():
            raise InvalidInputShapeError("Expected struct value not to be null.")
        if not data.is_array():
            raise InvalidInputShapeError("Invalid data for shape map")

        struct = data.field
        if not has_required_fields(struct.fields):
            raise InvalidInputShapeError(
                "Shape map needs a region field and a color field; "
                f"'{struct.name}' declares {len(struct.fields)}"
            )
        region, color = resolve_roles(struct.fields)
        color_type = classify_field(color, region)

        mapped, stats = self.map_data(data)
        self.last_stats = stats
        _LOGGER.debug(
            "Shape map '%s': region=%s color=%s (%s), rows %d -> %d",
            struct.name,
            region.name,
            color.name,
            color_type.value,
            stats.rows_in,
            stats.rows_out,
        )
        return build_shape_map_spec(
            mapped,
            region,
            color,
            color_type,
            chart_size(self.cfg.chart),
            atlas=self.atlas,
            colors=self.cfg.colors,
            title=format_title(self.cfg.chart, color.name),
            scale=color_scale(color_type, self.cfg.colors),
        )


def build_world_atlas(cfg: WorldAtlasConfig) -> WorldAtlas:
    if cfg.path is not None:
        return load_world_atlas(cfg.path, cfg.feature)
    return WorldAtlas(url=cfg.url, feature=cfg.feature)


def build_renderer(cfg: AppConfig) -> CountryShapeMapRenderer:
    """Renderer wired from config: atlas source and country code table."""
    if cfg.paths.country_codes == DEFAULT_COUNTRY_CODES_PATH:
        table = COUNTRY_CODES
    else:
        table = load_country_codes(cfg.paths.country_codes)
    return CountryShapeMapRenderer(cfg, atlas=build_world_atlas(cfg.world_atlas), country_codes=table)


@dataclass(slots=True)
class SpecBuildReport(Report):
    spec: dict[str, Any] | None = None
    summary: dict[str, int] = field(default_factory=dict)


def run_build_spec(cfg: AppConfig, *, result_path: Path) -> SpecBuildReport:
    """Load a result file and build its shape map spec, collecting diagnostics."""
    report = SpecBuildReport()
    t0 = time.perf_counter()
    try:
        data = load_result(result_path)
    except (OSError, ValueError) as exc:
        report.add_error(f"Failed loading result '{result_path}': {exc}")
        return report
    report.add_info(f"Loaded result '{data.field.name}' from {result_path}")

    try:
        renderer = build_renderer(cfg)
    except (OSError, ValueError) as exc:
        report.add_error(f"Failed initializing shape map renderer: {exc}")
        return report

    try:
        spec = renderer.build_spec(data)
    except ShapeMapError as exc:
        report.add_error(f"Shape map rendering failed: {exc}")
        return report

    stats = renderer.last_stats or RowMappingStats()
    report.spec = spec
    report.summary = {
        "rows_in": stats.rows_in,
        "rows_out": stats.rows_out,
        "rows_dropped": stats.rows_dropped,
    }
    if stats.unresolved_regions:
        report.add_warning(
            "Rows dropped with unresolved regions: "
            + format_limited_list(sorted(set(stats.unresolved_regions)))
        )
    report.add_info(
        "Spec summary: "
        f"rows_in={stats.rows_in}, rows_out={stats.rows_out}, "
        f"rows_dropped={stats.rows_dropped}, elapsed={time.perf_counter() - t0:.2f}s"
    )
    return report


def format_spec_lines(report: SpecBuildReport) -> Sequence[str]:
    return report.lines("Shape map spec built with no errors.")
