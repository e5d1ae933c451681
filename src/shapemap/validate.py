"""Validation layer for config and static lookup assets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Mapping

from .atlas import WorldAtlas, load_world_atlas
from .config import AppConfig
from .country_codes import duplicate_codes, load_country_codes
from .reports import Report, format_limited_list


@dataclass(slots=True)
class ValidationReport(Report):
    pass


class Validator:
    """Checks the country code table and, when local, the world atlas."""

    def __init__(self, cfg: AppConfig) -> None:
        self.cfg = cfg

    def run(self, *, strict: bool) -> ValidationReport:
        report = ValidationReport()
        table = self._validate_country_codes(report)
        atlas = self._validate_world_atlas(report)
        if table and atlas is not None:
            self._validate_coverage(report, table=table, atlas=atlas, strict=strict)
        return report

    def _validate_country_codes(self, report: ValidationReport) -> Mapping[str, int]:
        path = self.cfg.paths.country_codes
        try:
            table = load_country_codes(path)
        except Exception as exc:
            report.add_error(f"Failed parsing country code table '{path}': {exc}")
            return {}
        if not table:
            report.add_error(f"Country code table is empty: {path}")
            return {}
        report.add_info(f"Loaded {len(table)} country names from {path}")

        shared = duplicate_codes(table)
        if shared:
            report.add_warning(
                "Country codes shared by several names (aliases): "
                + format_limited_list(
                    sorted(f"{code}({'/'.join(names)})" for code, names in shared.items())
                )
            )
        return table

    def _validate_world_atlas(self, report: ValidationReport) -> WorldAtlas | None:
        atlas_cfg = self.cfg.world_atlas
        if atlas_cfg.path is None:
            report.add_info(
                f"World atlas referenced by URL ({atlas_cfg.url}); skipping id coverage checks."
            )
            return None
        try:
            atlas = load_world_atlas(atlas_cfg.path, atlas_cfg.feature)
        except Exception as exc:
            report.add_error(f"Failed loading world atlas '{atlas_cfg.path}': {exc}")
            return None
        report.add_info(
            f"Loaded world atlas {atlas_cfg.path} with {len(atlas.feature_ids())} "
            f"'{atlas_cfg.feature}' ids"
        )
        return atlas

    def _validate_coverage(
        self,
        report: ValidationReport,
        *,
        table: Mapping[str, int],
        atlas: WorldAtlas,
        strict: bool,
    ) -> None:
        atlas_ids = atlas.feature_ids()
        missing = sorted(f"{name}({code})" for name, code in table.items() if code not in atlas_ids)
        if not missing:
            report.add_info("Every country code has a matching world atlas feature.")
            return
        msg = "Country codes without a world atlas feature (rows will not be drawn): "
        msg += format_limited_list(missing)
        if strict:
            report.add_error(msg)
        else:
            report.add_warning(msg)


def format_report_lines(report: ValidationReport) -> Iterable[str]:
    yield from report.lines("Validation completed with no errors.")
