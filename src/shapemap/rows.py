"""Row mapping and unmappable-region filtering."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from .country_codes import COUNTRY_CODES, resolve_country_code
from .errors import InvalidFieldTypeError
from .models import CellKind, DataValue, Field, Row

_LOGGER = logging.getLogger("shapemap.rows")

MappedRow = dict[str, Any]


@dataclass(slots=True)
class RowMappingStats:
    rows_in: int = 0
    rows_out: int = 0
    unresolved_regions: list[str] = field(default_factory=list)

    @property
    def rows_dropped(self) -> int:
        return self.rows_in - self.rows_out


def map_value(
    cell: DataValue,
    region_field: Field,
    table: Mapping[str, int] = COUNTRY_CODES,
) -> int | float | str | None:
    """Convert one cell to its rendered value; `None` means absent."""
    if cell.kind is CellKind.NUMBER:
        return cell.value
    if cell.kind is CellKind.STRING:
        if cell.field is region_field:
            return resolve_country_code(cell.value, table)
        return cell.value
    if cell.kind is CellKind.NULL:
        return None
    raise InvalidFieldTypeError(
        f"Invalid field type for shape map: '{cell.field.name}' holds a {cell.kind.value} value"
    )


def map_row(
    row: Row,
    fields: Sequence[Field],
    region_field: Field,
    table: Mapping[str, int] = COUNTRY_CODES,
) -> MappedRow:
    mapped: MappedRow = {}
    for item in fields:
        value = map_value(row.cell(item), region_field, table)
        if value is not None:
            mapped[item.name] = value
    return mapped


def filter_unmapped(rows: Sequence[MappedRow], region_field: Field) -> list[MappedRow]:
    """Drop rows whose region value is absent, keeping order."""
    return [row for row in rows if row.get(region_field.name) is not None]


def map_rows(
    rows: Sequence[Row],
    fields: Sequence[Field],
    region_field: Field,
    table: Mapping[str, int] = COUNTRY_CODES,
) -> tuple[list[MappedRow], RowMappingStats]:
    """Map every row, then drop rows whose region could not be resolved."""
    stats = RowMappingStats(rows_in=len(rows))
    mapped = [map_row(row, fields, region_field, table) for row in rows]
    kept = filter_unmapped(mapped, region_field)
    stats.rows_out = len(kept)

    if stats.rows_dropped:
        for row, mapped_row in zip(rows, mapped):
            if region_field.name in mapped_row:
                continue
            cell = row.cell(region_field)
            label = "<null>" if cell.is_null() else str(cell.value)
            stats.unresolved_regions.append(label)
            _LOGGER.debug("Dropping row with unresolved region %r", label)
        _LOGGER.info(
            "Dropped %d of %d rows with unresolved '%s' values",
            stats.rows_dropped,
            stats.rows_in,
            region_field.name,
        )
    return kept, stats
