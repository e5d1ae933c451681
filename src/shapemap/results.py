"""Building and loading tabular results from plain records or files."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Any, Mapping, Sequence

import yaml

from .models import CellKind, DataValue, Field, FieldKind, Row

RESULT_FIELD_NAME = "result"


def cell_kind_for(field: Field, value: Any) -> CellKind:
    """Tag a raw Python value for the given field."""
    if value is None:
        return CellKind.NULL
    if isinstance(value, bool):
        return CellKind.BOOLEAN
    if isinstance(value, (int, float)):
        return CellKind.NUMBER
    if isinstance(value, str):
        if field.kind is FieldKind.DATE:
            return CellKind.DATE
        if field.kind is FieldKind.TIMESTAMP:
            return CellKind.TIMESTAMP
        return CellKind.STRING
    if isinstance(value, (list, tuple)):
        return CellKind.ARRAY
    if isinstance(value, Mapping):
        return CellKind.RECORD
    if isinstance(value, datetime):
        return CellKind.TIMESTAMP
    if isinstance(value, date):
        return CellKind.DATE
    raise ValueError(f"Unsupported value of type {type(value).__name__} for '{field.name}'")


def _to_data_value(field: Field, value: Any) -> DataValue:
    kind = cell_kind_for(field, value)
    if kind is CellKind.ARRAY:
        if field.kind is FieldKind.STRUCT:
            rows = tuple(_to_row(field, item) for item in value)
        else:
            rows = tuple(value)
        return DataValue(kind=kind, value=rows, field=field)
    if kind is CellKind.RECORD:
        return DataValue(kind=kind, value=_to_row(field, value), field=field)
    return DataValue(kind=kind, value=value, field=field)


def _to_row(struct: Field, record: Any) -> Row:
    if not isinstance(record, Mapping):
        raise ValueError(f"Expected mapping row for '{struct.name}', got {type(record).__name__}")
    cells = {child.name: _to_data_value(child, record.get(child.name)) for child in struct.fields}
    return Row(field=struct, cells=cells)


def result_from_records(
    fields: Sequence[Field],
    records: Sequence[Mapping[str, Any]] | Mapping[str, Any] | None,
    *,
    name: str = RESULT_FIELD_NAME,
) -> DataValue:
    """Wrap plain records as a top-level result value.

    A list of mappings becomes an array of rows; `None` becomes a null value
    and a single mapping becomes a record, so callers can reproduce the
    shapes the renderer rejects.
    """
    struct = Field(name=name, kind=FieldKind.STRUCT, fields=tuple(fields))
    if records is None:
        return DataValue(kind=CellKind.NULL, value=None, field=struct)
    if isinstance(records, Mapping):
        return DataValue(kind=CellKind.RECORD, value=_to_row(struct, records), field=struct)
    rows = tuple(_to_row(struct, record) for record in records)
    return DataValue(kind=CellKind.ARRAY, value=rows, field=struct)


def load_result(path: Path) -> DataValue:
    """Load a `{fields: [...], rows: [...]}` YAML or JSON result document."""
    if not path.exists():
        raise FileNotFoundError(f"Result file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        raw = yaml.safe_load(fh)
    if not isinstance(raw, Mapping):
        raise ValueError(f"Expected mapping in {path}")

    fields_raw = raw.get("fields")
    if not isinstance(fields_raw, list):
        raise ValueError(f"Expected list for 'fields' in {path}")
    fields: list[Field] = []
    for idx, item in enumerate(fields_raw):
        if not isinstance(item, Mapping):
            raise ValueError(f"Expected mapping at fields[{idx}] in {path}")
        fields.append(Field.from_mapping(item))

    rows_raw = raw.get("rows")
    if rows_raw is not None and not isinstance(rows_raw, (list, Mapping)):
        raise ValueError(f"Expected list, mapping or null for 'rows' in {path}")
    name = raw.get("name", RESULT_FIELD_NAME)
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"Expected non-empty string for 'name' in {path}")
    return result_from_records(fields, rows_raw, name=name.strip())
