"""Result-set domain models consumed by the shape map transform."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping


def _require_str(value: Any, field_name: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"Expected non-empty string for '{field_name}'")
    return value.strip()


class FieldKind(str, Enum):
    STRING = "string"
    NUMBER = "number"
    DATE = "date"
    TIMESTAMP = "timestamp"
    BOOLEAN = "boolean"
    JSON = "json"
    STRUCT = "struct"


class CellKind(str, Enum):
    NUMBER = "number"
    STRING = "string"
    NULL = "null"
    BOOLEAN = "boolean"
    DATE = "date"
    TIMESTAMP = "timestamp"
    ARRAY = "array"
    RECORD = "record"


class EncodingType(str, Enum):
    ORDINAL = "ordinal"
    QUANTITATIVE = "quantitative"
    NOMINAL = "nominal"


@dataclass(frozen=True, eq=False)
class Field:
    """Result field metadata.

    Equality is identity: a field *is* the region field only when it is the
    same object the struct declares at index 0.
    """

    name: str
    kind: FieldKind
    fields: tuple[Field, ...] = ()

    @property
    def is_atomic(self) -> bool:
        return self.kind is not FieldKind.STRUCT

    @property
    def is_string(self) -> bool:
        return self.kind is FieldKind.STRING

    @property
    def is_number(self) -> bool:
        return self.kind is FieldKind.NUMBER

    @property
    def is_date(self) -> bool:
        return self.kind is FieldKind.DATE

    @property
    def is_timestamp(self) -> bool:
        return self.kind is FieldKind.TIMESTAMP

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Field:
        name = _require_str(data.get("name"), "name")
        kind_raw = _require_str(data.get("type"), f"{name}.type").casefold()
        try:
            kind = FieldKind(kind_raw)
        except ValueError:
            allowed = ", ".join(item.value for item in FieldKind)
            raise ValueError(
                f"Unknown field type '{kind_raw}' for '{name}'; expected one of: {allowed}"
            ) from None

        children_raw = data.get("fields", [])
        children: list[Field] = []
        if children_raw is not None:
            if not isinstance(children_raw, list):
                raise ValueError(f"Expected list for '{name}.fields'")
            for child in children_raw:
                if not isinstance(child, Mapping):
                    raise ValueError(f"Expected mapping in '{name}.fields'")
                children.append(cls.from_mapping(child))
        if children and kind is not FieldKind.STRUCT:
            raise ValueError(f"Only struct fields may declare nested fields ('{name}')")
        return cls(name=name, kind=kind, fields=tuple(children))


@dataclass(frozen=True, slots=True)
class DataValue:
    """One cell of a result, tagged with its kind and originating field."""

    kind: CellKind
    value: Any
    field: Field

    def is_number(self) -> bool:
        return self.kind is CellKind.NUMBER

    def is_string(self) -> bool:
        return self.kind is CellKind.STRING

    def is_null(self) -> bool:
        return self.kind is CellKind.NULL

    def is_array(self) -> bool:
        return self.kind is CellKind.ARRAY

    def rows(self) -> tuple[Row, ...]:
        if self.kind is not CellKind.ARRAY:
            raise ValueError(f"Value of '{self.field.name}' is not an array of rows")
        return self.value


@dataclass(frozen=True, slots=True)
class Row:
    """A single result row keyed by field name, in declaration order."""

    field: Field
    cells: Mapping[str, DataValue] = field(default_factory=dict)

    def cell(self, target: Field) -> DataValue:
        try:
            return self.cells[target.name]
        except KeyError:
            raise KeyError(f"Row of '{self.field.name}' has no cell for '{target.name}'") from None
