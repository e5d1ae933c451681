"""Positional region/color field roles."""

from __future__ import annotations

from typing import Sequence

from .models import Field

REGION_FIELD_INDEX = 0
COLOR_FIELD_INDEX = 1


def resolve_roles(fields: Sequence[Field]) -> tuple[Field, Field]:
    """Return `(region, color)`: the first and second declared fields.

    Callers guarantee at least two fields; see `has_required_fields`.
    """
    return fields[REGION_FIELD_INDEX], fields[COLOR_FIELD_INDEX]


def has_required_fields(fields: Sequence[Field]) -> bool:
    return len(fields) > COLOR_FIELD_INDEX


def region_field(struct: Field) -> Field:
    return struct.fields[REGION_FIELD_INDEX]


def color_field(struct: Field) -> Field:
    return struct.fields[COLOR_FIELD_INDEX]
