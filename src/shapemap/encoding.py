"""Encoding type classification for shape map fields."""

from __future__ import annotations

from .errors import InvalidFieldTypeError
from .models import EncodingType, Field


def classify_field(field: Field, region_field: Field) -> EncodingType:
    """Map a field's kind and role to a Vega-Lite encoding type.

    The region field is reported as quantitative: its rendered values are the
    numeric country ids used as the lookup key, not the original labels.
    """
    if field.is_atomic:
        if field.is_date or field.is_timestamp:
            return EncodingType.NOMINAL
        if field.is_string:
            if field is region_field:
                return EncodingType.QUANTITATIVE
            return EncodingType.NOMINAL
        if field.is_number:
            return EncodingType.QUANTITATIVE
    raise InvalidFieldTypeError(
        f"Invalid field type for shape map: '{field.name}' ({field.kind.value})"
    )
