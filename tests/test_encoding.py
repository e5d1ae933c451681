"""Tests for field roles and color encoding classification."""

from __future__ import annotations

import pytest

from shapemap.encoding import classify_field
from shapemap.errors import InvalidFieldTypeError
from shapemap.models import EncodingType, Field, FieldKind
from shapemap.roles import has_required_fields, resolve_roles


def test_resolve_roles_is_positional(country_field, value_field):
    extra = Field("label", FieldKind.STRING)
    region, color = resolve_roles([country_field, value_field, extra])
    assert region is country_field
    assert color is value_field


def test_has_required_fields(country_field, value_field):
    assert has_required_fields([country_field, value_field])
    assert not has_required_fields([country_field])
    assert not has_required_fields([])


@pytest.mark.parametrize("kind", [FieldKind.DATE, FieldKind.TIMESTAMP])
def test_temporal_fields_are_nominal(kind, country_field):
    assert classify_field(Field("when", kind), country_field) is EncodingType.NOMINAL


def test_number_field_is_quantitative(country_field, value_field):
    assert classify_field(value_field, country_field) is EncodingType.QUANTITATIVE


def test_region_string_field_is_quantitative(country_field):
    assert classify_field(country_field, country_field) is EncodingType.QUANTITATIVE


def test_other_string_field_is_nominal(country_field):
    assert classify_field(Field("segment", FieldKind.STRING), country_field) is EncodingType.NOMINAL


def test_same_name_different_object_is_not_region(country_field):
    twin = Field("country", FieldKind.STRING)
    assert classify_field(twin, country_field) is EncodingType.NOMINAL


@pytest.mark.parametrize("kind", [FieldKind.STRUCT, FieldKind.BOOLEAN, FieldKind.JSON])
def test_unsupported_kinds_fail(kind, country_field):
    with pytest.raises(InvalidFieldTypeError):
        classify_field(Field("x", kind), country_field)
