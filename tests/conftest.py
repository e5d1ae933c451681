"""Shared fields, results and a minimal world topology for the test suite."""

from __future__ import annotations

import pytest

from shapemap.models import Field, FieldKind
from shapemap.results import result_from_records


@pytest.fixture
def country_field() -> Field:
    return Field("country", FieldKind.STRING)


@pytest.fixture
def value_field() -> Field:
    return Field("value", FieldKind.NUMBER)


@pytest.fixture
def scenario_result(country_field, value_field):
    """France resolves, Atlantis does not, Japan has a null measure."""
    return result_from_records(
        [country_field, value_field],
        [
            {"country": "France", "value": 10},
            {"country": "Atlantis", "value": 5},
            {"country": "Japan", "value": None},
        ],
    )


@pytest.fixture
def topology() -> dict:
    return {
        "type": "Topology",
        "objects": {
            "countries": {
                "type": "GeometryCollection",
                "geometries": [
                    {"type": "Polygon", "id": 250, "arcs": [[0]]},
                    {"type": "Polygon", "id": "392", "arcs": [[1]]},
                    {"type": "Polygon", "arcs": [[2]]},
                ],
            }
        },
        "arcs": [[[0, 0], [1, 1]], [[2, 2], [3, 3]], [[4, 4], [5, 5]]],
    }
