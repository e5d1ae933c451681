"""Tests for layered spec assembly and styling helpers."""

from __future__ import annotations

import pytest

from shapemap.atlas import DEFAULT_WORLD_ATLAS_URL, WorldAtlas
from shapemap.config import ChartConfig, ColorsConfig
from shapemap.models import EncodingType
from shapemap.spec import build_shape_map_spec
from shapemap.styling import chart_size, color_scale, format_title


def test_three_layers_in_fixed_order_for_empty_rows(country_field, value_field):
    spec = build_shape_map_spec(
        [], country_field, value_field, EncodingType.QUANTITATIVE, {"width": 250, "height": 175}
    )
    assert spec["data"] == {"values": []}
    sphere, base, overlay = spec["layer"]
    assert sphere == {"data": {"sphere": True}, "mark": {"type": "geoshape", "fill": "aliceblue"}}
    assert base["mark"] == {"type": "geoshape", "fill": "mintcream", "stroke": "black"}
    assert overlay["mark"] == "geoshape"


def test_spec_top_level_shape(country_field, value_field):
    rows = [{"country": 250, "value": 10}]
    spec = build_shape_map_spec(
        rows, country_field, value_field, EncodingType.QUANTITATIVE, {"width": 500, "height": 350}
    )
    assert list(spec) == ["width", "height", "data", "projection", "layer"]
    assert spec["projection"] == {"type": "mercator"}
    assert spec["data"]["values"] == rows
    assert spec["data"]["values"][0] is not rows[0]


def test_overlay_joins_region_to_atlas_id(country_field, value_field):
    spec = build_shape_map_spec(
        [], country_field, value_field, EncodingType.QUANTITATIVE, {"width": 1, "height": 1}
    )
    overlay = spec["layer"][2]
    assert overlay["transform"] == [
        {
            "lookup": "country",
            "from": {
                "data": {
                    "url": DEFAULT_WORLD_ATLAS_URL,
                    "format": {"type": "topojson", "feature": "countries"},
                },
                "key": "id",
            },
            "as": "geo",
        }
    ]
    assert overlay["encoding"]["shape"] == {"field": "geo", "type": "geojson"}
    assert overlay["encoding"]["color"] == {
        "field": "value",
        "type": "quantitative",
        "axis": {"title": "value"},
        "scale": {"range": ["#C2D5EE", "#1A73E8"]},
    }


def test_embedded_topology_used_for_base_and_lookup(country_field, value_field, topology):
    atlas = WorldAtlas(url=None, topology=topology)
    spec = build_shape_map_spec(
        [],
        country_field,
        value_field,
        EncodingType.NOMINAL,
        {"width": 1, "height": 1},
        atlas=atlas,
        title="Value",
    )
    base, overlay = spec["layer"][1], spec["layer"][2]
    assert base["data"]["values"] is topology
    assert overlay["transform"][0]["from"]["data"]["values"] is topology
    assert overlay["encoding"]["color"]["axis"] == {"title": "Value"}


def test_custom_colors_flow_into_layers(country_field, value_field):
    colors = ColorsConfig(ocean="#001", land="#002", border="#003")
    spec = build_shape_map_spec(
        [], country_field, value_field, EncodingType.QUANTITATIVE, {"width": 1, "height": 1}, colors=colors
    )
    assert spec["layer"][0]["mark"]["fill"] == "#001"
    assert spec["layer"][1]["mark"] == {"type": "geoshape", "fill": "#002", "stroke": "#003"}


def test_world_atlas_requires_one_source(topology):
    with pytest.raises(ValueError):
        WorldAtlas(url=None)
    with pytest.raises(ValueError):
        WorldAtlas(url="https://example.invalid/world.json", topology=topology)


def test_world_atlas_requires_feature_object(topology):
    with pytest.raises(ValueError, match="no 'land' object"):
        WorldAtlas(url=None, topology=topology, feature="land")
    with pytest.raises(ValueError, match="no 'countries' object"):
        WorldAtlas(url=None, topology={"type": "Topology"})


def test_feature_ids_skip_missing_ids(topology):
    assert WorldAtlas(url=None, topology=topology).feature_ids() == {250, 392}
    assert WorldAtlas().feature_ids() == set()


def test_chart_size_presets_and_overrides():
    assert chart_size(ChartConfig()) == {"width": 250, "height": 175}
    assert chart_size(ChartConfig(size="large")) == {"width": 500, "height": 350}
    assert chart_size(ChartConfig(size="large", width=640)) == {"width": 640, "height": 350}


def test_format_title():
    assert format_title(ChartConfig(), "gdp_per_capita") == "gdp_per_capita"
    assert format_title(ChartConfig(title_case=True), "gdp_per_capita") == "Gdp Per Capita"
    assert format_title(ChartConfig(labels={"gdp_per_capita": "GDP"}), "gdp_per_capita") == "GDP"


def test_color_scale_by_encoding_type():
    colors = ColorsConfig()
    assert color_scale(EncodingType.QUANTITATIVE, colors) == {"range": ["#C2D5EE", "#1A73E8"]}
    assert color_scale(EncodingType.NOMINAL, colors) == {"range": list(colors.nominal_range)}
    assert color_scale(EncodingType.ORDINAL, colors) == {"scheme": "blues"}
    assert color_scale(None, colors) is None
