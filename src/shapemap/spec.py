"""Layered Vega-Lite choropleth spec assembly."""

from __future__ import annotations

from typing import Any, Mapping, Sequence

from .atlas import WorldAtlas
from .config import ColorsConfig
from .models import EncodingType, Field
from .styling import color_scale

PROJECTION = "mercator"
LOOKUP_KEY = "id"
GEO_FIELD = "geo"


def color_definition(
    color_field: Field,
    color_type: EncodingType,
    *,
    title: str,
    scale: Mapping[str, Any] | None,
) -> dict[str, Any]:
    return {
        "field": color_field.name,
        "type": color_type.value,
        "axis": {"title": title},
        "scale": dict(scale) if scale is not None else None,
    }


def sphere_layer(colors: ColorsConfig) -> dict[str, Any]:
    return {
        "data": {"sphere": True},
        "mark": {"type": "geoshape", "fill": colors.ocean},
    }


def base_map_layer(atlas: WorldAtlas, colors: ColorsConfig) -> dict[str, Any]:
    return {
        "data": atlas.data_block(),
        "mark": {"type": "geoshape", "fill": colors.land, "stroke": colors.border},
    }


def data_layer(
    atlas: WorldAtlas,
    region_field: Field,
    color_def: Mapping[str, Any],
) -> dict[str, Any]:
    """Overlay joining each row's region id to the atlas feature `id`."""
    return {
        "transform": [
            {
                "lookup": region_field.name,
                "from": {"data": atlas.data_block(), "key": LOOKUP_KEY},
                "as": GEO_FIELD,
            }
        ],
        "mark": "geoshape",
        "encoding": {
            "shape": {"field": GEO_FIELD, "type": "geojson"},
            "color": dict(color_def),
        },
    }


def build_shape_map_spec(
    rows: Sequence[Mapping[str, Any]],
    region_field: Field,
    color_field: Field,
    color_type: EncodingType,
    size: Mapping[str, int],
    *,
    atlas: WorldAtlas | None = None,
    colors: ColorsConfig | None = None,
    title: str | None = None,
    scale: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Assemble the full spec: sphere, base countries, data overlay.

    The three layers are always present, in that order, even when `rows` is
    empty. `title` defaults to the color field name and `scale` to the
    palette for `color_type`.
    """
    atlas = atlas or WorldAtlas()
    colors = colors or ColorsConfig()
    color_def = color_definition(
        color_field,
        color_type,
        title=title if title is not None else color_field.name,
        scale=scale if scale is not None else color_scale(color_type, colors),
    )
    return {
        **size,
        "data": {"values": [dict(row) for row in rows]},
        "projection": {"type": PROJECTION},
        "layer": [
            sphere_layer(colors),
            base_map_layer(atlas, colors),
            data_layer(atlas, region_field, color_def),
        ],
    }
