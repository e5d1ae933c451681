"""Sizing, titles and color scales for map specs."""

from __future__ import annotations

from typing import Any

from .config import SIZE_PRESETS, ChartConfig, ColorsConfig
from .models import EncodingType


def chart_size(chart: ChartConfig) -> dict[str, int]:
    """Width/height block; explicit dimensions override the size preset."""
    preset_width, preset_height = SIZE_PRESETS[chart.size]
    return {
        "width": chart.width or preset_width,
        "height": chart.height or preset_height,
    }


def format_title(chart: ChartConfig, name: str) -> str:
    label = chart.labels.get(name)
    if label is not None:
        return label
    if chart.title_case:
        return " ".join(word.capitalize() for word in name.replace("_", " ").split())
    return name


def color_scale(encoding_type: EncodingType | None, colors: ColorsConfig) -> dict[str, Any] | None:
    """Color scale for the overlay's color channel."""
    if encoding_type is None:
        return None
    if encoding_type is EncodingType.QUANTITATIVE:
        return {"range": list(colors.quantitative_range)}
    if encoding_type is EncodingType.NOMINAL:
        return {"range": list(colors.nominal_range)}
    return {"scheme": colors.ordinal_scheme}
