"""World geometry (TopoJSON) references for the base and lookup layers."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

DEFAULT_WORLD_ATLAS_URL = "https://cdn.jsdelivr.net/npm/vega-datasets@2/data/world-110m.json"
DEFAULT_FEATURE = "countries"


@dataclass(frozen=True, slots=True)
class WorldAtlas:
    """Either an embedded topology or a URL the renderer resolves itself."""

    url: str | None = DEFAULT_WORLD_ATLAS_URL
    topology: Mapping[str, Any] | None = None
    feature: str = DEFAULT_FEATURE

    def __post_init__(self) -> None:
        if (self.url is None) == (self.topology is None):
            raise ValueError("WorldAtlas needs exactly one of 'url' or 'topology'")
        if self.topology is not None:
            objects = self.topology.get("objects")
            if not isinstance(objects, Mapping) or self.feature not in objects:
                raise ValueError(f"World atlas topology has no '{self.feature}' object")

    def data_block(self) -> dict[str, Any]:
        """Vega-Lite data definition for the atlas feature collection."""
        fmt = {"type": "topojson", "feature": self.feature}
        if self.topology is not None:
            return {"values": self.topology, "format": fmt}
        return {"url": self.url, "format": fmt}

    def feature_ids(self) -> set[int]:
        """Numeric ids of the embedded feature collection (empty for URL atlases)."""
        if self.topology is None:
            return set()
        geometries = self.topology["objects"][self.feature].get("geometries", [])
        ids: set[int] = set()
        for geometry in geometries:
            raw = geometry.get("id")
            try:
                ids.add(int(raw))
            except (TypeError, ValueError):
                continue
        return ids


def load_world_atlas(path: Path, feature: str = DEFAULT_FEATURE) -> WorldAtlas:
    """Load a local TopoJSON file to embed in generated map specs."""
    if not path.exists():
        raise FileNotFoundError(f"World atlas file not found: {path}")
    with path.open("r", encoding="utf-8") as fh:
        raw = json.load(fh)
    if not isinstance(raw, dict) or raw.get("type") != "Topology":
        raise ValueError(f"Expected a TopoJSON Topology in {path}")
    return WorldAtlas(url=None, topology=raw, feature=feature)
