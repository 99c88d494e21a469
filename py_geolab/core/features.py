"""
Feature model shared by the sample data, the primitives and the handlers.

Base features carry geometry and domain properties only. Result features
may additionally carry a DisplayHints value describing how the renderer
should draw them; hints are merged into the GeoJSON properties on export.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from shapely.geometry import mapping, shape
from shapely.geometry.base import BaseGeometry


class DisplayHints(BaseModel):
    """Presentation metadata attached to result features only."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: Optional[str] = Field(default=None, description="Text drawn on the map")
    fill: Optional[str] = Field(default=None, description="Fill color override")
    stroke: Optional[str] = Field(default=None, description="Stroke color override")
    width: Optional[float] = Field(default=None, description="Stroke width override")
    cluster: Optional[int] = Field(default=None, description="Cluster group index")
    count: Optional[int] = Field(default=None, description="Density or size value")
    type: Optional[str] = Field(default=None, description="Styling class")

    def as_properties(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


@dataclass
class Feature:
    """A geometry with its properties and optional display hints."""

    geometry: BaseGeometry
    properties: Dict[str, Any] = field(default_factory=dict)
    hints: Optional[DisplayHints] = None

    @classmethod
    def create(
        cls,
        geometry: BaseGeometry,
        properties: Optional[Dict[str, Any]] = None,
        **hints: Any,
    ) -> "Feature":
        """Build a result feature with fresh properties and the given hints."""
        return cls(
            geometry=geometry,
            properties=dict(properties or {}),
            hints=DisplayHints(**hints) if hints else None,
        )

    @property
    def id(self) -> Any:
        return self.properties.get("id")

    @property
    def name(self) -> Optional[str]:
        return self.properties.get("name")

    @property
    def geom_type(self) -> str:
        return self.geometry.geom_type

    def clone(self, **hints: Any) -> "Feature":
        """Copy the feature, merging ``hints`` over any existing ones."""
        if self.hints is not None:
            new_hints = self.hints.model_copy(update=hints) if hints else self.hints
        else:
            new_hints = DisplayHints(**hints) if hints else None
        return Feature(geometry=self.geometry, properties=dict(self.properties), hints=new_hints)

    def display_properties(self) -> Dict[str, Any]:
        props = dict(self.properties)
        if self.hints is not None:
            props.update(self.hints.as_properties())
        return props

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "Feature",
            "properties": self.display_properties(),
            "geometry": mapping(self.geometry),
        }

    @classmethod
    def from_geojson(cls, data: Dict[str, Any]) -> "Feature":
        return cls(geometry=shape(data["geometry"]), properties=dict(data.get("properties") or {}))


@dataclass
class FeatureCollection:
    """Ordered list of features."""

    features: List[Feature] = field(default_factory=list)

    @classmethod
    def of(cls, features: Iterable[Feature]) -> "FeatureCollection":
        return cls(features=list(features))

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)

    def __len__(self) -> int:
        return len(self.features)

    def __getitem__(self, index: int) -> Feature:
        return self.features[index]

    def find(self, feature_id: Any) -> Optional[Feature]:
        """First feature whose ``id`` property equals ``feature_id``."""
        for feature in self.features:
            if feature.properties.get("id") == feature_id:
                return feature
        return None

    def first(self) -> Optional[Feature]:
        return self.features[0] if self.features else None

    def geometries(self) -> List[BaseGeometry]:
        return [f.geometry for f in self.features]

    @property
    def bounds(self) -> Optional[Tuple[float, float, float, float]]:
        """(minx, miny, maxx, maxy) over every feature, None when empty."""
        geoms = [g for g in self.geometries() if not g.is_empty]
        if not geoms:
            return None
        all_bounds = [g.bounds for g in geoms]
        return (
            min(b[0] for b in all_bounds),
            min(b[1] for b in all_bounds),
            max(b[2] for b in all_bounds),
            max(b[3] for b in all_bounds),
        )

    def to_geojson(self) -> Dict[str, Any]:
        return {
            "type": "FeatureCollection",
            "features": [f.to_geojson() for f in self.features],
        }

    @classmethod
    def from_geojson(cls, data: Dict[str, Any]) -> "FeatureCollection":
        return cls(features=[Feature.from_geojson(f) for f in data.get("features", [])])
