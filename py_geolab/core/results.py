"""Analysis result containers."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Union

from .features import Feature, FeatureCollection

StatValue = Union[str, int, float]


@dataclass
class AnalysisMetadata:
    """Explanation text and key/value statistics for the result panel."""

    message: str
    stats: Dict[str, StatValue] = field(default_factory=dict)


@dataclass
class AnalysisResult:
    """Display layer plus metadata produced by one analysis run."""

    geojson: Optional[FeatureCollection]
    metadata: AnalysisMetadata

    @classmethod
    def of(
        cls,
        features: Iterable[Feature],
        message: str,
        stats: Optional[Dict[str, StatValue]] = None,
    ) -> "AnalysisResult":
        return cls(
            geojson=FeatureCollection.of(features),
            metadata=AnalysisMetadata(message=message, stats=dict(stats or {})),
        )

    @classmethod
    def failure(cls, message: str, stats: Optional[Dict[str, StatValue]] = None) -> "AnalysisResult":
        """A result without geometry, used when preconditions are not met."""
        return cls(geojson=None, metadata=AnalysisMetadata(message=message, stats=dict(stats or {})))

    @property
    def message(self) -> str:
        return self.metadata.message

    @property
    def stats(self) -> Dict[str, StatValue]:
        return self.metadata.stats

    @property
    def features(self):
        return self.geojson.features if self.geojson is not None else []

    def to_geojson(self) -> Optional[Dict[str, Any]]:
        return self.geojson.to_geojson() if self.geojson is not None else None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "geoJSON": self.to_geojson(),
            "metadata": {"message": self.metadata.message, "stats": dict(self.metadata.stats)},
        }
