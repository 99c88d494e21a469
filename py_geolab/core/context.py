"""
Per-run analysis context.

Bundles the three base collections with the resolved parameters and
offers the demo-feature lookups the handlers rely on. Lookups never
raise: a missing id yields None, or the first feature of the collection
when the caller asks for the fallback.
"""

from dataclasses import dataclass
from typing import Any, Callable, Optional

import structlog

from .features import Feature, FeatureCollection
from .params import ToolParams
from .results import AnalysisResult
from .tools import ToolType

logger = structlog.get_logger()


@dataclass(frozen=True)
class AnalysisContext:
    """Inputs of a single analysis run."""

    tool: ToolType
    points: FeatureCollection
    polygons: FeatureCollection
    lines: FeatureCollection
    params: ToolParams

    def point(self, feature_id: Any) -> Optional[Feature]:
        return self.points.find(feature_id)

    def polygon(self, feature_id: Any) -> Optional[Feature]:
        return self.polygons.find(feature_id)

    def line(self, feature_id: Any) -> Optional[Feature]:
        return self.lines.find(feature_id)

    def point_or_first(self, feature_id: Any) -> Optional[Feature]:
        return self._or_first(self.points, feature_id, "point")

    def polygon_or_first(self, feature_id: Any) -> Optional[Feature]:
        return self._or_first(self.polygons, feature_id, "polygon")

    def line_or_first(self, feature_id: Any) -> Optional[Feature]:
        return self._or_first(self.lines, feature_id, "line")

    def _or_first(self, collection: FeatureCollection, feature_id: Any, kind: str) -> Optional[Feature]:
        feature = collection.find(feature_id)
        if feature is None:
            feature = collection.first()
            if feature is not None:
                logger.debug(
                    "Demo feature missing, using first feature",
                    tool=self.tool.value,
                    kind=kind,
                    requested=feature_id,
                    used=feature.id,
                )
        return feature


Handler = Callable[[AnalysisContext], AnalysisResult]
