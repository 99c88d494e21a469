"""
Boolean topology checks between fixed demo pairs.

Each check names two demo features and a predicate; the result shows both
features and reports the predicate's answer.
"""

from typing import Any, Callable, Dict, NamedTuple, Optional

import structlog

from ...config import messages
from .. import geometry
from ..context import AnalysisContext, Handler
from ..features import Feature
from ..results import AnalysisResult
from ..tools import ToolType

logger = structlog.get_logger()


class FeatureRef(NamedTuple):
    kind: str  # "point", "polygon" or "line"
    id: Any


class TopologyCheck(NamedTuple):
    title: str
    first: FeatureRef
    second: FeatureRef
    predicate: Callable[[Any, Any], bool]


CITY = FeatureRef("polygon", 1)

CHECKS: Dict[ToolType, TopologyCheck] = {
    ToolType.BOOL_POINT_IN_POLY: TopologyCheck(
        "Nokta Poligon İçinde mi?", FeatureRef("point", 900), CITY, geometry.point_in_polygon
    ),
    ToolType.BOOL_CONTAINS: TopologyCheck(
        "Kapsıyor mu? (Contains)", CITY, FeatureRef("polygon", 2), geometry.contains
    ),
    ToolType.BOOL_CROSSES: TopologyCheck(
        "Kesiyor mu? (Crosses)", FeatureRef("line", "River1"), CITY, geometry.crosses
    ),
    ToolType.BOOL_DISJOINT: TopologyCheck(
        "Ayrık mı? (Disjoint)", CITY, FeatureRef("polygon", 4), geometry.disjoint
    ),
    ToolType.BOOL_OVERLAP: TopologyCheck(
        "Örtüşüyor mu? (Overlap)", CITY, FeatureRef("polygon", 2), geometry.overlaps
    ),
    ToolType.BOOL_EQUAL: TopologyCheck(
        "Eşit mi? (Equal)", CITY, FeatureRef("polygon", 99), geometry.equals
    ),
    ToolType.BOOL_TOUCH: TopologyCheck(
        "Temas Ediyor mu? (Touch)", CITY, FeatureRef("polygon", 3), geometry.touches
    ),
    ToolType.BOOL_INTERSECTS: TopologyCheck(
        "Kesişiyor mu? (Intersects)", FeatureRef("line", "Hwy1"), CITY, geometry.intersects
    ),
}


def _resolve(ctx: AnalysisContext, ref: FeatureRef) -> Optional[Feature]:
    lookup = {"point": ctx.point, "polygon": ctx.polygon, "line": ctx.line}[ref.kind]
    return lookup(ref.id)


def check_topology(ctx: AnalysisContext) -> AnalysisResult:
    check = CHECKS[ctx.tool]
    first = _resolve(ctx, check.first)
    second = _resolve(ctx, check.second)
    if first is None or second is None:
        logger.warning("Topology pair incomplete", tool=ctx.tool.value, first=check.first.id, second=check.second.id)
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    result = bool(check.predicate(first.geometry, second.geometry))
    features = [
        first.clone(label=first.name or str(first.id)),
        second.clone(label=second.name or str(second.id)),
    ]
    message = messages.explain(ctx.tool, f"{check.title} -> {messages.boolean_sentence(result)}.")
    return AnalysisResult.of(features, message, {"Sonuç (Result)": messages.boolean_text(result)})


HANDLERS: Dict[ToolType, Handler] = {tool: check_topology for tool in CHECKS}
