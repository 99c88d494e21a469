"""Format conversions between polygons and lines."""

from typing import Dict

from ...config import messages
from .. import geometry
from ..context import AnalysisContext, Handler
from ..features import Feature
from ..results import AnalysisResult
from ..tools import ToolType


def polygon_to_line(ctx: AnalysisContext) -> AnalysisResult:
    features = [
        Feature.create(boundary, polygon.properties, label="Sınır Çizgisi")
        for polygon in ctx.polygons
        for boundary in geometry.polygon_to_lines(polygon.geometry)
    ]
    message = messages.explain(
        ctx.tool, "Poligondan Çizgiye: Kapalı alan sınırları çizgi verisine dönüştürüldü."
    )
    return AnalysisResult.of(features, message, {"Çizgi (Lines)": len(features)})


def line_to_polygon(ctx: AnalysisContext) -> AnalysisResult:
    line = ctx.line_or_first("SiteFence")
    if line is None:
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    polygon = geometry.line_to_polygon(line.geometry)
    if polygon is None:
        return AnalysisResult.failure(messages.OPERATION_FAILED.format(operation="Poligon"))

    message = messages.explain(
        ctx.tool, "Çizgiden Poligona: Uçları kapalı çizgi doldurulabilir bir alana dönüştürüldü."
    )
    return AnalysisResult.of(
        [Feature.create(polygon, label="Kapalı Alan")],
        message,
        {"Alan (Area)": f"{geometry.area(polygon):.0f} m²"},
    )


HANDLERS: Dict[ToolType, Handler] = {
    ToolType.POLYGON_TO_LINE: polygon_to_line,
    ToolType.LINE_TO_POLYGON: line_to_polygon,
}
