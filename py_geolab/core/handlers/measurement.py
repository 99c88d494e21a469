"""Geometric measurement: area, extent, centroids and bearing."""

import math
from typing import Dict

import structlog
from shapely.geometry import LineString

from ...config import messages
from .. import geometry
from ..context import AnalysisContext, Handler
from ..features import Feature
from ..results import AnalysisResult
from ..tools import ToolType

logger = structlog.get_logger()

BEARING_ORIGIN_ID = 900
BEARING_TARGET_ID = 4


def area_label(square_meters: float) -> str:
    """km² above one square kilometre, whole m² below."""
    if square_meters > 1_000_000:
        return f"{square_meters / 1_000_000:.2f} km²"
    return f"{int(math.floor(square_meters + 0.5))} m²"


def calculate_area(ctx: AnalysisContext) -> AnalysisResult:
    features = []
    total = 0.0
    for polygon in ctx.polygons:
        square_meters = geometry.area(polygon.geometry)
        total += square_meters
        features.append(polygon.clone(label=area_label(square_meters)))

    message = messages.explain(
        ctx.tool,
        "Alan Hesabı (Area): Poligonların yüz ölçümleri hesaplandı ve üzerlerine yazıldı.",
    )
    return AnalysisResult.of(features, message, {"Toplam Alan (Total)": f"{total / 1_000_000:.2f} km²"})


def bounding_box(ctx: AnalysisContext) -> AnalysisResult:
    bounds = geometry.bounds_of(
        ctx.points.geometries() + ctx.polygons.geometries() + ctx.lines.geometries()
    )
    if bounds is None:
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    extent = geometry.bbox_polygon(bounds)
    feature = Feature.create(extent, type="bbox", label="Çalışma Alanı (Extent)")
    message = messages.explain(
        ctx.tool,
        "Sınırlayıcı Kutu (Bounding Box): Tüm verileri içine alan en küçük dikdörtgen çerçeve bulundu.",
    )
    return AnalysisResult.of(
        [feature], message, {"Alan (Area)": f"{geometry.area(extent) / 1_000_000:.2f} km²"}
    )


def centroids(ctx: AnalysisContext) -> AnalysisResult:
    features = [
        Feature.create(
            geometry.centroid(polygon.geometry),
            polygon.properties,
            type="centroid",
            label=polygon.name or "Merkez",
        )
        for polygon in ctx.polygons
    ]
    message = messages.explain(
        ctx.tool, "Merkez Noktalar (Centroids): Şekillerin ağırlık merkezleri hesaplandı."
    )
    return AnalysisResult.of(features, message, {"Nokta (Count)": len(features)})


def bearing(ctx: AnalysisContext) -> AnalysisResult:
    start = ctx.point(BEARING_ORIGIN_ID)
    end = ctx.point(BEARING_TARGET_ID)
    if start is None or end is None:
        logger.warning("Bearing endpoints missing", origin=start is not None, target=end is not None)
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    angle = geometry.bearing(start.geometry, end.geometry)
    features = [
        start.clone(label="Başlangıç"),
        end.clone(label="Hedef"),
        Feature.create(LineString([start.geometry, end.geometry]), label=f"{angle:.1f}°"),
    ]
    message = messages.explain(
        ctx.tool,
        f"Açı & Azimut (Bearing): İki nokta arasındaki pusula açısı {angle:.2f} derece olarak ölçüldü.",
    )
    return AnalysisResult.of(features, message, {"Açı (Angle)": f"{angle:.2f}°"})


HANDLERS: Dict[ToolType, Handler] = {
    ToolType.AREA: calculate_area,
    ToolType.BBOX: bounding_box,
    ToolType.CENTROID: centroids,
    ToolType.BEARING: bearing,
}
