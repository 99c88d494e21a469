"""
Vector set operations on the demo polygons.

Each operation names the demo features it works on. When a set operation
degenerates (empty result or a GEOS error) the handler reports it in the
message instead of raising.
"""

from typing import Dict, Optional, Tuple

import structlog

from ...config import messages
from .. import geometry
from ..context import AnalysisContext, Handler
from ..features import Feature, FeatureCollection
from ..results import AnalysisResult
from ..tools import ToolType

logger = structlog.get_logger()

DISTRICT_A_ID = 601
DISTRICT_B_ID = 602
CITY_ID = 1
PARK_ID = 2
INDUSTRIAL_ID = 3
CLIP_MASK_ID = 500


def _first_touching_pair(polygons: FeatureCollection) -> Optional[Tuple[Feature, Feature]]:
    """First pair i < j of polygons that are not disjoint."""
    features = polygons.features
    for i in range(len(features)):
        for j in range(i + 1, len(features)):
            if not geometry.disjoint(features[i].geometry, features[j].geometry):
                return features[i], features[j]
    return None


def _missing(ctx: AnalysisContext, *ids) -> AnalysisResult:
    logger.warning("Demo features missing", tool=ctx.tool.value, ids=list(ids))
    return AnalysisResult.failure(messages.SAMPLE_MISSING)


def _failed(ctx: AnalysisContext, operation: str) -> AnalysisResult:
    logger.warning("Set operation produced no geometry", tool=ctx.tool.value)
    return AnalysisResult.failure(messages.OPERATION_FAILED.format(operation=operation))


def buffer_features(ctx: AnalysisContext) -> AnalysisResult:
    """Buffer a demo point, line and polygon, each followed by its source."""
    radius = ctx.params.radius
    features = []
    sources = (
        (ctx.point_or_first(900), "Nokta"),
        (ctx.line_or_first("Hwy1"), "Çizgi"),
        (ctx.polygon_or_first(CITY_ID), "Alan"),
    )
    for source, prefix in sources:
        if source is None:
            continue
        buffered = geometry.buffer(source.geometry, radius)
        if buffered is None:
            logger.warning("Buffer produced no geometry", source=source.id, radius=radius)
            continue
        features.append(Feature.create(buffered, label=f"{prefix} {radius:g}km"))
        features.append(source.clone())

    message = messages.explain(
        ctx.tool,
        f"Tampon (Buffer): Seçilen nesnelerin etrafında {radius:g}km yarıçaplı koruma halkaları oluşturuldu.",
    )
    return AnalysisResult.of(features, message)


def intersect(ctx: AnalysisContext) -> AnalysisResult:
    first = ctx.polygon(DISTRICT_A_ID)
    second = ctx.polygon(DISTRICT_B_ID)
    if first is None or second is None:
        pair = _first_touching_pair(ctx.polygons)
        if pair is None:
            return AnalysisResult.failure(
                "Kesişen poligon bulunamadı. Lütfen birbirine temas eden veriler kullanın. "
                "(No intersecting polygons)"
            )
        first, second = pair
        logger.debug("Using first touching pair", first=first.id, second=second.id)

    overlap = geometry.intersect(first.geometry, second.geometry)
    if overlap is None:
        return AnalysisResult.of(
            [first.clone(), second.clone()], "Seçilen alanlar kesişmiyor. (No Intersection Found)"
        )

    features = [
        first.clone(fill="rgba(59, 130, 246, 0.1)", stroke="#3b82f6", label="Bölge A"),
        second.clone(fill="rgba(16, 185, 129, 0.1)", stroke="#10b981", label="Bölge B"),
        Feature.create(overlap, label="Kesişim Alanı", fill="#ef4444", stroke="#b91c1c"),
    ]
    message = messages.explain(
        ctx.tool,
        "Kesişim (Intersect): İki alanın sadece üst üste binen kısmı çıkarıldı (Kırmızı alan).",
    )
    return AnalysisResult.of(
        features, message, {"Kesişim (Area)": f"{geometry.area(overlap) / 1_000_000:.2f} km²"}
    )


def union(ctx: AnalysisContext) -> AnalysisResult:
    first = ctx.polygon(DISTRICT_A_ID)
    second = ctx.polygon(DISTRICT_B_ID)
    if first is None or second is None:
        return _missing(ctx, DISTRICT_A_ID, DISTRICT_B_ID)

    merged = geometry.union(first.geometry, second.geometry)
    if merged is None:
        return _failed(ctx, "Birleşim")

    message = messages.explain(
        ctx.tool, "Birleşim (Union): İki bölge tek bir sınır altında birleştirildi."
    )
    return AnalysisResult.of([Feature.create(merged, label="Birleşmiş Bölge", fill="#8b5cf6")], message)


def difference(ctx: AnalysisContext) -> AnalysisResult:
    city = ctx.polygon(CITY_ID)
    park = ctx.polygon(PARK_ID)
    if city is None or park is None:
        return _missing(ctx, CITY_ID, PARK_ID)

    remainder = geometry.difference(city.geometry, park.geometry)
    if remainder is None:
        return _failed(ctx, "Fark")

    message = messages.explain(
        ctx.tool, "Fark (Difference): Şehir alanından park alanı kesilip çıkarıldı (A eksi B)."
    )
    return AnalysisResult.of([Feature.create(remainder, label="Park Hariç Şehir", fill="#f59e0b")], message)


def clip(ctx: AnalysisContext) -> AnalysisResult:
    city = ctx.polygon(CITY_ID)
    mask = ctx.polygon(CLIP_MASK_ID)
    if city is None or mask is None:
        return _missing(ctx, CITY_ID, CLIP_MASK_ID)

    clipped = geometry.intersect(city.geometry, mask.geometry)
    if clipped is None:
        return _failed(ctx, "Kırpma")

    features = [
        mask.clone(label="Maske", fill="rgba(255,255,255,0.1)", stroke="#94a3b8"),
        Feature.create(clipped, label="Kırpılmış Şehir", fill="#d946ef", stroke="#a21caf"),
    ]
    message = messages.explain(
        ctx.tool, "Kırpma (Clip): Veri bir maske (gri çerçeve) kullanılarak kesildi."
    )
    return AnalysisResult.of(features, message)


def dissolve(ctx: AnalysisContext) -> AnalysisResult:
    selected = [
        f for f in (ctx.polygon(DISTRICT_A_ID), ctx.polygon(DISTRICT_B_ID), ctx.polygon(INDUSTRIAL_ID))
        if f is not None
    ]
    if not selected:
        selected = list(ctx.polygons)
    if not selected:
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    groups = geometry.dissolve(
        [f.geometry for f in selected], [f.properties.get("type") for f in selected]
    )
    features = [
        Feature.create(
            merged,
            {"type": key} if key is not None else {},
            label=f"{key or 'Birleşik'} (Dissolved)",
        )
        for key, merged in groups
    ]
    message = messages.explain(
        ctx.tool, "Bütünleştir (Dissolve): Aynı tipe sahip alanlar tek parça yapıldı."
    )
    return AnalysisResult.of(features, message, {"Grup (Groups)": len(features)})


def convex_hull(ctx: AnalysisContext) -> AnalysisResult:
    hull = geometry.convex_hull(ctx.points.geometries())
    if hull is None:
        return AnalysisResult.failure(
            "Dış bükey örtü için doğrusal olmayan en az 3 nokta gerekli. (Not enough points)"
        )

    message = messages.explain(
        ctx.tool,
        "Dış Bükey Örtü (Convex Hull): Noktaları içine alan en küçük ve en gergin dış sınır çizildi.",
    )
    return AnalysisResult.of(
        [Feature.create(hull, label="Kapsama Sınırı")],
        message,
        {"Alan (Area)": f"{geometry.area(hull) / 1_000_000:.2f} km²"},
    )


def simplify(ctx: AnalysisContext) -> AnalysisResult:
    tolerance = ctx.params.tolerance
    line = ctx.line_or_first("HighResLine")
    if line is None:
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    simplified = geometry.simplify(line.geometry, tolerance)
    before = geometry.vertex_count(line.geometry)
    after = geometry.vertex_count(simplified)
    reduction = (1 - after / before) * 100 if before else 0.0

    features = [
        line.clone(label="Orjinal", stroke="#475569", fill="none", width=2),
        Feature.create(simplified, label="Basit", stroke="#ef4444", fill="none", width=3),
    ]
    message = messages.explain(
        ctx.tool,
        f"Basitleştirme: Çizgi üzerindeki gereksiz köşe noktaları temizlendi. (Tolerans: {tolerance:g})",
    )
    stats = {
        "Önce (Before)": before,
        "Sonra (After)": after,
        "Kazanç (Reduction)": f"%{reduction:.1f}",
    }
    return AnalysisResult.of(features, message, stats)


HANDLERS: Dict[ToolType, Handler] = {
    ToolType.BUFFER: buffer_features,
    ToolType.INTERSECT: intersect,
    ToolType.UNION: union,
    ToolType.DIFFERENCE: difference,
    ToolType.DISSOLVE: dissolve,
    ToolType.CLIP: clip,
    ToolType.CONVEX_HULL: convex_hull,
    ToolType.SIMPLIFY: simplify,
}
