"""Network and line operations."""

from typing import Dict, List, NamedTuple

import structlog
from shapely.geometry import LineString, Point

from ...config import messages
from .. import geometry, lines
from ..context import AnalysisContext, Handler
from ..features import Feature
from ..results import AnalysisResult
from ..tools import ToolType

logger = structlog.get_logger()


class CoverageBand(NamedTuple):
    name: str
    factor: float
    fill: str
    stroke: str
    alpha: str


STATIONS = [
    ("Merkez", Point(-74.00, 40.72)),
    ("KB", Point(-74.04, 40.75)),
    ("KD", Point(-73.96, 40.75)),
    ("GB", Point(-74.04, 40.69)),
    ("GD", Point(-73.96, 40.69)),
]

# Innermost first
COVERAGE_BANDS = [
    CoverageBand("5G", 0.15, "#ef4444", "#991b1b", "80"),
    CoverageBand("4G", 0.35, "#f97316", "#c2410c", "66"),
    CoverageBand("3G", 0.65, "#eab308", "#a16207", "55"),
    CoverageBand("2G", 1.00, "#22c55e", "#15803d", "44"),
]


def line_intersections(ctx: AnalysisContext) -> AnalysisResult:
    crossings = lines.all_line_intersections(ctx.lines.geometries())
    features = [Feature.create(point, label="Kavşak") for point in crossings]
    message = messages.explain(
        ctx.tool, "Yol Kesişimleri: Tüm yollar taranarak kesişim (kavşak) noktaları tespit edildi."
    )
    return AnalysisResult.of(features, message, {"Kesişim": len(features)})


def bezier(ctx: AnalysisContext) -> AnalysisResult:
    target = ctx.line("JaggedPath")
    if target is None:
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    curve = lines.bezier_spline(target.geometry, ctx.params.sharpness, ctx.params.resolution)
    features = [
        target.clone(label="Orjinal", stroke="#64748b"),
        Feature.create(curve, label="Düzeltilmiş", stroke="#00FF00"),
    ]
    message = messages.explain(
        ctx.tool, "Eğri Yumuşatma: Zikzaklı yol verisi akıcı bir eğriye dönüştürüldü."
    )
    return AnalysisResult.of(features, message)


def line_length(ctx: AnalysisContext) -> AnalysisResult:
    features = []
    total = 0.0
    for line in ctx.lines:
        km = geometry.length(line.geometry)
        total += km
        features.append(line.clone(label=f"{km:.2f} km"))

    message = messages.explain(
        ctx.tool, "Çizgi Uzunluğu: Tüm hatların gerçek dünya uzunlukları hesaplandı."
    )
    return AnalysisResult.of(features, message, {"Toplam": f"{total:.2f} km"})


def line_chunk(ctx: AnalysisContext) -> AnalysisResult:
    length = ctx.params.length
    chunks: List[Feature] = []
    cuts: List[Feature] = []
    for line in ctx.lines:
        for i, piece in enumerate(lines.line_chunks(line.geometry, length)):
            chunks.append(Feature.create(piece, label=f"{(i + 1) * length:g}km"))
            cuts.append(Feature.create(Point(piece.coords[-1]), label="Kesim"))

    message = messages.explain(
        ctx.tool, f"Parçalama: Çizgiler her {length:g}km'de bir parçalara bölündü."
    )
    return AnalysisResult.of(chunks + cuts, message, {"Parça (Chunks)": len(chunks)})


def line_offset(ctx: AnalysisContext) -> AnalysisResult:
    distance = ctx.params.distance
    target = ctx.line("Hwy1")
    if target is None:
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    shifted = lines.offset_line(target.geometry, distance)
    if shifted is None:
        return AnalysisResult.failure(messages.OPERATION_FAILED.format(operation="Ofset"))

    message = messages.explain(
        ctx.tool, f"Ofset: Mevcut çizginin {distance:g}km yanına paralel yeni bir şerit oluşturuldu."
    )
    return AnalysisResult.of([target.clone(), Feature.create(shifted, label="Yan Yol")], message)


def snap(ctx: AnalysisContext) -> AnalysisResult:
    threshold = ctx.params.distance
    reference = ctx.line_or_first("Hwy1")
    if reference is None:
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    features = [reference.clone()]
    snapped_count = 0
    for point in ctx.points:
        snapped = lines.snap_to_line(point.geometry, reference.geometry)
        if snapped.distance >= threshold:
            continue
        features.append(Feature.create(
            snapped.point,
            {"dist": snapped.distance, "location": snapped.location},
            label="Yapışan",
        ))
        features.append(Feature.create(
            LineString([point.geometry, snapped.point]),
            label=f"{snapped.distance * 1000:.0f}m",
        ))
        snapped_count += 1

    message = messages.explain(
        ctx.tool,
        f"Çizgiye Yapıştırma (Snap): {threshold:g}km mesafedeki noktalar en yakın yol çizgisine hizalandı.",
    )
    return AnalysisResult.of(features, message, {"Yapışan": snapped_count})


def base_station_coverage(ctx: AnalysisContext) -> AnalysisResult:
    """
    Nested technology bands around five stations.

    Every station is buffered per band, the buffers of a band are merged,
    and each outer band is shown as a ring with the next inner band removed.
    """
    radius = ctx.params.radius
    merged = {}
    for band in COVERAGE_BANDS:
        buffers = [geometry.buffer(point, radius * band.factor) for _, point in STATIONS]
        buffers = [b for b in buffers if b is not None]
        merged[band.name] = geometry.union_all(buffers) if buffers else None
        if merged[band.name] is None:
            logger.warning("Coverage band skipped", band=band.name)

    layers = []
    inner = COVERAGE_BANDS[0]
    if merged[inner.name] is not None:
        layers.append(Feature.create(
            merged[inner.name], fill=inner.fill + inner.alpha, stroke=inner.stroke, label=inner.name
        ))
    for previous, band in zip(COVERAGE_BANDS, COVERAGE_BANDS[1:]):
        if merged[band.name] is None or merged[previous.name] is None:
            continue
        ring = geometry.difference(merged[band.name], merged[previous.name])
        if ring is None:
            logger.warning("Coverage ring skipped", band=band.name)
            continue
        layers.append(Feature.create(ring, fill=band.fill + band.alpha, stroke=band.stroke, label=band.name))

    stations = [Feature.create(point, label=name) for name, point in STATIONS]
    message = messages.explain(
        ctx.tool,
        "Baz İstasyonu Kapsama: 2G/3G/4G/5G bantları için iç içe tampon bölgeler oluşturuldu ve birleştirildi.",
    )
    return AnalysisResult.of(layers + stations, message, {"Max 2G": f"{radius:g} km"})


HANDLERS: Dict[ToolType, Handler] = {
    ToolType.LINE_INTERSECT: line_intersections,
    ToolType.BEZIER: bezier,
    ToolType.LENGTH: line_length,
    ToolType.LINE_CHUNK: line_chunk,
    ToolType.LINE_OFFSET: line_offset,
    ToolType.SNAP: snap,
    ToolType.BASE_STATION_COVERAGE: base_station_coverage,
}
