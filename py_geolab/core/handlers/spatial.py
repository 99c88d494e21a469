"""Spatial relationships and clustering over the point collection."""

from typing import Dict

import structlog
from shapely.geometry import LineString, Point

from ...config import messages
from ...config.settings import settings
from .. import clustering, geometry
from ..context import AnalysisContext, Handler
from ..features import Feature
from ..results import AnalysisResult
from ..tools import ToolType

logger = structlog.get_logger()

NEAREST_REFERENCE = Point(-74.00, 40.72)
VORONOI_MARGIN = 0.05

KMEANS_PALETTE = ['#e6194b', '#3cb44b', '#ffe119', '#4363d8', '#f58231', '#911eb4', '#46f0f0']


def spatial_join(ctx: AnalysisContext) -> AnalysisResult:
    counts = geometry.count_points_in_polygons(ctx.polygons.geometries(), ctx.points.geometries())
    features = [
        polygon.clone(label=f"{count} Adet", count=count, type="spatialJoin")
        for polygon, count in zip(ctx.polygons, counts)
    ]
    message = messages.explain(
        ctx.tool,
        "Mekansal Birleşim (Spatial Join): Her poligonun sınırları içine düşen noktalar sayıldı.",
    )
    return AnalysisResult.of(features, message, {"Toplam (Joined)": sum(counts)})


def nearest(ctx: AnalysisContext) -> AnalysisResult:
    found = geometry.nearest_point(NEAREST_REFERENCE, ctx.points.geometries())
    if found is None:
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    index, distance = found
    target = ctx.points[index]
    features = [
        Feature.create(NEAREST_REFERENCE, label="BAŞLANGIÇ", stroke="#F00", fill="#F00"),
        Feature.create(target.geometry, {**target.properties, "distanceToPoint": distance}, label="HEDEF"),
        Feature.create(LineString([NEAREST_REFERENCE, target.geometry]), label=f"{distance:.2f} km"),
    ]
    message = messages.explain(
        ctx.tool, "En Yakın Nokta: Referans noktasına kuş uçuşu en yakın nesne bulundu."
    )
    return AnalysisResult.of(features, message, {"Mesafe": f"{distance:.2f} km"})


def distance_matrix(ctx: AnalysisContext) -> AnalysisResult:
    max_distance = ctx.params.max_distance
    points = ctx.points.features
    if len(points) > settings.distance_matrix_warn_points:
        logger.warning("Running pairwise distance scan", points=len(points))

    connections = []
    for i in range(len(points)):
        for j in range(i + 1, len(points)):
            distance = geometry.distance(points[i].geometry, points[j].geometry)
            if distance <= max_distance:
                connections.append(Feature.create(
                    LineString([points[i].geometry, points[j].geometry]),
                    {"distance": distance},
                    label=f"{distance:.2f}km",
                ))

    message = messages.explain(
        ctx.tool,
        f"Mesafe Matrisi: Birbirine {max_distance:g}km veya daha yakın tüm noktalar arasında bağlantı kuruldu.",
    )
    return AnalysisResult.of(connections, message, {"Bağlantı": len(connections)})


def voronoi(ctx: AnalysisContext) -> AnalysisResult:
    bounds = geometry.bounds_of(ctx.points.geometries())
    if bounds is None:
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    cells = clustering.voronoi_cells(ctx.points.geometries(), geometry.pad_bounds(bounds, VORONOI_MARGIN))
    features = [
        Feature.create(cell, point.properties)
        for point, cell in zip(ctx.points, cells)
        if cell is not None
    ]
    message = messages.explain(
        ctx.tool, "Voronoi Diyagramı: Her noktanın kendisine en yakın olan hakimiyet alanı çizildi."
    )
    return AnalysisResult.of(features, message, {"Hücre (Cells)": len(features)})


def tin(ctx: AnalysisContext) -> AnalysisResult:
    triangles = clustering.delaunay_triangles(ctx.points.geometries())
    if not triangles:
        return AnalysisResult.failure(
            "Üçgen ağı için doğrusal olmayan en az 3 nokta gerekli. (Not enough points)"
        )

    message = messages.explain(
        ctx.tool, "TIN (Üçgen Ağı): Noktalar kullanılarak kesintisiz bir üçgen ağı örüldü."
    )
    return AnalysisResult.of(
        [Feature.create(t) for t in triangles], message, {"Üçgen (Triangles)": len(triangles)}
    )


def kmeans(ctx: AnalysisContext) -> AnalysisResult:
    points = ctx.points.features
    if not points:
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    result = clustering.kmeans(
        ctx.points.geometries(), ctx.params.number_of_clusters, settings.kmeans_random_state
    )
    labels = [int(label) for label in result.labels]

    features = [
        point.clone(cluster=label, fill=KMEANS_PALETTE[label % len(KMEANS_PALETTE)])
        for point, label in zip(points, labels)
    ]
    for cluster in range(result.k):
        members = [p.geometry for p, label in zip(points, labels) if label == cluster]
        if len(members) < 3:
            continue
        hull = geometry.convex_hull(members)
        if hull is not None:
            features.append(
                Feature.create(hull, cluster=cluster, type="clusterHull", label=f"Grup {cluster + 1}")
            )

    message = messages.explain(
        ctx.tool,
        f"K-Means Kümeleme: Noktalar konumlarına göre {result.k} adet gruba ayrıldı.",
    )
    return AnalysisResult.of(features, message, {"Küme (Clusters)": result.k})


def dbscan(ctx: AnalysisContext) -> AnalysisResult:
    params = ctx.params
    result = clustering.dbscan(ctx.points.geometries(), params.max_distance, params.min_points)

    features = []
    for point, label, is_core in zip(ctx.points, result.labels, result.core):
        if label < 0:
            features.append(Feature.create(point.geometry, {**point.properties, "dbscan": "noise"}))
        else:
            features.append(Feature.create(
                point.geometry,
                {**point.properties, "dbscan": "core" if is_core else "edge"},
                cluster=int(label),
            ))

    message = messages.explain(
        ctx.tool,
        f"DBSCAN Kümeleme: Birbirine {params.max_distance:g}km yakın noktalar kümelendi, "
        "aykırı değerler (gürültü) dışlandı.",
    )
    stats = {"Küme (Clusters)": result.cluster_count, "Gürültü (Noise)": result.noise_count}
    return AnalysisResult.of(features, message, stats)


HANDLERS: Dict[ToolType, Handler] = {
    ToolType.SPATIAL_JOIN: spatial_join,
    ToolType.NEAREST: nearest,
    ToolType.DISTANCE_MATRIX: distance_matrix,
    ToolType.VORONOI: voronoi,
    ToolType.TIN: tin,
    ToolType.KMEANS: kmeans,
    ToolType.DBSCAN: dbscan,
}
