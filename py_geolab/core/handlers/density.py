"""Density surfaces and regular grids."""

import math
from typing import Callable, Dict, List, Tuple

import structlog

from ...config import messages
from .. import geometry, grids
from ..context import AnalysisContext, Handler
from ..features import Feature
from ..results import AnalysisResult
from ..tools import ToolType

logger = structlog.get_logger()

HEXBIN_MARGIN = 0.02
GRID_MARGIN = 0.01
ISOBAND_CELL_KM = 0.05
REVENUE_CEILING = 5000

IDW_COLORS = ['#3b82f6', '#06b6d4', '#10b981', '#f59e0b', '#ef4444']


def _revenue_samples(ctx: AnalysisContext) -> Tuple[list, List[float]]:
    """Points carrying a numeric ``revenue`` property and their values."""
    points, values = [], []
    for feature in ctx.points:
        value = feature.properties.get("revenue")
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            points.append(feature.geometry)
            values.append(float(value))
    return points, values


def hexbin(ctx: AnalysisContext) -> AnalysisResult:
    points = ctx.points.geometries()
    bounds = geometry.bounds_of(points)
    if bounds is None:
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    cells = grids.hex_grid(geometry.pad_bounds(bounds, HEXBIN_MARGIN), ctx.params.cell_side)
    counts = geometry.count_points_in_polygons(cells, points)
    features = [
        Feature.create(cell, count=count, label=str(count))
        for cell, count in zip(cells, counts)
        if count > 0
    ]
    message = messages.explain(
        ctx.tool,
        "Hexbin Yoğunluk: Alan altıgen peteklere bölündü ve her hücreye düşen nokta sayısı hesaplandı.",
    )
    return AnalysisResult.of(features, message, {"Hücre (Cells)": len(features)})


def isobands(ctx: AnalysisContext) -> AnalysisResult:
    points, values = _revenue_samples(ctx)
    if not points:
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    count = ctx.params.breaks
    breaks = [i * REVENUE_CEILING / count for i in range(count)]
    bands = grids.isobands(points, values, geometry.bounds_of(points), breaks, cell_km=ISOBAND_CELL_KM)
    features = [
        Feature.create(
            band.geometry,
            {"revenue": f"{band.lower:g}-{band.upper:g}"},
            count=i,
            label=f"Seviye {i + 1}",
        )
        for i, band in enumerate(bands)
    ]
    message = messages.explain(
        ctx.tool,
        "Isobands (Eş Değer Bölgeleri): Noktasal değerlerden sürekli bir yüzey oluşturuldu "
        "ve benzer değerli alanlar kuşaklar halinde çizildi.",
    )
    return AnalysisResult.of(features, message, {"Seviye (Bands)": len(features)})


def idw(ctx: AnalysisContext) -> AnalysisResult:
    points, values = _revenue_samples(ctx)
    if not points:
        return AnalysisResult.failure(messages.SAMPLE_MISSING)

    cells = grids.interpolate_hex(
        points, values, geometry.bounds_of(points), ctx.params.cell_size, ctx.params.weight
    )
    features = []
    for cell, value in cells:
        color = IDW_COLORS[max(0, min(4, int(math.floor(value / REVENUE_CEILING * 5))))]
        features.append(Feature.create(
            cell, {"revenue": value}, fill=color, stroke=color, label=str(int(math.floor(value)))
        ))

    message = messages.explain(
        ctx.tool,
        "IDW Enterpolasyon: Bilinen noktalardaki değerlerden aradaki boşluklar için tahmini değerler hesaplandı.",
    )
    return AnalysisResult.of(features, message, {"Hücre (Cells)": len(features)})


def _grid_handler(build: Callable[[geometry.Bounds, float], list]) -> Handler:
    def handle(ctx: AnalysisContext) -> AnalysisResult:
        bounds = geometry.bounds_of(ctx.polygons.geometries())
        if bounds is None:
            return AnalysisResult.failure(messages.SAMPLE_MISSING)

        cell_size = ctx.params.cell_size
        features = [Feature.create(cell) for cell in build(geometry.pad_bounds(bounds, GRID_MARGIN), cell_size)]
        message = messages.explain(
            ctx.tool,
            f"Grid Üretimi: Çalışma alanı {cell_size:g}km boyutunda sistematik parsellere bölündü.",
        )
        return AnalysisResult.of(features, message, {"Hücre (Cells)": len(features)})

    return handle


HANDLERS: Dict[ToolType, Handler] = {
    ToolType.HEXBIN: hexbin,
    ToolType.ISOBANDS: isobands,
    ToolType.IDW: idw,
    ToolType.POINT_GRID: _grid_handler(grids.point_grid),
    ToolType.SQUARE_GRID: _grid_handler(grids.square_grid),
    ToolType.TRIANGLE_GRID: _grid_handler(grids.triangle_grid),
    ToolType.HEX_GRID: _grid_handler(grids.hex_grid),
}
