"""
Line primitives: crossings, smoothing, offsetting, chunking and snapping.

Distances are kilometres. Metric work happens in a local equidistant
projection (see ``geometry.local_projection``).
"""

from typing import List, NamedTuple, Optional, Sequence

import numpy as np
import structlog
from shapely.errors import GEOSException
from shapely.geometry import LineString, MultiLineString, Point
from shapely.geometry.base import BaseGeometry
from shapely.ops import substring

from . import geometry

logger = structlog.get_logger()


class SnapResult(NamedTuple):
    """Closest position on a line to a point."""

    point: Point
    distance: float  # km from the source point
    location: float  # km along the line


def _parts(line: BaseGeometry) -> List[LineString]:
    if isinstance(line, LineString):
        return [line]
    if isinstance(line, MultiLineString):
        return list(line.geoms)
    return []


def _points_of(geom: BaseGeometry) -> List[Point]:
    if geom.is_empty:
        return []
    if isinstance(geom, Point):
        return [geom]
    if hasattr(geom, "geoms"):
        found: List[Point] = []
        for part in geom.geoms:
            found.extend(_points_of(part))
        return found
    return []


def line_intersections(a: BaseGeometry, b: BaseGeometry) -> List[Point]:
    """Crossing points of two lines; shared segments are ignored."""
    try:
        return _points_of(a.intersection(b))
    except GEOSException as e:
        logger.warning("Line intersection failed", error=str(e))
        return []


def all_line_intersections(lines: Sequence[BaseGeometry]) -> List[Point]:
    """Crossing points of every unordered pair of lines, in pair order."""
    found: List[Point] = []
    for i in range(len(lines)):
        for j in range(i + 1, len(lines)):
            found.extend(line_intersections(lines[i], lines[j]))
    return found


def bezier_spline(line: LineString, sharpness: float = 0.85, resolution: int = 10) -> LineString:
    """
    Smooth a line with cubic Bezier segments passing through every vertex.

    Control points are placed along the central-difference tangent at each
    vertex, scaled by ``sharpness`` (1.0 gives a Catmull-Rom curve, 0.0 the
    original polyline).

    Args:
        line: Input polyline
        sharpness: Tangent scale in [0, 1]
        resolution: Samples per segment

    Returns:
        Smoothed LineString
    """
    coords = np.asarray(line.coords, dtype=float)[:, :2]
    n = len(coords)
    if n < 3:
        return LineString(coords)

    padded = np.vstack([coords[0], coords, coords[-1]])
    tangents = (padded[2:] - padded[:-2]) * sharpness / 6.0

    t = np.linspace(0.0, 1.0, resolution, endpoint=False)[:, None]
    pieces = []
    for i in range(n - 1):
        p0, p3 = coords[i], coords[i + 1]
        p1 = p0 + tangents[i]
        p2 = p3 - tangents[i + 1]
        pieces.append(
            (1 - t) ** 3 * p0
            + 3 * (1 - t) ** 2 * t * p1
            + 3 * (1 - t) * t ** 2 * p2
            + t ** 3 * p3
        )
    pieces.append(coords[-1:])
    return LineString(np.vstack(pieces))


def offset_line(line: BaseGeometry, distance_km: float) -> Optional[BaseGeometry]:
    """Parallel copy of a line, positive distances to the left."""
    projection = geometry.local_projection(line)
    try:
        shifted = projection.forward(line).offset_curve(distance_km * 1000.0, join_style="mitre")
    except GEOSException as e:
        logger.warning("Line offset failed", error=str(e))
        return None
    if shifted.is_empty:
        return None
    return projection.inverse(shifted)


def line_chunks(line: BaseGeometry, length_km: float) -> List[LineString]:
    """
    Split a line into consecutive pieces of ``length_km``.

    The last piece holds the remainder and may be shorter.
    """
    step = length_km * 1000.0
    projection = geometry.local_projection(line)
    chunks: List[LineString] = []
    for part in _parts(line):
        projected = projection.forward(part)
        total = projected.length
        if total == 0:
            continue
        for start in np.arange(0.0, total, step):
            piece = substring(projected, float(start), float(min(start + step, total)))
            if isinstance(piece, LineString) and not piece.is_empty:
                chunks.append(projection.inverse(piece))
    return chunks


def snap_to_line(point: Point, line: BaseGeometry) -> SnapResult:
    """Closest position on ``line`` to ``point``."""
    projection = geometry.local_projection(line)
    projected_line = projection.forward(line)
    location = projected_line.project(projection.forward(point))
    snapped = projection.inverse(projected_line.interpolate(location))
    return SnapResult(
        point=snapped,
        distance=geometry.distance(point, snapped),
        location=location / 1000.0,
    )
