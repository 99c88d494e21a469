"""
Geometry primitives: measurement, local projection, set operations and
topological predicates.

Coordinates are lon/lat on WGS84. Every distance argument and return value
is in kilometres, areas are in square metres. Operations that can
degenerate (set operations, hulls) return None instead of raising unless
called with ``strict=True``.
"""

from functools import lru_cache
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, Union

import geopandas as gpd
import numpy as np
import pandas as pd
import shapely
import structlog
from pyproj import CRS, Geod, Transformer
from shapely.errors import GEOSException
from shapely.geometry import (
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    box,
)
from shapely.geometry.base import BaseGeometry
from shapely.geometry.polygon import orient
from shapely.ops import unary_union

from .errors import GeometryOperationError

logger = structlog.get_logger()

WGS84 = "EPSG:4326"
GEOD = Geod(ellps="WGS84")

Coordinate = Tuple[float, float]
Bounds = Tuple[float, float, float, float]
PointLike = Union[Point, Coordinate]


class LocalProjection:
    """Azimuthal equidistant projection in metres centred on one coordinate."""

    def __init__(self, lon: float, lat: float):
        self.center = (lon, lat)
        crs = CRS.from_proj4(
            f"+proj=aeqd +lat_0={lat} +lon_0={lon} +datum=WGS84 +units=m +no_defs"
        )
        self._forward = Transformer.from_crs(WGS84, crs, always_xy=True)
        self._inverse = Transformer.from_crs(crs, WGS84, always_xy=True)

    def forward(self, geom: BaseGeometry) -> BaseGeometry:
        return shapely.transform(geom, self.forward_xy, interleaved=False)

    def inverse(self, geom: BaseGeometry) -> BaseGeometry:
        return shapely.transform(geom, self.inverse_xy, interleaved=False)

    def forward_xy(self, lons, lats) -> Tuple[np.ndarray, np.ndarray]:
        xs, ys = self._forward.transform(np.asarray(lons, dtype=float), np.asarray(lats, dtype=float))
        return np.asarray(xs), np.asarray(ys)

    def inverse_xy(self, xs, ys) -> Tuple[np.ndarray, np.ndarray]:
        lons, lats = self._inverse.transform(np.asarray(xs, dtype=float), np.asarray(ys, dtype=float))
        return np.asarray(lons), np.asarray(lats)


@lru_cache(maxsize=128)
def _projection_at(lon: float, lat: float) -> LocalProjection:
    return LocalProjection(lon, lat)


def local_projection(target: Union[BaseGeometry, Bounds, Coordinate]) -> LocalProjection:
    """Projection centred on a coordinate, a bounding box or a geometry's bbox."""
    if isinstance(target, BaseGeometry):
        target = target.bounds
    if len(target) == 4:
        minx, miny, maxx, maxy = target
        lon, lat = (minx + maxx) / 2.0, (miny + maxy) / 2.0
    else:
        lon, lat = target
    return _projection_at(round(lon, 6), round(lat, 6))


def as_point(value: PointLike) -> Point:
    return value if isinstance(value, Point) else Point(value[0], value[1])


# --- Measurement ---

def _polygons(geom: BaseGeometry) -> List[Polygon]:
    if isinstance(geom, Polygon):
        return [geom]
    if isinstance(geom, (MultiPolygon, GeometryCollection)):
        parts: List[Polygon] = []
        for part in geom.geoms:
            parts.extend(_polygons(part))
        return parts
    return []


def area(geom: BaseGeometry) -> float:
    """Geodesic area in square metres (zero for non-areal geometry)."""
    total = 0.0
    for polygon in _polygons(geom):
        value, _ = GEOD.geometry_area_perimeter(orient(polygon, sign=1.0))
        total += value
    return abs(total)


def length(geom: BaseGeometry) -> float:
    """Geodesic length in kilometres."""
    if geom.is_empty:
        return 0.0
    return GEOD.geometry_length(geom) / 1000.0


def distance(a: PointLike, b: PointLike) -> float:
    """Geodesic distance between two points in kilometres."""
    a, b = as_point(a), as_point(b)
    _, _, meters = GEOD.inv(a.x, a.y, b.x, b.y)
    return meters / 1000.0


def bearing(a: PointLike, b: PointLike) -> float:
    """Initial compass bearing from ``a`` to ``b`` in degrees, -180..180."""
    a, b = as_point(a), as_point(b)
    azimuth, _, _ = GEOD.inv(a.x, a.y, b.x, b.y)
    return azimuth


def destination(origin: PointLike, distance_km: float, bearing_deg: float) -> Point:
    """Point reached from ``origin`` after travelling along a bearing."""
    origin = as_point(origin)
    lon, lat, _ = GEOD.fwd(origin.x, origin.y, bearing_deg, distance_km * 1000.0)
    return Point(lon, lat)


def bounds_of(geoms: Iterable[BaseGeometry]) -> Optional[Bounds]:
    """Combined (minx, miny, maxx, maxy) of the geometries, None when empty."""
    all_bounds = [g.bounds for g in geoms if not g.is_empty]
    if not all_bounds:
        return None
    arr = np.array(all_bounds)
    return (
        float(arr[:, 0].min()),
        float(arr[:, 1].min()),
        float(arr[:, 2].max()),
        float(arr[:, 3].max()),
    )


def pad_bounds(bounds: Bounds, margin: float) -> Bounds:
    """Grow a bounding box by ``margin`` degrees on every side."""
    minx, miny, maxx, maxy = bounds
    return (minx - margin, miny - margin, maxx + margin, maxy + margin)


def bbox_polygon(bounds: Bounds) -> Polygon:
    return box(*bounds)


def centroid(geom: BaseGeometry) -> Point:
    return geom.centroid


def vertex_count(geom: BaseGeometry) -> int:
    return int(shapely.get_num_coordinates(geom))


# --- Buffering and simplification ---

def buffer(geom: BaseGeometry, radius_km: float, quad_segs: int = 16) -> Optional[BaseGeometry]:
    """
    Buffer a geometry by a distance in kilometres.

    The geometry is projected into a local equidistant frame, buffered in
    metres and projected back.

    Args:
        geom: Geometry to buffer
        radius_km: Buffer distance in kilometres
        quad_segs: Segments per quarter circle

    Returns:
        Buffered polygon, or None when the result is empty
    """
    projection = local_projection(geom)
    buffered = projection.forward(geom).buffer(radius_km * 1000.0, quad_segs=quad_segs)
    if buffered.is_empty:
        return None
    return projection.inverse(buffered)


def simplify(geom: BaseGeometry, tolerance: float) -> BaseGeometry:
    """Douglas-Peucker simplification, tolerance in degrees."""
    return geom.simplify(tolerance, preserve_topology=True)


# --- Set operations ---

def _polygonal(geom: Optional[BaseGeometry]) -> Optional[BaseGeometry]:
    """Keep only the areal part of an overlay result."""
    if geom is None or geom.is_empty:
        return None
    if isinstance(geom, (Polygon, MultiPolygon)):
        return geom
    parts = [p for p in _polygons(geom) if not p.is_empty]
    if not parts:
        return None
    return parts[0] if len(parts) == 1 else MultiPolygon(parts)


def _overlay(operation: str, fn: Callable[[], BaseGeometry], strict: bool) -> Optional[BaseGeometry]:
    try:
        result = fn()
    except GEOSException as e:
        logger.warning("Geometry operation failed", operation=operation, error=str(e))
        if strict:
            raise GeometryOperationError(operation, str(e)) from e
        return None
    return _polygonal(result)


def intersect(a: BaseGeometry, b: BaseGeometry, strict: bool = False) -> Optional[BaseGeometry]:
    """Areal intersection of two polygons, None when they only touch or are apart."""
    return _overlay("intersect", lambda: a.intersection(b), strict)


def union(a: BaseGeometry, b: BaseGeometry, strict: bool = False) -> Optional[BaseGeometry]:
    return _overlay("union", lambda: a.union(b), strict)


def difference(a: BaseGeometry, b: BaseGeometry, strict: bool = False) -> Optional[BaseGeometry]:
    """``a`` minus ``b``, None when nothing is left."""
    return _overlay("difference", lambda: a.difference(b), strict)


def union_all(geoms: Sequence[BaseGeometry], strict: bool = False) -> Optional[BaseGeometry]:
    return _overlay("union_all", lambda: unary_union(list(geoms)), strict)


def dissolve(geoms: Sequence[BaseGeometry], keys: Sequence[Any]) -> List[Tuple[Any, BaseGeometry]]:
    """
    Merge geometries sharing the same key.

    Groups keep the order in which their key first appears; a missing key
    forms its own group.

    Returns:
        List of (key, merged geometry) pairs
    """
    if not geoms:
        return []
    gdf = gpd.GeoDataFrame({"key": list(keys)}, geometry=list(geoms), crs=WGS84)
    dissolved = gdf.dissolve(by="key", as_index=False, sort=False, dropna=False)
    return [
        (None if pd.isna(key) else key, geom)
        for key, geom in zip(dissolved["key"], dissolved.geometry)
    ]


def convex_hull(geoms: Sequence[BaseGeometry]) -> Optional[Polygon]:
    """Convex hull of the geometries, None when it is not a proper polygon."""
    if not geoms:
        return None
    if all(isinstance(g, Point) for g in geoms):
        hull = MultiPoint(list(geoms)).convex_hull
    else:
        hull = GeometryCollection(list(geoms)).convex_hull
    return hull if isinstance(hull, Polygon) and not hull.is_empty else None


# --- Conversion ---

def polygon_to_lines(geom: BaseGeometry) -> List[BaseGeometry]:
    """One line geometry per polygon part: LineString, or MultiLineString with holes."""
    lines: List[BaseGeometry] = []
    for polygon in _polygons(geom):
        rings = [LineString(polygon.exterior.coords)]
        rings.extend(LineString(interior.coords) for interior in polygon.interiors)
        lines.append(rings[0] if len(rings) == 1 else MultiLineString(rings))
    return lines


def line_to_polygon(line: BaseGeometry) -> Optional[Polygon]:
    """Close a line into a polygon, None when it has fewer than three vertices."""
    if not isinstance(line, LineString):
        return None
    coords = list(line.coords)
    if len(coords) > 1 and coords[0] == coords[-1]:
        coords = coords[:-1]
    if len(coords) < 3:
        return None
    polygon = Polygon(coords)
    return None if polygon.is_empty else polygon


# --- Predicates ---

def point_in_polygon(point: BaseGeometry, polygon: BaseGeometry) -> bool:
    """True when the point is inside the polygon or on its boundary."""
    return polygon.covers(point)


def contains(a: BaseGeometry, b: BaseGeometry) -> bool:
    return a.contains(b)


def crosses(a: BaseGeometry, b: BaseGeometry) -> bool:
    return a.crosses(b)


def disjoint(a: BaseGeometry, b: BaseGeometry) -> bool:
    return a.disjoint(b)


def overlaps(a: BaseGeometry, b: BaseGeometry) -> bool:
    return a.overlaps(b)


def equals(a: BaseGeometry, b: BaseGeometry) -> bool:
    return a.equals(b)


def touches(a: BaseGeometry, b: BaseGeometry) -> bool:
    return a.touches(b)


def intersects(a: BaseGeometry, b: BaseGeometry) -> bool:
    return a.intersects(b)


# --- Point queries ---

def count_points_in_polygons(
    polygons: Sequence[BaseGeometry], points: Sequence[BaseGeometry]
) -> List[int]:
    """Number of points intersecting each polygon, boundary included."""
    if not polygons:
        return []
    if not points:
        return [0] * len(polygons)
    polygon_gdf = gpd.GeoDataFrame(geometry=list(polygons), crs=WGS84)
    point_gdf = gpd.GeoDataFrame(geometry=list(points), crs=WGS84)
    joined = gpd.sjoin(polygon_gdf, point_gdf, how="inner", predicate="intersects")
    counts = joined.groupby(level=0).size()
    return [int(counts.get(i, 0)) for i in range(len(polygons))]


def nearest_point(target: PointLike, candidates: Sequence[Point]) -> Optional[Tuple[int, float]]:
    """
    Find the candidate closest to ``target``.

    Returns:
        (index, distance in km) of the first closest candidate, None when empty
    """
    if not candidates:
        return None
    target = as_point(target)
    lons = np.array([c.x for c in candidates])
    lats = np.array([c.y for c in candidates])
    _, _, meters = GEOD.inv(
        np.full(len(candidates), target.x), np.full(len(candidates), target.y), lons, lats
    )
    index = int(np.argmin(meters))
    return index, float(meters[index]) / 1000.0
