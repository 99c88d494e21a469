"""
Regular tessellations and surface interpolation.

Grids are laid out in a local metric projection centred on the requested
bounding box, centred inside it, and only cells lying completely inside
the box are kept. Interpolation uses inverse distance weighting; isobands
are traced with contourpy over an interpolated lattice.
"""

import math
from typing import List, NamedTuple, Sequence, Tuple

import numpy as np
import structlog
from contourpy import FillType, contour_generator
from shapely.geometry import MultiPolygon, Point, Polygon, box

from . import geometry

logger = structlog.get_logger()


class Band(NamedTuple):
    """One filled contour band."""

    index: int  # position of the lower break
    lower: float
    upper: float
    geometry: MultiPolygon


class _Frame:
    """A bounding box expressed in local projected metres."""

    def __init__(self, bounds: geometry.Bounds):
        self.projection = geometry.local_projection(bounds)
        self.outline = self.projection.forward(box(*bounds))
        self.minx, self.miny, self.maxx, self.maxy = self.outline.bounds
        self.width = self.maxx - self.minx
        self.height = self.maxy - self.miny
        # Small slack so cells touching the edge survive float noise
        self._fit = self.outline.buffer(1e-6 * max(self.width, self.height, 1.0))

    def fits(self, geom) -> bool:
        return self._fit.covers(geom)

    def to_wgs84(self, geom):
        return self.projection.inverse(geom)


def _square_origin(frame: _Frame, size: float) -> Tuple[int, int, float, float]:
    cols = int(math.floor(frame.width / size))
    rows = int(math.floor(frame.height / size))
    x0 = frame.minx + (frame.width - cols * size) / 2.0
    y0 = frame.miny + (frame.height - rows * size) / 2.0
    return cols, rows, x0, y0


def point_grid(bounds: geometry.Bounds, cell_km: float) -> List[Point]:
    """Grid of points spaced ``cell_km`` apart."""
    frame = _Frame(bounds)
    size = cell_km * 1000.0
    cols, rows, x0, y0 = _square_origin(frame, size)
    points = []
    for i in range(cols + 1):
        for j in range(rows + 1):
            point = Point(x0 + i * size, y0 + j * size)
            if frame.fits(point):
                points.append(frame.to_wgs84(point))
    return points


def square_grid(bounds: geometry.Bounds, cell_km: float) -> List[Polygon]:
    """Square cells with sides of ``cell_km``."""
    frame = _Frame(bounds)
    size = cell_km * 1000.0
    cols, rows, x0, y0 = _square_origin(frame, size)
    cells = []
    for i in range(cols):
        for j in range(rows):
            x, y = x0 + i * size, y0 + j * size
            cell = box(x, y, x + size, y + size)
            if frame.fits(cell):
                cells.append(frame.to_wgs84(cell))
    return cells


def triangle_grid(bounds: geometry.Bounds, cell_km: float) -> List[Polygon]:
    """Each square cell split in two triangles, diagonals alternating."""
    frame = _Frame(bounds)
    size = cell_km * 1000.0
    cols, rows, x0, y0 = _square_origin(frame, size)
    cells = []
    for i in range(cols):
        for j in range(rows):
            x, y = x0 + i * size, y0 + j * size
            sw, se, ne, nw = (x, y), (x + size, y), (x + size, y + size), (x, y + size)
            if (i + j) % 2 == 0:
                pair = (Polygon([sw, se, nw]), Polygon([se, ne, nw]))
            else:
                pair = (Polygon([sw, se, ne]), Polygon([sw, ne, nw]))
            for triangle in pair:
                if frame.fits(triangle):
                    cells.append(frame.to_wgs84(triangle))
    return cells


def _hexagon(cx: float, cy: float, side: float) -> Polygon:
    angles = np.radians(np.arange(0, 360, 60))
    return Polygon(np.column_stack([cx + side * np.cos(angles), cy + side * np.sin(angles)]).tolist())


def _hex_cells(frame: _Frame, side: float) -> List[Polygon]:
    """Flat-topped hexagons in projected metres."""
    hex_w = 2.0 * side
    hex_h = math.sqrt(3.0) * side
    if frame.width < hex_w or frame.height < hex_h:
        return []
    cols = int(math.floor((frame.width - hex_w) / (1.5 * side))) + 1
    rows = int(math.floor(frame.height / hex_h))
    used_w = (cols - 1) * 1.5 * side + hex_w
    x0 = frame.minx + (frame.width - used_w) / 2.0 + side
    y0 = frame.miny + (frame.height - rows * hex_h) / 2.0 + hex_h / 2.0

    cells = []
    for i in range(cols):
        shift = hex_h / 2.0 if i % 2 else 0.0
        for j in range(rows):
            cell = _hexagon(x0 + i * 1.5 * side, y0 + j * hex_h + shift, side)
            if frame.fits(cell):
                cells.append(cell)
    return cells


def hex_grid(bounds: geometry.Bounds, cell_km: float) -> List[Polygon]:
    """Hexagons with sides of ``cell_km``."""
    frame = _Frame(bounds)
    return [frame.to_wgs84(cell) for cell in _hex_cells(frame, cell_km * 1000.0)]


def idw(samples: np.ndarray, values: np.ndarray, targets: np.ndarray, weight: float = 1.0) -> np.ndarray:
    """
    Inverse distance weighted estimate at each target.

    Args:
        samples: (n, 2) sample coordinates
        values: (n,) sample values
        targets: (m, 2) coordinates to estimate at
        weight: Distance decay exponent

    Returns:
        (m,) estimates; a target on a sample takes that sample's value
    """
    samples = np.asarray(samples, dtype=float).reshape(-1, 2)
    values = np.asarray(values, dtype=float)
    targets = np.asarray(targets, dtype=float).reshape(-1, 2)
    if len(samples) == 0:
        return np.full(len(targets), np.nan)

    dist = np.hypot(
        targets[:, None, 0] - samples[None, :, 0],
        targets[:, None, 1] - samples[None, :, 1],
    )
    exact = dist == 0
    with np.errstate(divide="ignore"):
        weights = 1.0 / dist ** weight
    weights[exact] = 0.0
    estimates = (weights * values).sum(axis=1) / weights.sum(axis=1)

    hit_rows = exact.any(axis=1)
    if hit_rows.any():
        estimates[hit_rows] = values[exact[hit_rows].argmax(axis=1)]
    return estimates


def _sample_arrays(frame: _Frame, points: Sequence[Point]) -> np.ndarray:
    xs, ys = frame.projection.forward_xy([p.x for p in points], [p.y for p in points])
    return np.column_stack([xs, ys])


def interpolate_hex(
    points: Sequence[Point],
    values: Sequence[float],
    bounds: geometry.Bounds,
    cell_km: float,
    weight: float = 1.0,
) -> List[Tuple[Polygon, float]]:
    """Hex grid over ``bounds`` with an IDW estimate for every cell centre."""
    frame = _Frame(bounds)
    cells = _hex_cells(frame, cell_km * 1000.0)
    if not cells or not points:
        return []
    centres = np.array([[c.centroid.x, c.centroid.y] for c in cells])
    estimates = idw(_sample_arrays(frame, points), np.asarray(values, dtype=float), centres, weight)
    return [(frame.to_wgs84(cell), float(value)) for cell, value in zip(cells, estimates)]


def _rings_to_polygons(points: np.ndarray, offsets: np.ndarray) -> List[Polygon]:
    rings = [points[offsets[k]:offsets[k + 1]] for k in range(len(offsets) - 1)]
    rings = [ring for ring in rings if len(ring) >= 4]
    if not rings:
        return []
    polygon = Polygon(rings[0].tolist(), [ring.tolist() for ring in rings[1:]])
    return [] if polygon.is_empty else [polygon]


def isobands(
    points: Sequence[Point],
    values: Sequence[float],
    bounds: geometry.Bounds,
    breaks: Sequence[float],
    cell_km: float = 0.05,
    weight: float = 1.0,
) -> List[Band]:
    """
    Filled contour bands of an IDW surface between consecutive breaks.

    Bands with no area are omitted.
    """
    frame = _Frame(bounds)
    step = cell_km * 1000.0
    if not points or len(breaks) < 2 or frame.width < step or frame.height < step:
        return []

    xs = np.arange(frame.minx, frame.maxx + step / 2.0, step)
    ys = np.arange(frame.miny, frame.maxy + step / 2.0, step)
    gx, gy = np.meshgrid(xs, ys)
    z = idw(
        _sample_arrays(frame, points),
        np.asarray(values, dtype=float),
        np.column_stack([gx.ravel(), gy.ravel()]),
        weight,
    ).reshape(gx.shape)
    logger.debug("Interpolated lattice", cols=len(xs), rows=len(ys))

    generator = contour_generator(gx, gy, z, fill_type=FillType.OuterOffset)
    bands: List[Band] = []
    for index, (lower, upper) in enumerate(zip(breaks[:-1], breaks[1:])):
        polygon_points, polygon_offsets = generator.filled(lower, upper)
        polygons: List[Polygon] = []
        for pts, offs in zip(polygon_points, polygon_offsets):
            polygons.extend(_rings_to_polygons(pts, offs))
        if not polygons:
            continue
        merged = MultiPolygon([frame.to_wgs84(p) for p in polygons])
        bands.append(Band(index=index, lower=float(lower), upper=float(upper), geometry=merged))
    return bands
