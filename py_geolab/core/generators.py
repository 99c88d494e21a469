"""
Shape and random feature generators.
"""

import math
from typing import List, Optional

import numpy as np
from shapely.geometry import LineString, Point, Polygon

from ..utils.random import get_rng
from . import geometry

ARC_STEPS = 64


def sector(center: Point, radius_km: float, bearing1: float, bearing2: float, steps: int = ARC_STEPS) -> Polygon:
    """
    Circular sector swept clockwise from ``bearing1`` to ``bearing2``.

    Equal bearings are widened by 0.1 degrees so the sector keeps an area.
    """
    if bearing1 == bearing2:
        bearing2 = bearing1 + 0.1
    start = bearing1 % 360.0
    end = bearing2 % 360.0
    if end <= start:
        end += 360.0

    arc = [
        geometry.destination(center, radius_km, start + (end - start) * k / steps)
        for k in range(steps + 1)
    ]
    coords = [(center.x, center.y)] + [(p.x, p.y) for p in arc] + [(center.x, center.y)]
    return Polygon(coords)


def ellipse(center: Point, x_semi_axis_km: float, y_semi_axis_km: float, steps: int = ARC_STEPS) -> Polygon:
    """Ellipse with its x axis along the parallel through ``center``."""
    projection = geometry.local_projection((center.x, center.y))
    origin = projection.forward(center)
    t = np.linspace(0.0, 2.0 * math.pi, steps, endpoint=False)
    xs = origin.x + x_semi_axis_km * 1000.0 * np.cos(t)
    ys = origin.y + y_semi_axis_km * 1000.0 * np.sin(t)
    lons, lats = projection.inverse_xy(xs, ys)
    return Polygon(np.column_stack([lons, lats]).tolist())


def _random_position(bounds: geometry.Bounds, rng: np.random.Generator) -> np.ndarray:
    minx, miny, maxx, maxy = bounds
    return np.array([rng.uniform(minx, maxx), rng.uniform(miny, maxy)])


def random_points(count: int, bounds: geometry.Bounds, rng: Optional[np.random.Generator] = None) -> List[Point]:
    rng = rng or get_rng()
    return [Point(*_random_position(bounds, rng)) for _ in range(count)]


def random_lines(
    count: int,
    bounds: geometry.Bounds,
    num_vertices: int = 10,
    max_length: float = 0.01,
    max_rotation: float = math.pi / 8,
    rng: Optional[np.random.Generator] = None,
) -> List[LineString]:
    """
    Random walks starting inside ``bounds``.

    Each step is at most ``max_length`` degrees long and turns by at most
    ``max_rotation`` radians from the previous heading.
    """
    rng = rng or get_rng()
    lines = []
    for _ in range(count):
        vertices = [_random_position(bounds, rng)]
        heading = rng.uniform(0.0, 2.0 * math.pi)
        for _ in range(num_vertices - 1):
            heading += rng.uniform(-max_rotation, max_rotation)
            step = rng.uniform(0.0, max_length)
            vertices.append(vertices[-1] + step * np.array([math.cos(heading), math.sin(heading)]))
        lines.append(LineString(np.array(vertices).tolist()))
    return lines


def random_polygons(
    count: int,
    bounds: geometry.Bounds,
    num_vertices: int = 10,
    max_radial_length: float = 0.001,
    rng: Optional[np.random.Generator] = None,
) -> List[Polygon]:
    """Star-shaped polygons around random centres inside ``bounds``."""
    rng = rng or get_rng()
    polygons = []
    for _ in range(count):
        center = _random_position(bounds, rng)
        angles = np.cumsum(rng.uniform(0.0, 1.0, num_vertices + 1))
        angles = angles[:-1] / angles[-1] * 2.0 * math.pi
        radii = rng.uniform(0.1, 1.0, num_vertices) * max_radial_length
        xs = center[0] + radii * np.sin(angles)
        ys = center[1] + radii * np.cos(angles)
        polygons.append(Polygon(np.column_stack([xs, ys]).tolist()))
    return polygons
