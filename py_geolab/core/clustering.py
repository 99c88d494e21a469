"""
Point-set partitioning: Voronoi cells, Delaunay triangles, k-means and
DBSCAN clustering.

Clustering runs on coordinates projected to metres so that ``eps`` and
cluster compactness are metric rather than degree based.
"""

from typing import List, NamedTuple, Optional, Sequence, Tuple

import numpy as np
import structlog
from scipy.spatial import Delaunay, QhullError, Voronoi
from shapely.geometry import MultiPoint, Point, Polygon, box
from sklearn.cluster import DBSCAN, KMeans

from . import geometry

logger = structlog.get_logger()


class KMeansResult(NamedTuple):
    labels: np.ndarray
    k: int


class DbscanResult(NamedTuple):
    labels: np.ndarray  # -1 marks noise
    core: np.ndarray    # True for core samples

    @property
    def cluster_count(self) -> int:
        return len(set(self.labels[self.labels >= 0].tolist()))

    @property
    def noise_count(self) -> int:
        return int((self.labels < 0).sum())


def _coords(points: Sequence[Point]) -> np.ndarray:
    return np.array([[p.x, p.y] for p in points], dtype=float).reshape(-1, 2)


def _projected_coords(points: Sequence[Point]) -> np.ndarray:
    coords = _coords(points)
    projection = geometry.local_projection(geometry.bounds_of(points))
    xs, ys = projection.forward_xy(coords[:, 0], coords[:, 1])
    return np.column_stack([xs, ys])


def voronoi_cells(points: Sequence[Point], bounds: geometry.Bounds) -> List[Optional[Polygon]]:
    """
    Voronoi cell of every point, clipped to ``bounds``.

    The points are mirrored across the four sides of the box so that every
    original cell is finite and ends exactly on the box edge. Coincident
    points share one cell.

    Args:
        points: Generator points, all inside ``bounds``
        bounds: Clip box (minx, miny, maxx, maxy)

    Returns:
        One polygon per input point, in input order (None if degenerate)
    """
    if not points:
        return []
    coords = _coords(points)
    unique, inverse = np.unique(coords, axis=0, return_inverse=True)
    inverse = np.asarray(inverse).reshape(-1)

    minx, miny, maxx, maxy = bounds
    mirrored = np.vstack([
        unique,
        np.column_stack([2 * minx - unique[:, 0], unique[:, 1]]),
        np.column_stack([2 * maxx - unique[:, 0], unique[:, 1]]),
        np.column_stack([unique[:, 0], 2 * miny - unique[:, 1]]),
        np.column_stack([unique[:, 0], 2 * maxy - unique[:, 1]]),
    ])

    try:
        vor = Voronoi(mirrored)
    except QhullError as e:
        logger.warning("Voronoi diagram failed", points=len(unique), error=str(e))
        return [None] * len(points)

    clip = box(*bounds)
    cells: List[Optional[Polygon]] = []
    for i in range(len(unique)):
        region = vor.regions[vor.point_region[i]]
        if not region or -1 in region:
            cells.append(None)
            continue
        cell = MultiPoint(vor.vertices[region].tolist()).convex_hull.intersection(clip)
        cells.append(cell if isinstance(cell, Polygon) and not cell.is_empty else None)

    return [cells[index] for index in inverse]


def delaunay_triangles(points: Sequence[Point]) -> List[Polygon]:
    """Delaunay triangulation of the distinct points, empty when degenerate."""
    unique = np.unique(_coords(points), axis=0)
    if len(unique) < 3:
        return []
    try:
        tri = Delaunay(unique)
    except QhullError as e:
        logger.warning("Triangulation failed", points=len(unique), error=str(e))
        return []
    return [Polygon(unique[simplex].tolist()) for simplex in tri.simplices]


def kmeans(points: Sequence[Point], k: int, random_state: int = 0) -> KMeansResult:
    """
    Partition points into ``k`` clusters.

    ``k`` is clamped to the number of distinct points, so every returned
    cluster index in ``[0, k)`` is used.
    """
    if not points:
        return KMeansResult(labels=np.array([], dtype=int), k=0)
    coords = _projected_coords(points)
    k = max(1, min(k, len(np.unique(coords, axis=0))))
    model = KMeans(n_clusters=k, n_init=10, random_state=random_state).fit(coords)
    return KMeansResult(labels=model.labels_.astype(int), k=k)


def dbscan(points: Sequence[Point], max_distance_km: float, min_points: int) -> DbscanResult:
    """
    Density clustering with a neighbourhood radius in kilometres.

    A point is core when at least ``min_points`` points, itself included,
    lie within ``max_distance_km``.
    """
    if not points:
        return DbscanResult(labels=np.array([], dtype=int), core=np.array([], dtype=bool))
    coords = _projected_coords(points)
    model = DBSCAN(eps=max_distance_km * 1000.0, min_samples=min_points).fit(coords)
    core = np.zeros(len(coords), dtype=bool)
    core[model.core_sample_indices_] = True
    return DbscanResult(labels=model.labels_.astype(int), core=core)
