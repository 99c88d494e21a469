"""
Sample datasets the sandbox analyses.

Three fixed collections around lower Manhattan: named polygons, store and
service points, and roads/paths. The store points and the high detail
line carry random jitter drawn from a generator seeded with
``settings.sample_seed``, so repeated calls return identical data.
"""

from functools import lru_cache
from typing import NamedTuple, Optional

import numpy as np
from shapely.geometry import LineString, Point, Polygon

from ..config.settings import settings
from .features import Feature, FeatureCollection

CITY_RING = [
    (-74.02, 40.70),
    (-74.00, 40.70),
    (-73.99, 40.71),
    (-73.99, 40.73),
    (-74.01, 40.735),
    (-74.025, 40.72),
    (-74.02, 40.70),
]

SNAP_TEST_COORDS = [
    (-74.03, 40.722),  # near highway start
    (-74.01, 40.718),  # below highway
    (-73.99, 40.723),  # above highway
    (-73.97, 40.719),  # near highway end
    (-74.02, 40.721),
]


class SampleDatasets(NamedTuple):
    points: FeatureCollection
    polygons: FeatureCollection
    lines: FeatureCollection


def _rng(seed: Optional[int]) -> np.random.Generator:
    return np.random.default_rng(settings.sample_seed if seed is None else seed)


def _polygon(feature_id, name, ring, **properties) -> Feature:
    return Feature(geometry=Polygon(ring), properties={"id": feature_id, "name": name, **properties})


def sample_polygons() -> FeatureCollection:
    """
    Named polygons used by the set operation and topology demos.

    Districts 601 and 602 overlap along a 0.005 degree strip; polygon 99 is
    an exact copy of the city.
    """
    return FeatureCollection.of([
        _polygon(1, "Şehir Merkezi (City)", CITY_RING, type="Kentsel", population=50000),
        _polygon(
            2, "Yeşil Park (Park)",
            [(-74.005, 40.715), (-73.98, 40.715), (-73.98, 40.74), (-74.005, 40.74), (-74.005, 40.715)],
            type="Park", population=0,
        ),
        _polygon(
            3, "Sanayi Bölgesi (Ind. Zone)",
            [(-74.02, 40.70), (-74.025, 40.72), (-74.04, 40.72), (-74.04, 40.70), (-74.02, 40.70)],
            type="Sanayi", population=500,
        ),
        _polygon(
            4, "Uzak Ada (Remote Is.)",
            [(-74.04, 40.74), (-74.03, 40.74), (-74.03, 40.75), (-74.04, 40.75), (-74.04, 40.74)],
            type="Ada", population=100,
        ),
        _polygon(
            777, "Girintili Kıyı (Rough Coast)",
            [
                (-73.97, 40.75),
                (-73.968, 40.752), (-73.966, 40.751), (-73.965, 40.753),
                (-73.963, 40.752), (-73.962, 40.755), (-73.960, 40.753),
                (-73.958, 40.756), (-73.955, 40.754), (-73.952, 40.758),
                (-73.95, 40.75),
                (-73.96, 40.745), (-73.965, 40.748),
                (-73.97, 40.75),
            ],
            type="Doğal",
        ),
        _polygon(99, "Hayalet Katman (Ghost Layer)", CITY_RING, type="Kopya", population=50000),
        _polygon(
            500, "Kırpma Maskesi (Clip Mask)",
            [(-74.03, 40.71), (-74.01, 40.71), (-74.01, 40.73), (-74.03, 40.73), (-74.03, 40.71)],
            type="Maske",
        ),
        _polygon(
            601, "Bölge A (District A)",
            [(-73.98, 40.70), (-73.96, 40.70), (-73.96, 40.71), (-73.98, 40.71), (-73.98, 40.70)],
            type="Konut",
        ),
        _polygon(
            602, "Bölge B (District B)",
            [(-73.98, 40.705), (-73.96, 40.705), (-73.96, 40.715), (-73.98, 40.715), (-73.98, 40.705)],
            type="Konut",
        ),
    ])


def sample_points(seed: Optional[int] = None) -> FeatureCollection:
    """
    Store, office and bus stop points.

    Args:
        seed: Jitter seed, defaults to settings.sample_seed

    Returns:
        40 stores (ids 0-39), the central office (900), five points near
        the highway (800-804) and ten bus stops on a meridian (100-109)
    """
    rng = _rng(seed)
    features = []

    for i in range(40):
        lon = -74.02 + rng.random() * 0.025
        lat = 40.70 + rng.random() * 0.03
        features.append(Feature(
            geometry=Point(lon, lat),
            properties={"id": i, "type": "Mağaza", "revenue": int(rng.integers(0, 5000))},
        ))

    features.append(Feature(
        geometry=Point(-74.01, 40.71),
        properties={"id": 900, "type": "Merkez Ofis", "revenue": 5000},
    ))

    for idx, (lon, lat) in enumerate(SNAP_TEST_COORDS):
        features.append(Feature(
            geometry=Point(lon, lat),
            properties={"id": 800 + idx, "type": "Dağınık", "revenue": 1000},
        ))

    for i in range(10):
        features.append(Feature(
            geometry=Point(-74.005, 40.70 + i * 0.005),
            properties={"id": 100 + i, "type": "Otobüs Durağı", "revenue": 500 + rng.random() * 500},
        ))

    return FeatureCollection.of(features)


def _noisy_line(rng: np.random.Generator) -> LineString:
    i = np.arange(101)
    xs = -74.03 + i * 0.0006
    ys = 40.73 + np.sin(i * 0.3) * 0.003 + (rng.random(len(i)) - 0.5) * 0.001
    return LineString(np.column_stack([xs, ys]).tolist())


def sample_lines(seed: Optional[int] = None) -> FeatureCollection:
    """Highway, river, park path, a 101 vertex noisy line, a closed fence and a zigzag."""
    rng = _rng(seed)
    return FeatureCollection.of([
        Feature(
            geometry=LineString([(-74.04, 40.72), (-73.96, 40.72)]),
            properties={"id": "Hwy1", "name": "Ana Otoban (Highway)", "traffic": "Yüksek"},
        ),
        Feature(
            geometry=LineString([(-74.01, 40.75), (-74.01, 40.69)]),
            properties={"id": "River1", "name": "Nehir (River)", "traffic": "Yok"},
        ),
        Feature(
            geometry=LineString([(-74.005, 40.74), (-73.98, 40.715)]),
            properties={"id": "Path1", "name": "Park Yolu (Path)", "traffic": "Düşük"},
        ),
        Feature(
            geometry=_noisy_line(rng),
            properties={"id": "HighResLine", "name": "Yüksek Detaylı Sinyal (High Detail)", "traffic": "Test"},
        ),
        Feature(
            geometry=LineString([
                (-73.99, 40.69), (-73.98, 40.69), (-73.98, 40.698), (-73.99, 40.698), (-73.99, 40.69),
            ]),
            properties={"id": "SiteFence", "name": "İnşaat Çiti (Site Fence)", "traffic": "Kapalı"},
        ),
        Feature(
            geometry=LineString([
                (-74.03, 40.73), (-74.02, 40.74), (-74.01, 40.73), (-74.00, 40.74), (-73.99, 40.73),
            ]),
            properties={"id": "JaggedPath", "name": "Zikzak Yol (ZigZag Path)", "traffic": "Orta"},
        ),
    ])


@lru_cache(maxsize=1)
def sample_datasets() -> SampleDatasets:
    """The three base collections, built once per process."""
    return SampleDatasets(points=sample_points(), polygons=sample_polygons(), lines=sample_lines())
