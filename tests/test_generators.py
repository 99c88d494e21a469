"""Tests for shape and random generators."""

import numpy as np
import pytest
from shapely.geometry import Point, box

from py_geolab.core import generators, geometry

CENTER = Point(-74.0, 40.71)
BOUNDS = (-74.02, 40.70, -73.98, 40.72)


class TestSector:
    """Test circular sectors."""

    def test_quarter_circle(self):
        sector = generators.sector(CENTER, 1.0, 0, 90)
        assert geometry.area(sector) == pytest.approx(np.pi / 4 * 1e6, rel=1e-2)
        assert sector.contains(geometry.destination(CENTER, 0.5, 45))
        assert not sector.contains(geometry.destination(CENTER, 0.5, 180))

    def test_wraps_through_north(self):
        sector = generators.sector(CENTER, 1.0, 270, 90)
        assert geometry.area(sector) == pytest.approx(np.pi / 2 * 1e6, rel=1e-2)
        assert sector.contains(geometry.destination(CENTER, 0.5, 0))

    def test_equal_bearings_keep_area(self):
        sector = generators.sector(CENTER, 1.0, 30, 30)
        assert sector.is_valid
        assert geometry.area(sector) > 0

    def test_arc_on_radius(self):
        sector = generators.sector(CENTER, 2.0, 10, 80)
        arc = list(sector.exterior.coords)[1:-2]
        for coord in arc:
            assert geometry.distance(CENTER, coord) == pytest.approx(2.0, rel=1e-6)


class TestEllipse:
    """Test ellipses."""

    def test_area(self):
        ellipse = generators.ellipse(CENTER, 1.0, 0.5)
        assert geometry.area(ellipse) == pytest.approx(np.pi * 0.5 * 1e6, rel=1e-2)

    def test_axes(self):
        ellipse = generators.ellipse(CENTER, 1.0, 0.5)
        minx, miny, maxx, maxy = ellipse.bounds
        assert geometry.distance((minx, CENTER.y), (maxx, CENTER.y)) == pytest.approx(2.0, rel=1e-2)
        assert geometry.distance((CENTER.x, miny), (CENTER.x, maxy)) == pytest.approx(1.0, rel=1e-2)


class TestRandom:
    """Test random feature generation."""

    def test_points_inside_bounds(self):
        points = generators.random_points(50, BOUNDS, rng=np.random.default_rng(1))
        assert len(points) == 50
        assert all(box(*BOUNDS).covers(p) for p in points)

    def test_points_reproducible(self):
        first = generators.random_points(5, BOUNDS, rng=np.random.default_rng(3))
        second = generators.random_points(5, BOUNDS, rng=np.random.default_rng(3))
        assert [p.coords[0] for p in first] == [p.coords[0] for p in second]

    def test_lines(self):
        lines = generators.random_lines(10, BOUNDS, rng=np.random.default_rng(2))
        assert len(lines) == 10
        for line in lines:
            coords = np.asarray(line.coords)
            assert len(coords) == 10
            steps = np.hypot(*np.diff(coords, axis=0).T)
            assert (steps <= 0.01 + 1e-12).all()
            assert box(*BOUNDS).covers(Point(coords[0]))

    def test_polygons(self):
        polygons = generators.random_polygons(10, BOUNDS, rng=np.random.default_rng(4))
        assert len(polygons) == 10
        for polygon in polygons:
            assert polygon.is_valid
            assert len(polygon.exterior.coords) == 11
            assert box(*geometry.pad_bounds(BOUNDS, 0.001)).covers(polygon)

    def test_default_generator(self, seeded):
        assert len(generators.random_points(3, BOUNDS)) == 3
