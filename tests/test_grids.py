"""Tests for grids and interpolation."""

import numpy as np
import pytest
from shapely.geometry import MultiPolygon, Point, box

from py_geolab.core import geometry, grids

BOUNDS = (-74.02, 40.70, -74.00, 40.72)


def _inside(geom, bounds=BOUNDS):
    return box(*bounds).buffer(1e-9).covers(geom)


class TestRegularGrids:
    """Test the four tessellations."""

    def test_point_grid_spacing(self):
        points = grids.point_grid(BOUNDS, 0.5)
        assert len(points) > 4
        assert all(_inside(p) for p in points)
        spacing = min(geometry.distance(points[0], p) for p in points[1:])
        assert spacing == pytest.approx(0.5, rel=1e-2)

    def test_square_cells(self):
        cells = grids.square_grid(BOUNDS, 0.5)
        assert cells
        for cell in cells:
            assert _inside(cell)
            assert geometry.area(cell) == pytest.approx(250000, rel=1e-2)

    def test_triangle_cells(self):
        cells = grids.triangle_grid(BOUNDS, 0.5)
        assert cells
        for cell in cells:
            assert len(cell.exterior.coords) == 4
            assert geometry.area(cell) == pytest.approx(125000, rel=1e-2)

    def test_hex_cells(self):
        cells = grids.hex_grid(BOUNDS, 0.5)
        assert cells
        for cell in cells:
            assert _inside(cell)
            assert geometry.area(cell) == pytest.approx(649519, rel=1e-2)

    def test_hex_cells_do_not_overlap(self):
        cells = grids.hex_grid(BOUNDS, 0.3)
        merged = geometry.union_all(cells)
        assert geometry.area(merged) == pytest.approx(sum(geometry.area(c) for c in cells), rel=1e-3)

    def test_box_smaller_than_cell(self):
        assert grids.hex_grid(BOUNDS, 50.0) == []
        assert grids.square_grid(BOUNDS, 50.0) == []


class TestIdw:
    """Test inverse distance weighting."""

    def test_exact_hit_and_midpoint(self):
        estimates = grids.idw([[0, 0], [2, 0]], [0, 10], [[1, 0], [0, 0]])
        assert estimates.tolist() == pytest.approx([5.0, 0.0])

    def test_weight_exponent(self):
        samples, values, target = [[0, 0], [2, 0]], [0, 10], [[0.5, 0]]
        assert grids.idw(samples, values, target, 1.0)[0] == pytest.approx(2.5)
        assert grids.idw(samples, values, target, 2.0)[0] == pytest.approx(1.0)

    def test_no_samples(self):
        assert np.isnan(grids.idw(np.empty((0, 2)), [], [[0, 0]])).all()

    def test_interpolate_hex_constant_surface(self):
        points = [Point(-74.015, 40.705), Point(-74.005, 40.715)]
        cells = grids.interpolate_hex(points, [7, 7], BOUNDS, 0.3)
        assert cells
        assert all(value == pytest.approx(7.0) for _, value in cells)


class TestIsobands:
    """Test filled contour bands."""

    def test_constant_surface_is_one_band(self):
        points = [Point(-74.015, 40.705), Point(-74.005, 40.715)]
        bands = grids.isobands(points, [10, 10], BOUNDS, [0, 50, 100])
        assert len(bands) == 1
        band = bands[0]
        assert band.index == 0
        assert (band.lower, band.upper) == (0, 50)
        assert isinstance(band.geometry, MultiPolygon)
        assert band.geometry.area == pytest.approx(box(*BOUNDS).area, rel=5e-2)

    def test_gradient_fills_both_bands(self):
        points = [Point(-74.0195, 40.71), Point(-74.0005, 40.71)]
        bands = grids.isobands(points, [0, 100], BOUNDS, [0, 50, 101])
        assert [band.index for band in bands] == [0, 1]
        assert bands[0].geometry.centroid.x < bands[1].geometry.centroid.x

    def test_needs_two_breaks(self):
        assert grids.isobands([Point(-74.01, 40.71)], [1], BOUNDS, [0]) == []

    def test_no_points(self):
        assert grids.isobands([], [], BOUNDS, [0, 1]) == []
