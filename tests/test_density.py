"""Tests for the density and grid tools."""

import math

import pytest
from shapely.geometry import MultiPolygon, Point, Polygon

from py_geolab.config import messages
from py_geolab.core.features import Feature, FeatureCollection
from py_geolab.core.handlers.density import IDW_COLORS, REVENUE_CEILING


def _revenues(points):
    return [f.properties["revenue"] for f in points]


class TestHexbin:
    """Test the HEXBIN tool."""

    def test_counts_every_point_once(self, run, points):
        result = run("HEXBIN")
        assert sum(f.hints.count for f in result.features) == len(points)
        assert all(f.hints.count > 0 for f in result.features)
        assert all(f.hints.label == str(f.hints.count) for f in result.features)

    def test_smaller_cells(self, run):
        coarse = run("HEXBIN", {"cellSide": 0.5}).stats["Hücre (Cells)"]
        fine = run("HEXBIN", {"cellSide": 0.1}).stats["Hücre (Cells)"]
        assert fine > coarse

    def test_no_points(self, run):
        assert run("HEXBIN", points=FeatureCollection()).message == messages.SAMPLE_MISSING


class TestIsobands:
    """Test the ISOBANDS tool."""

    def test_bands(self, run):
        result = run("ISOBANDS")
        breaks = [i * REVENUE_CEILING / 5 for i in range(5)]
        assert result.features
        assert result.stats["Seviye (Bands)"] == len(result.features)
        ranges = [f"{lo:g}-{hi:g}" for lo, hi in zip(breaks[:-1], breaks[1:])]
        for i, feature in enumerate(result.features):
            assert isinstance(feature.geometry, MultiPolygon)
            assert feature.hints.count == i
            assert feature.hints.label == f"Seviye {i + 1}"
            assert feature.properties["revenue"] in ranges
        emitted = [ranges.index(f.properties["revenue"]) for f in result.features]
        assert emitted == sorted(emitted)

    def test_two_breaks(self, run):
        result = run("ISOBANDS", {"breaks": 2})
        assert [f.properties["revenue"] for f in result.features] == ["0-2500"]

    def test_numbering_skips_empty_bands(self, run):
        points = FeatureCollection.of([
            Feature.create(Point(-74.02, 40.70), {"id": 1, "revenue": 3200}),
            Feature.create(Point(-73.98, 40.70), {"id": 2, "revenue": 4500}),
            Feature.create(Point(-74.00, 40.73), {"id": 3, "revenue": 3600}),
        ])
        result = run("ISOBANDS", points=points)
        assert [f.properties["revenue"] for f in result.features] == ["3000-4000"]
        assert result.features[0].hints.count == 0
        assert result.features[0].hints.label == "Seviye 1"

    def test_points_without_revenue(self, run):
        points = FeatureCollection.of([Feature.create(Point(-74.0, 40.7), {"id": 1})])
        result = run("ISOBANDS", points=points)
        assert result.geojson is None
        assert result.message == messages.SAMPLE_MISSING


class TestIdw:
    """Test the IDW tool."""

    def test_estimates_within_sample_range(self, run, points):
        revenues = _revenues(points)
        result = run("IDW")
        assert result.features
        for feature in result.features:
            value = feature.properties["revenue"]
            assert min(revenues) - 1e-6 <= value <= max(revenues) + 1e-6

    def test_colour_follows_value(self, run):
        for feature in run("IDW").features:
            value = feature.properties["revenue"]
            index = max(0, min(4, int(math.floor(value / REVENUE_CEILING * 5))))
            assert feature.hints.fill == IDW_COLORS[index]
            assert feature.hints.stroke == IDW_COLORS[index]

    def test_finer_cells(self, run):
        coarse = len(run("IDW", {"cellSize": 0.3}).features)
        fine = len(run("IDW", {"cellSize": 0.1}).features)
        assert fine > coarse


class TestRegularGrids:
    """Test the four grid tools."""

    @pytest.mark.parametrize("tool,kind", [
        ("POINT_GRID", Point),
        ("SQUARE_GRID", Polygon),
        ("TRIANGLE_GRID", Polygon),
        ("HEX_GRID", Polygon),
    ])
    def test_geometry_type(self, run, tool, kind):
        result = run(tool)
        assert result.features
        assert all(isinstance(f.geometry, kind) for f in result.features)
        assert result.stats["Hücre (Cells)"] == len(result.features)

    def test_cell_size(self, run):
        coarse = len(run("SQUARE_GRID", {"cellSize": 1.0}).features)
        fine = len(run("SQUARE_GRID", {"cellSize": 0.5}).features)
        assert fine > coarse

    def test_no_polygons(self, run):
        result = run("HEX_GRID", polygons=FeatureCollection())
        assert result.geojson is None
