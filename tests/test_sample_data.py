"""Tests for the sample datasets."""

from shapely.geometry import Point

from py_geolab.core import geometry
from py_geolab.core.sample_data import sample_datasets, sample_lines, sample_points, sample_polygons


class TestSamplePoints:
    """Test the point collection."""

    def test_ids(self, points):
        ids = [f.id for f in points]
        assert len(ids) == 56
        assert ids[:40] == list(range(40))
        assert ids[40] == 900
        assert ids[41:46] == [800, 801, 802, 803, 804]
        assert ids[46:] == list(range(100, 110))

    def test_office_location(self, points):
        assert points.find(900).geometry.equals(Point(-74.01, 40.71))

    def test_every_point_has_revenue(self, points):
        assert all(isinstance(f.properties["revenue"], (int, float)) for f in points)

    def test_bus_stops_on_meridian(self, points):
        stops = [points.find(100 + i) for i in range(10)]
        assert {f.geometry.x for f in stops} == {-74.005}

    def test_reproducible(self):
        first = [f.geometry.coords[0] for f in sample_points()]
        second = [f.geometry.coords[0] for f in sample_points()]
        assert first == second

    def test_seed_changes_jitter(self):
        first = sample_points(seed=1).find(0).geometry
        second = sample_points(seed=2).find(0).geometry
        assert not first.equals(second)


class TestSamplePolygons:
    """Test the polygon collection."""

    def test_ids(self, polygons):
        assert [f.id for f in polygons] == [1, 2, 3, 4, 777, 99, 500, 601, 602]

    def test_valid(self, polygons):
        assert all(f.geometry.is_valid for f in polygons)

    def test_ghost_layer_equals_city(self, polygons):
        assert polygons.find(99).geometry.equals(polygons.find(1).geometry)

    def test_districts_overlap(self, polygons):
        overlap = geometry.intersect(polygons.find(601).geometry, polygons.find(602).geometry)
        assert overlap is not None
        assert overlap.area > 0

    def test_rebuilt_collections_are_fresh(self):
        first, second = sample_polygons(), sample_polygons()
        first.find(1).properties["name"] = "changed"
        assert second.find(1).name == "Şehir Merkezi (City)"


class TestSampleLines:
    """Test the line collection."""

    def test_ids(self, lines):
        assert [f.id for f in lines] == [
            "Hwy1", "River1", "Path1", "HighResLine", "SiteFence", "JaggedPath"
        ]

    def test_high_detail_line(self, lines):
        assert geometry.vertex_count(lines.find("HighResLine").geometry) == 101

    def test_site_fence_is_closed(self, lines):
        assert lines.find("SiteFence").geometry.is_closed

    def test_reproducible(self):
        assert sample_lines().find("HighResLine").geometry.equals(
            sample_lines().find("HighResLine").geometry
        )


class TestSampleDatasets:
    """Test the cached bundle."""

    def test_cached(self):
        assert sample_datasets() is sample_datasets()
