"""Tests for geometry primitives."""

import math
import warnings

import pytest
from shapely.geometry import LineString, MultiLineString, Point, Polygon, box

from py_geolab.core import geometry


class TestMeasurement:
    """Test geodesic measurement helpers."""

    def test_distance_one_degree_on_equator(self):
        assert geometry.distance((0, 0), (1, 0)) == pytest.approx(111.32, rel=1e-3)

    def test_distance_accepts_points(self):
        assert geometry.distance(Point(0, 0), Point(0, 0)) == 0

    def test_bearing_cardinal_directions(self):
        assert geometry.bearing((0, 0), (0, 1)) == pytest.approx(0.0, abs=1e-6)
        assert geometry.bearing((0, 0), (1, 0)) == pytest.approx(90.0, abs=1e-6)
        assert geometry.bearing((0, 0), (-1, 0)) == pytest.approx(-90.0, abs=1e-6)

    def test_destination_round_trip(self):
        target = geometry.destination((10, 45), 10.0, 30.0)
        assert geometry.distance((10, 45), target) == pytest.approx(10.0, rel=1e-6)
        assert geometry.bearing((10, 45), target) == pytest.approx(30.0, abs=1e-6)

    def test_area_of_small_equatorial_box(self):
        assert geometry.area(box(0, 0, 0.01, 0.01)) == pytest.approx(1.2308e6, rel=1e-2)

    def test_area_ignores_orientation(self):
        ring = [(0, 0), (0, 0.01), (0.01, 0.01), (0.01, 0), (0, 0)]
        assert geometry.area(Polygon(ring)) == pytest.approx(geometry.area(box(0, 0, 0.01, 0.01)))

    def test_area_of_line_is_zero(self):
        assert geometry.area(LineString([(0, 0), (1, 1)])) == 0

    def test_length_in_km(self):
        assert geometry.length(LineString([(0, 0), (1, 0)])) == pytest.approx(111.32, rel=1e-3)

    def test_vertex_count(self):
        assert geometry.vertex_count(box(0, 0, 1, 1)) == 5


class TestBounds:
    """Test bounding box helpers."""

    def test_bounds_of(self):
        assert geometry.bounds_of([Point(1, 2), box(0, 0, 3, 1)]) == (0, 0, 3, 2)

    def test_bounds_of_empty(self):
        assert geometry.bounds_of([]) is None

    def test_pad_bounds(self):
        assert geometry.pad_bounds((0, 0, 1, 1), 0.5) == (-0.5, -0.5, 1.5, 1.5)


class TestLocalProjection:
    """Test the local metric frame."""

    def test_centre_maps_to_origin(self):
        projection = geometry.local_projection((-74.0, 40.7))
        origin = projection.forward(Point(-74.0, 40.7))
        assert origin.x == pytest.approx(0, abs=1e-6)
        assert origin.y == pytest.approx(0, abs=1e-6)

    def test_round_trip(self):
        projection = geometry.local_projection(box(-74.02, 40.70, -73.99, 40.73))
        point = Point(-74.01, 40.72)
        back = projection.inverse(projection.forward(point))
        assert back.x == pytest.approx(point.x, abs=1e-9)
        assert back.y == pytest.approx(point.y, abs=1e-9)

    def test_polygon_with_hole_keeps_structure(self):
        projection = geometry.local_projection((-74.0, 40.7))
        ring = box(-74.01, 40.69, -73.99, 40.71)
        holed = Polygon(ring.exterior.coords, [box(-74.005, 40.695, -73.995, 40.705).exterior.coords])
        with warnings.catch_warnings():
            warnings.simplefilter("error", DeprecationWarning)
            projected = projection.forward(holed)
            back = projection.inverse(projected)
        assert len(projected.interiors) == 1
        assert projected.area == pytest.approx(geometry.area(holed), rel=1e-2)
        assert back.equals_exact(holed, 1e-9)

    def test_cached_per_centre(self):
        assert geometry.local_projection((1.0, 2.0)) is geometry.local_projection((1.0, 2.0))


class TestBuffer:
    """Test kilometre buffers."""

    def test_point_buffer_area(self):
        buffered = geometry.buffer(Point(-74.0, 40.7), 1.0)
        assert geometry.area(buffered) == pytest.approx(math.pi * 1e6, rel=1e-2)

    def test_buffer_contains_source(self):
        polygon = box(-74.01, 40.70, -74.0, 40.71)
        assert geometry.buffer(polygon, 0.5).contains(polygon)


class TestSetOperations:
    """Test overlay operations and their degenerate results."""

    def test_intersect(self):
        result = geometry.intersect(box(0, 0, 2, 2), box(1, 1, 3, 3))
        assert result.equals(box(1, 1, 2, 2))

    def test_intersect_touching_is_none(self):
        assert geometry.intersect(box(0, 0, 1, 1), box(1, 0, 2, 1)) is None

    def test_intersect_disjoint_is_none(self):
        assert geometry.intersect(box(0, 0, 1, 1), box(5, 5, 6, 6)) is None

    def test_union(self):
        assert geometry.union(box(0, 0, 1, 1), box(1, 0, 2, 1)).area == pytest.approx(2.0)

    def test_difference_to_nothing(self):
        assert geometry.difference(box(1, 1, 2, 2), box(0, 0, 3, 3)) is None

    def test_difference(self):
        assert geometry.difference(box(0, 0, 2, 1), box(1, 0, 3, 1)).equals(box(0, 0, 1, 1))

    def test_union_all(self):
        merged = geometry.union_all([box(0, 0, 1, 1), box(1, 0, 2, 1), box(2, 0, 3, 1)])
        assert merged.area == pytest.approx(3.0)


class TestDissolve:
    """Test grouping by a key."""

    def test_groups_in_first_appearance_order(self):
        groups = geometry.dissolve(
            [box(0, 0, 1, 1), box(5, 5, 6, 6), box(1, 0, 2, 1)], ["b", "a", "b"]
        )
        assert [key for key, _ in groups] == ["b", "a"]
        assert groups[0][1].area == pytest.approx(2.0)

    def test_missing_key_forms_a_group(self):
        groups = geometry.dissolve([box(0, 0, 1, 1), box(3, 3, 4, 4)], ["a", None])
        assert len(groups) == 2
        assert groups[1][0] is None

    def test_empty(self):
        assert geometry.dissolve([], []) == []


class TestConvexHull:
    """Test hull construction."""

    def test_hull_of_points(self):
        hull = geometry.convex_hull([Point(0, 0), Point(1, 0), Point(0, 1), Point(0.2, 0.2)])
        assert hull.area == pytest.approx(0.5)

    def test_collinear_points_have_no_hull(self):
        assert geometry.convex_hull([Point(0, 0), Point(1, 1), Point(2, 2)]) is None

    def test_empty(self):
        assert geometry.convex_hull([]) is None


class TestConversion:
    """Test polygon and line conversion."""

    def test_polygon_to_lines(self):
        lines = geometry.polygon_to_lines(box(0, 0, 1, 1))
        assert len(lines) == 1
        assert isinstance(lines[0], LineString)
        assert lines[0].is_closed

    def test_polygon_with_hole(self):
        holed = Polygon(box(0, 0, 4, 4).exterior.coords, [box(1, 1, 2, 2).exterior.coords])
        lines = geometry.polygon_to_lines(holed)
        assert isinstance(lines[0], MultiLineString)
        assert len(lines[0].geoms) == 2

    def test_line_to_polygon_closes_open_line(self):
        polygon = geometry.line_to_polygon(LineString([(0, 0), (1, 0), (1, 1)]))
        assert polygon.area == pytest.approx(0.5)

    def test_line_to_polygon_closed_line(self):
        ring = LineString([(0, 0), (1, 0), (1, 1), (0, 1), (0, 0)])
        assert geometry.line_to_polygon(ring).equals(box(0, 0, 1, 1))

    def test_line_to_polygon_too_short(self):
        assert geometry.line_to_polygon(LineString([(0, 0), (1, 0), (0, 0)])) is None


class TestPredicates:
    """Test topological predicates."""

    def test_point_on_boundary_counts_as_inside(self):
        assert geometry.point_in_polygon(Point(0, 0.5), box(0, 0, 1, 1))
        assert not box(0, 0, 1, 1).contains(Point(0, 0.5))

    def test_touches(self):
        assert geometry.touches(box(0, 0, 1, 1), box(1, 0, 2, 1))
        assert not geometry.overlaps(box(0, 0, 1, 1), box(1, 0, 2, 1))

    def test_crosses(self):
        assert geometry.crosses(LineString([(-1, 0.5), (2, 0.5)]), box(0, 0, 1, 1))

    def test_equals_ignores_vertex_order(self):
        ring = [(0, 0), (0, 1), (1, 1), (1, 0), (0, 0)]
        assert geometry.equals(Polygon(ring), box(0, 0, 1, 1))

    def test_disjoint(self):
        assert geometry.disjoint(box(0, 0, 1, 1), box(2, 2, 3, 3))
        assert not geometry.intersects(box(0, 0, 1, 1), box(2, 2, 3, 3))


class TestPointQueries:
    """Test counting and nearest neighbour lookups."""

    def test_count_points_in_polygons(self):
        counts = geometry.count_points_in_polygons(
            [box(0, 0, 1, 1), box(2, 2, 3, 3), box(10, 10, 11, 11)],
            [Point(0.5, 0.5), Point(1, 1), Point(2.5, 2.5), Point(5, 5)],
        )
        assert counts == [2, 1, 0]

    def test_count_without_points(self):
        assert geometry.count_points_in_polygons([box(0, 0, 1, 1)], []) == [0]

    def test_nearest_point(self):
        index, km = geometry.nearest_point((0, 0), [Point(1, 0), Point(0.1, 0), Point(0, 2)])
        assert index == 1
        assert km == pytest.approx(11.132, rel=1e-3)

    def test_nearest_point_empty(self):
        assert geometry.nearest_point((0, 0), []) is None
