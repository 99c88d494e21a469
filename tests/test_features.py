"""Tests for the feature model and display hints."""

import pytest
from pydantic import ValidationError
from shapely.geometry import Point, box

from py_geolab.core.features import DisplayHints, Feature, FeatureCollection
from py_geolab.core.results import AnalysisResult


class TestDisplayHints:
    """Test the closed hint structure."""

    def test_unknown_hint_rejected(self):
        with pytest.raises(ValidationError):
            DisplayHints(label="x", opacity=0.5)

    def test_hints_are_frozen(self):
        hints = DisplayHints(label="x")
        with pytest.raises(ValidationError):
            hints.label = "y"

    def test_as_properties_drops_unset(self):
        assert DisplayHints(label="x", count=3).as_properties() == {"label": "x", "count": 3}


class TestFeature:
    """Test feature construction and copying."""

    def test_create_copies_properties(self):
        props = {"id": 1}
        feature = Feature.create(Point(0, 0), props, label="a")
        props["id"] = 2
        assert feature.id == 1
        assert feature.hints.label == "a"

    def test_create_without_hints(self):
        assert Feature.create(Point(0, 0)).hints is None

    def test_clone_does_not_share_properties(self):
        base = Feature(geometry=Point(0, 0), properties={"id": 7, "name": "n"})
        copy = base.clone(label="L")
        copy.properties["id"] = 8
        assert base.id == 7
        assert base.hints is None
        assert copy.hints.label == "L"

    def test_clone_merges_hints(self):
        feature = Feature.create(Point(0, 0), label="a", fill="#fff")
        merged = feature.clone(label="b")
        assert merged.hints.label == "b"
        assert merged.hints.fill == "#fff"
        assert feature.hints.label == "a"

    def test_hint_keys_win_in_geojson(self):
        feature = Feature.create(Point(1, 2), {"id": 1, "label": "old"}, label="new")
        data = feature.to_geojson()
        assert data["type"] == "Feature"
        assert data["properties"] == {"id": 1, "label": "new"}
        assert data["geometry"]["type"] == "Point"

    def test_from_geojson(self):
        feature = Feature.from_geojson({
            "type": "Feature",
            "properties": {"id": "x"},
            "geometry": {"type": "Point", "coordinates": [3.0, 4.0]},
        })
        assert feature.id == "x"
        assert feature.geometry.equals(Point(3, 4))


class TestFeatureCollection:
    """Test collection helpers."""

    @pytest.fixture
    def collection(self):
        return FeatureCollection.of([
            Feature(geometry=Point(0, 0), properties={"id": 1}),
            Feature(geometry=box(2, 2, 3, 5), properties={"id": 2}),
        ])

    def test_find(self, collection):
        assert collection.find(2).geometry.geom_type == "Polygon"
        assert collection.find(99) is None

    def test_len_iter_index(self, collection):
        assert len(collection) == 2
        assert [f.id for f in collection] == [1, 2]
        assert collection[0].id == 1

    def test_bounds(self, collection):
        assert collection.bounds == (0, 0, 3, 5)
        assert FeatureCollection().bounds is None

    def test_geojson(self, collection):
        data = collection.to_geojson()
        assert data["type"] == "FeatureCollection"
        assert len(data["features"]) == 2
        restored = FeatureCollection.from_geojson(data)
        assert [f.id for f in restored] == [1, 2]


class TestAnalysisResult:
    """Test result containers."""

    def test_failure_has_no_geometry(self):
        result = AnalysisResult.failure("nope")
        assert result.geojson is None
        assert result.to_geojson() is None
        assert result.features == []
        assert result.to_dict() == {"geoJSON": None, "metadata": {"message": "nope", "stats": {}}}

    def test_of(self):
        result = AnalysisResult.of([Feature.create(Point(0, 0))], "ok", {"n": 1})
        assert len(result.geojson) == 1
        assert result.message == "ok"
        assert result.stats == {"n": 1}
