"""Tests for the boolean topology tools."""

import pytest

from py_geolab.config import messages
from py_geolab.core.handlers.topology import CHECKS
from py_geolab.core.tools import ToolCategory, tools_in

from conftest import collection_without


class TestTopology:
    """Test the eight topology checks on the sample data."""

    def test_every_check_registered(self):
        assert set(CHECKS) == set(tools_in(ToolCategory.BOOLEAN_TOPOLOGY))

    @pytest.mark.parametrize("tool,expected", [
        ("BOOL_POINT_IN_POLY", True),
        ("BOOL_CONTAINS", False),
        ("BOOL_CROSSES", True),
        ("BOOL_DISJOINT", True),
        ("BOOL_OVERLAP", True),
        ("BOOL_EQUAL", True),
        ("BOOL_TOUCH", True),
        ("BOOL_INTERSECTS", True),
    ])
    def test_result(self, run, tool, expected):
        result = run(tool)
        assert result.stats["Sonuç (Result)"] == messages.boolean_text(expected)
        assert messages.boolean_sentence(expected) in result.message
        assert messages.WHY_HEADER in result.message

    @pytest.mark.parametrize("tool,ids", [
        ("BOOL_POINT_IN_POLY", [900, 1]),
        ("BOOL_CONTAINS", [1, 2]),
        ("BOOL_CROSSES", ["River1", 1]),
        ("BOOL_DISJOINT", [1, 4]),
        ("BOOL_EQUAL", [1, 99]),
        ("BOOL_TOUCH", [1, 3]),
        ("BOOL_INTERSECTS", ["Hwy1", 1]),
    ])
    def test_features_in_argument_order(self, run, tool, ids):
        assert [f.id for f in run(tool).features] == ids

    def test_labels_fall_back_to_id(self, run):
        office, city = run("BOOL_POINT_IN_POLY").features
        assert office.hints.label == "900"
        assert city.hints.label == "Şehir Merkezi (City)"

    def test_missing_feature(self, run, polygons):
        result = run("BOOL_EQUAL", polygons=collection_without(polygons, 99))
        assert result.geojson is None
        assert result.message == messages.SAMPLE_MISSING
