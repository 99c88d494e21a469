"""Shared fixtures: the sample collections and a runner bound to them."""

import pytest
from shapely.geometry import Point

from py_geolab.core.dispatcher import perform_analysis
from py_geolab.core.features import Feature, FeatureCollection
from py_geolab.core.sample_data import sample_datasets
from py_geolab.utils.random import set_random_seed


@pytest.fixture
def datasets():
    return sample_datasets()


@pytest.fixture
def points(datasets):
    return datasets.points


@pytest.fixture
def polygons(datasets):
    return datasets.polygons


@pytest.fixture
def lines(datasets):
    return datasets.lines


@pytest.fixture
def run(points, polygons, lines):
    """Run a tool against the sample data, overriding collections by keyword."""

    def _run(tool, params=None, **collections):
        return perform_analysis(
            tool,
            collections.get("points", points),
            collections.get("polygons", polygons),
            collections.get("lines", lines),
            params,
        )

    return _run


@pytest.fixture
def seeded():
    set_random_seed(1234)
    yield
    set_random_seed(None)


def collection_without(collection, *ids):
    """Copy of a collection with the given ids removed."""
    return FeatureCollection.of(f for f in collection if f.id not in ids)


def point_collection(coords, **properties):
    return FeatureCollection.of(
        Feature(geometry=Point(x, y), properties={"id": i, **properties})
        for i, (x, y) in enumerate(coords)
    )
