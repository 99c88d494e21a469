"""
Tool identifiers and their categories.

Every tool belongs to exactly one category. The category sets are the
first level of dispatch; the handler tables in ``core.handlers`` are the
second.
"""

from enum import Enum
from typing import Dict, FrozenSet, Union

from .errors import UnknownToolError


class ToolType(str, Enum):
    """Closed enumeration of analysis recipes."""

    # Geometric measurement
    AREA = "AREA"
    BBOX = "BBOX"
    CENTROID = "CENTROID"
    BEARING = "BEARING"

    # Vector set operations
    BUFFER = "BUFFER"
    INTERSECT = "INTERSECT"
    UNION = "UNION"
    DIFFERENCE = "DIFFERENCE"
    DISSOLVE = "DISSOLVE"
    CLIP = "CLIP"
    CONVEX_HULL = "CONVEX_HULL"
    SIMPLIFY = "SIMPLIFY"

    # Spatial relationship / clustering
    SPATIAL_JOIN = "SPATIAL_JOIN"
    NEAREST = "NEAREST"
    DISTANCE_MATRIX = "DISTANCE_MATRIX"
    VORONOI = "VORONOI"
    TIN = "TIN"
    KMEANS = "KMEANS"
    DBSCAN = "DBSCAN"

    # Network / line operations
    LINE_INTERSECT = "LINE_INTERSECT"
    BEZIER = "BEZIER"
    LENGTH = "LENGTH"
    LINE_CHUNK = "LINE_CHUNK"
    LINE_OFFSET = "LINE_OFFSET"
    SNAP = "SNAP"
    BASE_STATION_COVERAGE = "BASE_STATION_COVERAGE"

    # Density / grids
    HEXBIN = "HEXBIN"
    ISOBANDS = "ISOBANDS"
    IDW = "IDW"
    POINT_GRID = "POINT_GRID"
    SQUARE_GRID = "SQUARE_GRID"
    TRIANGLE_GRID = "TRIANGLE_GRID"
    HEX_GRID = "HEX_GRID"

    # Data generation
    SECTOR = "SECTOR"
    ELLIPSE = "ELLIPSE"
    RANDOM_POINT = "RANDOM_POINT"
    RANDOM_LINE = "RANDOM_LINE"
    RANDOM_POLYGON = "RANDOM_POLYGON"

    # Boolean topology
    BOOL_POINT_IN_POLY = "BOOL_POINT_IN_POLY"
    BOOL_CONTAINS = "BOOL_CONTAINS"
    BOOL_CROSSES = "BOOL_CROSSES"
    BOOL_DISJOINT = "BOOL_DISJOINT"
    BOOL_OVERLAP = "BOOL_OVERLAP"
    BOOL_EQUAL = "BOOL_EQUAL"
    BOOL_TOUCH = "BOOL_TOUCH"
    BOOL_INTERSECTS = "BOOL_INTERSECTS"

    # Format transform
    POLYGON_TO_LINE = "POLYGON_TO_LINE"
    LINE_TO_POLYGON = "LINE_TO_POLYGON"

    @classmethod
    def parse(cls, value: Union["ToolType", str]) -> "ToolType":
        """Return the member for ``value`` or raise UnknownToolError."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnknownToolError(value) from None


class ToolCategory(str, Enum):
    """First-level dispatch groups."""

    GEOMETRIC_MEASUREMENT = "GEOMETRIC_MEASUREMENT"
    VECTOR_SET_OPERATIONS = "VECTOR_SET_OPERATIONS"
    SPATIAL_RELATIONSHIP = "SPATIAL_RELATIONSHIP"
    NETWORK_LINE = "NETWORK_LINE"
    DENSITY_GRID = "DENSITY_GRID"
    DATA_GENERATION = "DATA_GENERATION"
    BOOLEAN_TOPOLOGY = "BOOLEAN_TOPOLOGY"
    FORMAT_TRANSFORM = "FORMAT_TRANSFORM"


T = ToolType

CATEGORY_TOOLS: Dict[ToolCategory, FrozenSet[ToolType]] = {
    ToolCategory.GEOMETRIC_MEASUREMENT: frozenset({T.AREA, T.BBOX, T.CENTROID, T.BEARING}),
    ToolCategory.VECTOR_SET_OPERATIONS: frozenset(
        {
            T.BUFFER,
            T.INTERSECT,
            T.UNION,
            T.DIFFERENCE,
            T.DISSOLVE,
            T.CLIP,
            T.CONVEX_HULL,
            T.SIMPLIFY,
        }
    ),
    ToolCategory.SPATIAL_RELATIONSHIP: frozenset(
        {T.SPATIAL_JOIN, T.NEAREST, T.DISTANCE_MATRIX, T.VORONOI, T.TIN, T.KMEANS, T.DBSCAN}
    ),
    ToolCategory.NETWORK_LINE: frozenset(
        {
            T.LINE_INTERSECT,
            T.BEZIER,
            T.LENGTH,
            T.LINE_CHUNK,
            T.LINE_OFFSET,
            T.SNAP,
            T.BASE_STATION_COVERAGE,
        }
    ),
    ToolCategory.DENSITY_GRID: frozenset(
        {
            T.HEXBIN,
            T.ISOBANDS,
            T.IDW,
            T.POINT_GRID,
            T.SQUARE_GRID,
            T.TRIANGLE_GRID,
            T.HEX_GRID,
        }
    ),
    ToolCategory.DATA_GENERATION: frozenset(
        {T.SECTOR, T.ELLIPSE, T.RANDOM_POINT, T.RANDOM_LINE, T.RANDOM_POLYGON}
    ),
    ToolCategory.BOOLEAN_TOPOLOGY: frozenset(
        {
            T.BOOL_POINT_IN_POLY,
            T.BOOL_CONTAINS,
            T.BOOL_CROSSES,
            T.BOOL_DISJOINT,
            T.BOOL_OVERLAP,
            T.BOOL_EQUAL,
            T.BOOL_TOUCH,
            T.BOOL_INTERSECTS,
        }
    ),
    ToolCategory.FORMAT_TRANSFORM: frozenset({T.POLYGON_TO_LINE, T.LINE_TO_POLYGON}),
}

del T


def category_of(tool: ToolType) -> ToolCategory:
    """Route a tool to its category by set membership."""
    for category, members in CATEGORY_TOOLS.items():
        if tool in members:
            return category
    raise UnknownToolError(tool)


def tools_in(category: ToolCategory) -> FrozenSet[ToolType]:
    return CATEGORY_TOOLS[category]
