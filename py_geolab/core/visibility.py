"""
Base layer visibility per tool.

Decides which of the three base collections the map should draw under a
tool's result, so that each result is shown against the inputs it was
computed from.
"""

from typing import Dict, FrozenSet, NamedTuple, Optional, Union

from .tools import ToolType

T = ToolType


class LayerVisibility(NamedTuple):
    points: bool
    polygons: bool
    lines: bool

    def as_dict(self) -> Dict[str, bool]:
        return self._asdict()


ALL_VISIBLE = LayerVisibility(points=True, polygons=True, lines=True)

_GROUPS: Dict[LayerVisibility, FrozenSet[ToolType]] = {
    LayerVisibility(points=True, polygons=True, lines=False): frozenset({
        T.SPATIAL_JOIN, T.BOOL_POINT_IN_POLY, T.BOOL_CONTAINS,
    }),
    LayerVisibility(points=False, polygons=True, lines=False): frozenset({
        T.AREA, T.BBOX, T.CENTROID, T.INTERSECT, T.UNION, T.DIFFERENCE, T.DISSOLVE,
        T.CLIP, T.POLYGON_TO_LINE, T.POINT_GRID, T.SQUARE_GRID, T.TRIANGLE_GRID,
        T.HEX_GRID, T.BOOL_DISJOINT, T.BOOL_OVERLAP, T.BOOL_EQUAL, T.BOOL_TOUCH,
        T.BOOL_INTERSECTS,
    }),
    LayerVisibility(points=True, polygons=False, lines=False): frozenset({
        T.BEARING, T.VORONOI, T.CONVEX_HULL, T.TIN, T.NEAREST, T.DISTANCE_MATRIX,
        T.HEXBIN, T.ISOBANDS, T.IDW, T.SECTOR, T.ELLIPSE,
    }),
    LayerVisibility(points=False, polygons=False, lines=True): frozenset({
        T.LINE_TO_POLYGON, T.LINE_INTERSECT, T.BEZIER, T.LENGTH, T.LINE_CHUNK, T.LINE_OFFSET,
    }),
    LayerVisibility(points=True, polygons=False, lines=True): frozenset({T.SNAP}),
    LayerVisibility(points=False, polygons=True, lines=True): frozenset({T.BOOL_CROSSES}),
    LayerVisibility(points=False, polygons=False, lines=False): frozenset({
        T.BUFFER, T.SIMPLIFY, T.KMEANS, T.DBSCAN, T.BASE_STATION_COVERAGE,
        T.RANDOM_POINT, T.RANDOM_LINE, T.RANDOM_POLYGON,
    }),
}

del T

VISIBILITY: Dict[ToolType, LayerVisibility] = {
    tool: visibility for visibility, tools in _GROUPS.items() for tool in tools
}


def visibility_for(tool: Optional[Union[ToolType, str]]) -> LayerVisibility:
    """
    Base layers to show while ``tool`` is selected.

    Args:
        tool: Selected tool, its string value, or None when nothing is selected

    Returns:
        Visibility flags; everything is visible when no tool is selected
        and nothing for an unrecognised identifier
    """
    if tool is None:
        return ALL_VISIBLE
    try:
        tool = ToolType.parse(tool)
    except ValueError:
        return LayerVisibility(points=False, polygons=False, lines=False)
    return VISIBILITY.get(tool, LayerVisibility(points=False, polygons=False, lines=False))
