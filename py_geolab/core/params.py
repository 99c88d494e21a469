"""
Per-tool parameter schemas.

The presentation layer sends an open bag of numbers keyed by camelCase
names. Each tool declares the fields it reads, with defaults and valid
ranges; everything else in the bag is ignored.
"""

from typing import Any, Dict, Mapping, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ParameterError
from .tools import ToolType


class ToolParams(BaseModel):
    """Base schema, also used by tools that take no parameters."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, frozen=True)


class BufferParams(ToolParams):
    radius: float = Field(default=0.5, gt=0, description="Buffer radius in km")


class SimplifyParams(ToolParams):
    tolerance: float = Field(default=0.001, gt=0, description="Tolerance in degrees")


class DistanceMatrixParams(ToolParams):
    max_distance: float = Field(
        default=0.5, gt=0, alias="maxDistance", description="Connection threshold in km"
    )


class KMeansParams(ToolParams):
    number_of_clusters: int = Field(
        default=5, ge=1, alias="numberOfClusters", description="Cluster count"
    )


class DbscanParams(ToolParams):
    max_distance: float = Field(
        default=0.2, gt=0, alias="maxDistance", description="Neighbourhood radius in km"
    )
    min_points: int = Field(
        default=3, ge=2, alias="minPoints", description="Neighbours needed for a core point"
    )


class BezierParams(ToolParams):
    sharpness: float = Field(default=0.85, ge=0, le=1, description="Curve tension")
    resolution: int = Field(default=10, ge=2, le=1000, description="Samples per segment")


class LineChunkParams(ToolParams):
    length: float = Field(default=0.5, gt=0, description="Chunk length in km")


class LineOffsetParams(ToolParams):
    distance: float = Field(default=0.1, description="Offset in km, negative is right")


class SnapParams(ToolParams):
    distance: float = Field(default=0.2, gt=0, description="Snap threshold in km")


class CoverageParams(ToolParams):
    radius: float = Field(default=4.0, gt=0, description="2G band radius in km")


class HexbinParams(ToolParams):
    cell_side: float = Field(default=0.2, gt=0, alias="cellSide", description="Hex side in km")


class IsobandsParams(ToolParams):
    breaks: int = Field(default=5, ge=2, le=50, description="Number of break values")


class IdwParams(ToolParams):
    cell_size: float = Field(default=0.1, gt=0, alias="cellSize", description="Hex side in km")
    weight: float = Field(default=1.0, gt=0, description="Distance decay exponent")


class GridParams(ToolParams):
    cell_size: float = Field(default=0.5, gt=0, alias="cellSize", description="Cell size in km")


class SectorParams(ToolParams):
    radius: float = Field(default=1.0, gt=0, description="Sector radius in km")
    bearing1: float = Field(default=0.0, description="Start bearing")
    bearing2: float = Field(default=90.0, description="End bearing")


class EllipseParams(ToolParams):
    x_semi_axis: float = Field(default=1.0, gt=0, alias="xSemiAxis", description="East-west semi axis in km")
    y_semi_axis: float = Field(default=0.5, gt=0, alias="ySemiAxis", description="North-south semi axis in km")


class RandomParams(ToolParams):
    count: int = Field(default=20, ge=1, description="Number of features")


PARAM_SCHEMAS: Dict[ToolType, Type[ToolParams]] = {
    ToolType.BUFFER: BufferParams,
    ToolType.SIMPLIFY: SimplifyParams,
    ToolType.DISTANCE_MATRIX: DistanceMatrixParams,
    ToolType.KMEANS: KMeansParams,
    ToolType.DBSCAN: DbscanParams,
    ToolType.BEZIER: BezierParams,
    ToolType.LINE_CHUNK: LineChunkParams,
    ToolType.LINE_OFFSET: LineOffsetParams,
    ToolType.SNAP: SnapParams,
    ToolType.BASE_STATION_COVERAGE: CoverageParams,
    ToolType.HEXBIN: HexbinParams,
    ToolType.ISOBANDS: IsobandsParams,
    ToolType.IDW: IdwParams,
    ToolType.POINT_GRID: GridParams,
    ToolType.SQUARE_GRID: GridParams,
    ToolType.TRIANGLE_GRID: GridParams,
    ToolType.HEX_GRID: GridParams,
    ToolType.SECTOR: SectorParams,
    ToolType.ELLIPSE: EllipseParams,
    ToolType.RANDOM_POINT: RandomParams,
    ToolType.RANDOM_LINE: RandomParams,
    ToolType.RANDOM_POLYGON: RandomParams,
}


def schema_for(tool: ToolType) -> Type[ToolParams]:
    return PARAM_SCHEMAS.get(tool, ToolParams)


def resolve_params(tool: ToolType, bag: Optional[Mapping[str, Any]] = None) -> ToolParams:
    """
    Validate and default a parameter bag for one tool.

    Args:
        tool: Tool the parameters are for
        bag: Open mapping of parameter names to values, None values count as missing

    Returns:
        Instance of the tool's schema

    Raises:
        ParameterError: when a recognised field is out of range or not numeric
    """
    cleaned = {key: value for key, value in (bag or {}).items() if value is not None}
    try:
        return schema_for(tool).model_validate(cleaned)
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise ParameterError(tool, fields, str(e)) from e
