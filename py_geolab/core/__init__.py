"""
Core analysis functionality.
"""

from .errors import GeoLabError, GeometryOperationError, ParameterError, UnknownToolError
from .features import DisplayHints, Feature, FeatureCollection
from .results import AnalysisMetadata, AnalysisResult
from .tools import ToolCategory, ToolType, category_of

__all__ = ['GeoLabError', 'GeometryOperationError', 'ParameterError', 'UnknownToolError',
           'DisplayHints', 'Feature', 'FeatureCollection',
           'AnalysisMetadata', 'AnalysisResult',
           'ToolCategory', 'ToolType', 'category_of']
