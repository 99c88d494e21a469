"""
py-geolab: interactive spatial-analysis sandbox.

Runs one of a fixed set of analysis tools against three sample datasets
and returns a display-ready feature collection with an explanation and
summary statistics.
"""

from .core.dispatcher import perform_analysis
from .core.features import DisplayHints, Feature, FeatureCollection
from .core.results import AnalysisMetadata, AnalysisResult
from .core.sample_data import sample_datasets, sample_lines, sample_points, sample_polygons
from .core.tools import ToolCategory, ToolType
from .core.visibility import LayerVisibility, visibility_for

__version__ = "0.1.0"

__all__ = ['perform_analysis', 'visibility_for', 'LayerVisibility',
           'DisplayHints', 'Feature', 'FeatureCollection',
           'AnalysisMetadata', 'AnalysisResult', 'ToolCategory', 'ToolType',
           'sample_datasets', 'sample_points', 'sample_polygons', 'sample_lines']
