"""
Analysis dispatcher.

Single entry point used by the presentation layer: resolve the tool and its
parameters, route to the category handler and return a display-ready
result. Recognised tools never raise for missing demo data, degenerate
geometry or invalid parameters; those end up in the result message.
"""

import time
from typing import Any, Mapping, Optional, Union

import structlog

from ..config import messages
from .context import AnalysisContext
from .errors import ParameterError, UnknownToolError
from .features import FeatureCollection
from .handlers import CATEGORY_HANDLERS
from .params import resolve_params
from .results import AnalysisResult
from .tools import ToolType, category_of

logger = structlog.get_logger()


def perform_analysis(
    tool: Union[ToolType, str],
    points: FeatureCollection,
    polygons: FeatureCollection,
    lines: FeatureCollection,
    params: Optional[Mapping[str, Any]] = None,
) -> AnalysisResult:
    """
    Run one analysis tool against the base collections.

    Args:
        tool: Tool identifier or its string value
        points: Base point collection
        polygons: Base polygon collection
        lines: Base line collection
        params: Open parameter bag; unknown keys are ignored and missing
            keys take the tool's defaults

    Returns:
        AnalysisResult with a non-empty message. The geometry is None when
        the tool is unknown, its parameters are invalid or its inputs are
        missing.
    """
    try:
        tool = ToolType.parse(tool)
    except UnknownToolError:
        logger.warning("Unknown analysis tool", tool=str(tool))
        return AnalysisResult.failure(messages.NOT_FOUND)

    try:
        resolved = resolve_params(tool, params)
    except ParameterError as e:
        logger.warning("Invalid analysis parameters", tool=tool.value, fields=e.fields)
        return AnalysisResult.failure(messages.INVALID_PARAMS.format(fields=", ".join(e.fields)))

    category = category_of(tool)
    handler = CATEGORY_HANDLERS[category][tool]
    ctx = AnalysisContext(tool=tool, points=points, polygons=polygons, lines=lines, params=resolved)

    logger.debug("Running analysis", tool=tool.value, category=category.value, params=resolved.model_dump())
    started = time.perf_counter()
    try:
        result = handler(ctx)
    except Exception as e:
        logger.error("Analysis failed", tool=tool.value, category=category.value, error=str(e))
        raise

    logger.info(
        "Analysis completed",
        tool=tool.value,
        category=category.value,
        features=len(result.features),
        elapsed_ms=round((time.perf_counter() - started) * 1000, 1),
    )
    return result
