"""
Per-category handler tables.

The dispatcher routes a tool to its category first and then looks the
tool up in that category's table. The tables must cover their category
exactly; this is checked when the package is imported.
"""

from typing import Dict

from ..context import Handler
from ..tools import CATEGORY_TOOLS, ToolCategory, ToolType
from . import density, generation, measurement, network, spatial, topology, transform, vector

CATEGORY_HANDLERS: Dict[ToolCategory, Dict[ToolType, Handler]] = {
    ToolCategory.GEOMETRIC_MEASUREMENT: measurement.HANDLERS,
    ToolCategory.VECTOR_SET_OPERATIONS: vector.HANDLERS,
    ToolCategory.SPATIAL_RELATIONSHIP: spatial.HANDLERS,
    ToolCategory.NETWORK_LINE: network.HANDLERS,
    ToolCategory.DENSITY_GRID: density.HANDLERS,
    ToolCategory.DATA_GENERATION: generation.HANDLERS,
    ToolCategory.BOOLEAN_TOPOLOGY: topology.HANDLERS,
    ToolCategory.FORMAT_TRANSFORM: transform.HANDLERS,
}


def _check_registry() -> None:
    for category in ToolCategory:
        registered = set(CATEGORY_HANDLERS.get(category, {}))
        expected = set(CATEGORY_TOOLS[category])
        if registered != expected:
            missing = sorted(t.value for t in expected - registered)
            extra = sorted(t.value for t in registered - expected)
            raise RuntimeError(
                f"Handler table for {category.value} is out of sync: missing={missing} extra={extra}"
            )


_check_registry()


__all__ = ['CATEGORY_HANDLERS']
