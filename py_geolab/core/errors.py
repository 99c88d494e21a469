"""Exception types raised by the analysis core."""

from typing import Any, List


class GeoLabError(Exception):
    """Base class for all analysis errors."""


class UnknownToolError(GeoLabError, ValueError):
    """Raised when a tool identifier is not part of the enumeration."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(f"Unknown analysis tool: {value!r}")


class ParameterError(GeoLabError, ValueError):
    """Raised when a parameter bag does not satisfy the tool's schema."""

    def __init__(self, tool: Any, fields: List[str], detail: str = ""):
        self.tool = tool
        self.fields = fields
        self.detail = detail
        super().__init__(f"Invalid parameters for {tool}: {', '.join(fields)}")


class GeometryOperationError(GeoLabError):
    """Raised by a geometry primitive running in strict mode."""

    def __init__(self, operation: str, detail: str = ""):
        self.operation = operation
        self.detail = detail
        super().__init__(f"{operation} failed: {detail}" if detail else f"{operation} failed")
