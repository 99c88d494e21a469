"""
Configuration modules for the analysis sandbox.
"""

from .settings import Settings, settings
from .tool_catalog import TOOL_DEFINITIONS, ToolDefinition, get_tool_definition, list_tools

__all__ = [
    'Settings',
    'settings',
    'TOOL_DEFINITIONS',
    'ToolDefinition',
    'get_tool_definition',
    'list_tools',
]
