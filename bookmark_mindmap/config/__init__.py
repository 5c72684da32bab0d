"""
Configuration models and loading.
"""

from .pydantic_config import (
    ConfigurationManager,
    ExportOptions,
    GroupingConfig,
    HierarchyParams,
    MindMapConfig,
    OutputConfig,
    format_config_error,
)

__all__ = [
    "ConfigurationManager",
    "ExportOptions",
    "GroupingConfig",
    "HierarchyParams",
    "MindMapConfig",
    "OutputConfig",
    "format_config_error",
]
