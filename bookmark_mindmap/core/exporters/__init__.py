"""
Mind-map exporters.

This module provides exporters that render a bookmark tree to files
readable by mind-mapping tools.
"""

from .base import TreeExporter, ExportResult, ExportError
from .freemind_exporter import FreeMindExporter, escape_xml, render_document, render_node

__all__ = [
    "TreeExporter",
    "ExportResult",
    "ExportError",
    "FreeMindExporter",
    "escape_xml",
    "render_document",
    "render_node",
]
