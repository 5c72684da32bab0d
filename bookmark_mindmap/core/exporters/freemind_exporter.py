"""
FreeMind bookmark exporter.

Renders a bookmark tree as a FreeMind mind map (.mm). The header, element
and attribute names are what FreeMind-compatible viewers expect and must
not change.
"""

from typing import List

from .base import TreeExporter
from ..data_models import FolderNode, LeafNode, Node

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
MAP_OPEN = '<map version="1.0.1">'
ATTRIBUTE_REGISTRY = "<attribute_registry/>"
MAP_CLOSE = "</map>"

INDENT = "  "

# Ampersand first so later entities are not escaped twice
_XML_ESCAPES = (
    ("&", "&amp;"),
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&apos;"),
)


def escape_xml(text: str) -> str:
    """Escape special characters for use in an XML attribute."""
    for char, entity in _XML_ESCAPES:
        text = text.replace(char, entity)
    return text


def render_node(node: Node, depth: int = 0) -> str:
    """
    Render a node and its descendants.

    Args:
        node: Node to render
        depth: Nesting level, two spaces of indentation each

    Returns:
        XML for this node, lines joined by newlines
    """
    indent = INDENT * depth

    if isinstance(node, LeafNode):
        text = escape_xml(node.label)
        return f'{indent}<node TEXT="{text}" LINK="{escape_xml(node.record.url)}"/>'

    if isinstance(node, FolderNode):
        text = escape_xml(node.label)
        if not node.children:
            return f'{indent}<node TEXT="{text}"/>'

        lines: List[str] = [f'{indent}<node TEXT="{text}">']
        lines.extend(render_node(child, depth + 1) for child in node.children)
        lines.append(f"{indent}</node>")
        return "\n".join(lines)

    raise TypeError(f"Unknown node type: {type(node).__name__}")


def render_document(root: Node) -> str:
    """
    Render a complete FreeMind document.

    Example:
        >>> xml = render_document(root)
        >>> xml.splitlines()[0]
        '<?xml version="1.0" encoding="UTF-8"?>'
    """
    return "\n".join(
        [XML_DECLARATION, MAP_OPEN, ATTRIBUTE_REGISTRY, render_node(root), MAP_CLOSE]
    )


class FreeMindExporter(TreeExporter):
    """
    Export a bookmark tree to a FreeMind mind map.

    Example:
        >>> exporter = FreeMindExporter()
        >>> result = exporter.export(root, Path("bookmarks.mm"))
    """

    @property
    def format_name(self) -> str:
        return "FreeMind"

    @property
    def file_extension(self) -> str:
        return "mm"

    def render(self, root: FolderNode) -> str:
        return render_document(root)
