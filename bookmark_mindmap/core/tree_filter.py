"""
Export filtering for bookmark trees.

Removes bookmarks or folders from a built tree according to ExportOptions.
Filtering returns new nodes and never modifies the input tree.
"""

from typing import List, Optional

from ..config.pydantic_config import ExportOptions
from .data_models import FolderNode, LeafNode, Node

FLATTENED_LABEL = "Flattened"


def _filter_children(folder: FolderNode, options: ExportOptions) -> List[Node]:
    filtered = (filter_tree(child, options) for child in folder.children)
    return [child for child in filtered if child is not None]


def filter_tree(node: Node, options: ExportOptions) -> Optional[Node]:
    """
    Filter a tree according to export options.

    Args:
        node: Node to filter
        options: Which node kinds to keep

    Returns:
        Filtered node, or None if nothing survives

    Example:
        >>> folders_only = filter_tree(root, ExportOptions(include_bookmarks=False))
    """
    if isinstance(node, LeafNode):
        return node if options.include_bookmarks else None

    if isinstance(node, FolderNode):
        children = _filter_children(node, options)
        if not children:
            return None

        # Excluded folders are replaced by a synthetic wrapper holding
        # their surviving descendants
        label = node.label if options.include_folders else FLATTENED_LABEL
        return FolderNode(label=label, children=tuple(children), child_count=len(children))

    raise TypeError(f"Unknown node type: {type(node).__name__}")
