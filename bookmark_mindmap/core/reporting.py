"""
Statistics and plain-text previews of bookmark trees.
"""

from collections import Counter
from typing import List, Sequence

from .data_models import (
    BookmarkStats,
    Category,
    FolderNode,
    LeafNode,
    Node,
    Record,
    iter_folders,
    iter_leaves,
    max_depth,
)


def compute_stats(records: Sequence[Record]) -> BookmarkStats:
    """Count records per category and unique domains"""
    counts = Counter(record.category for record in records)
    return BookmarkStats(
        total_bookmarks=len(records),
        detected_types={category: counts[category] for category in Category if counts[category]},
        unique_domains=len({record.domain for record in records}),
    )


def format_stats(stats: BookmarkStats) -> str:
    lines = [
        f"Total bookmarks: {stats.total_bookmarks}",
        f"Unique domains: {stats.unique_domains}",
        "Detected types:",
    ]
    for category, count in stats.detected_types.items():
        lines.append(f"  {category.label}: {count}")
    return "\n".join(lines)


def format_tree_preview(root: Node, show_bookmarks: bool = True) -> str:
    """Generate a human-readable outline of a tree"""
    folders = sum(1 for _ in iter_folders(root))
    bookmarks = sum(1 for _ in iter_leaves(root))

    lines = ["Bookmark Hierarchy", "=" * 40]
    lines.append(f"Folders: {folders}")
    lines.append(f"Bookmarks: {bookmarks}")
    lines.append(f"Maximum Depth: {max_depth(root)}")
    lines.append("")
    _add_node_lines(root, lines, "", show_bookmarks)

    return "\n".join(lines)


def _add_node_lines(node: Node, lines: List[str], indent: str, show_bookmarks: bool) -> None:
    if isinstance(node, LeafNode):
        if show_bookmarks:
            lines.append(f"{indent}- {node.label}")
        return

    lines.append(f"{indent}+ {node.label}")
    for child in node.children:
        _add_node_lines(child, lines, indent + "  ", show_bookmarks)
