"""
Data models for the Bookmark Mind-Map Organizer.

This module defines the internal data structures used to represent
classified bookmarks and the topical tree built from them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, Tuple, Union


class Category(Enum):
    """
    Topical categories assigned to every bookmark.

    Member order is significant: it is the rule-matching priority and the
    default ordering of top-level branches.
    """

    VIDEOS_MULTIMEDIA = "Videos & Multimedia"
    DEVELOPMENT_CODE = "Development & Code"
    DOCUMENTATION_HELP = "Documentation & Help"
    ECOMMERCE_SHOPPING = "E-commerce & Shopping"
    NEWS_BLOG = "News & Blog"
    SOCIAL_NETWORKS = "Social Networks"
    CLOUD_STORAGE = "Cloud & Storage"
    TOOLS_UTILITIES = "Tools & Utilities"
    FORMATION_LEARNING = "Formation & Learning"
    VARIOUS_RESOURCES = "Various Resources"

    @property
    def label(self) -> str:
        return self.value


FALLBACK_CATEGORY = Category.VARIOUS_RESOURCES


@dataclass(frozen=True)
class Record:
    """
    A classified bookmark.

    Records are created once by the classifier and never mutated.
    ``record_id`` is unique within one classification run.
    """

    record_id: int
    title: str
    url: str
    category: Category
    keywords: Tuple[str, ...]
    domain: str


@dataclass(frozen=True)
class LeafNode:
    """A bookmark in the tree"""

    label: str
    record: Record


@dataclass(frozen=True)
class FolderNode:
    """A folder in the tree, children kept in display order"""

    label: str
    children: Tuple["Node", ...] = ()
    child_count: int = 0


Node = Union[FolderNode, LeafNode]


@dataclass
class BookmarkStats:
    """Aggregate statistics over a set of records."""

    total_bookmarks: int = 0
    detected_types: Dict[Category, int] = field(default_factory=dict)
    unique_domains: int = 0

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization"""
        return {
            "total_bookmarks": self.total_bookmarks,
            "detected_types": {
                category.label: count
                for category, count in self.detected_types.items()
            },
            "unique_domains": self.unique_domains,
        }


def iter_leaves(node: Node) -> Iterator[LeafNode]:
    """Yield every leaf below ``node`` in document order."""
    if isinstance(node, LeafNode):
        yield node
        return
    for child in node.children:
        yield from iter_leaves(child)


def iter_folders(node: Node) -> Iterator[FolderNode]:
    """Yield every folder below and including ``node`` in document order."""
    if isinstance(node, LeafNode):
        return
    yield node
    for child in node.children:
        yield from iter_folders(child)


def max_depth(node: Node, current_depth: int = 0) -> int:
    """Depth of the deepest node, the given node being depth 0."""
    if isinstance(node, LeafNode) or not node.children:
        return current_depth
    return max(max_depth(child, current_depth + 1) for child in node.children)
