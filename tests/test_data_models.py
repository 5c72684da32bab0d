"""
Tests for data models and tree helpers.
"""

import pytest

from bookmark_mindmap.core.data_models import (
    BookmarkStats,
    Category,
    FolderNode,
    LeafNode,
    iter_folders,
    iter_leaves,
    max_depth,
)


class TestCategory:
    """Test the category enumeration"""

    def test_labels(self):
        assert Category.DEVELOPMENT_CODE.label == "Development & Code"
        assert Category.VARIOUS_RESOURCES.label == "Various Resources"

    def test_order(self):
        assert list(Category)[0] is Category.VIDEOS_MULTIMEDIA
        assert list(Category)[-1] is Category.VARIOUS_RESOURCES


class TestTreeHelpers:
    """Test tree traversal helpers"""

    @pytest.fixture
    def tree(self, make_record):
        inner = FolderNode(
            label="Inner",
            children=(LeafNode("A", make_record(title="A")),),
            child_count=1,
        )
        return FolderNode(
            label="Root",
            children=(inner, LeafNode("B", make_record(title="B"))),
            child_count=2,
        )

    def test_iter_leaves_document_order(self, tree):
        assert [leaf.label for leaf in iter_leaves(tree)] == ["A", "B"]

    def test_iter_folders_includes_root(self, tree):
        assert [folder.label for folder in iter_folders(tree)] == ["Root", "Inner"]

    def test_max_depth(self, tree):
        assert max_depth(tree) == 2
        assert max_depth(FolderNode(label="Empty")) == 0

    def test_nodes_are_immutable(self, tree):
        with pytest.raises(AttributeError):
            tree.label = "Changed"


class TestBookmarkStats:
    """Test statistics serialization"""

    def test_to_dict(self):
        stats = BookmarkStats(
            total_bookmarks=3,
            detected_types={Category.NEWS_BLOG: 2, Category.CLOUD_STORAGE: 1},
            unique_domains=2,
        )
        assert stats.to_dict() == {
            "total_bookmarks": 3,
            "detected_types": {"News & Blog": 2, "Cloud & Storage": 1},
            "unique_domains": 2,
        }
