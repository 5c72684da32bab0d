"""
Tests for the hierarchy builder.
"""

from collections import Counter

import pytest

from bookmark_mindmap.config.pydantic_config import GroupingConfig, HierarchyParams
from bookmark_mindmap.core.classifier import NothingToClassifyError
from bookmark_mindmap.core.data_models import (
    Category,
    FolderNode,
    LeafNode,
    iter_folders,
    iter_leaves,
    max_depth,
)
from bookmark_mindmap.core.hierarchy_builder import (
    OTHER_RESOURCES_LABEL,
    HierarchyBuilder,
    create_hierarchy,
    folder_name,
    group_by_category,
    group_by_keyword,
)


def labels(node):
    return [child.label for child in node.children]


class TestFolderName:
    """Test folder naming"""

    def test_domain_name(self, make_record):
        records = [make_record() for _ in range(15)]
        assert folder_name("github.com", records) == "Github - 15 liens"

    def test_domain_uses_first_label(self, make_record):
        records = [make_record(), make_record()]
        assert folder_name("docs.python.org", records) == "Docs - 2 liens"

    def test_keyword_name(self, make_record):
        records = [make_record() for _ in range(3)]
        assert folder_name("python", records) == "Python - 3 ressources"

    def test_only_first_letter_capitalized(self, make_record):
        assert folder_name("iPhone", [make_record()]) == "IPhone - 1 ressources"


class TestGrouping:
    """Test grouping helpers"""

    def test_category_groups_in_enum_order(self, make_record):
        records = [
            make_record(category=Category.VARIOUS_RESOURCES),
            make_record(category=Category.VIDEOS_MULTIMEDIA),
            make_record(category=Category.NEWS_BLOG),
        ]
        groups = group_by_category(records)
        assert [category for category, _ in groups] == [
            Category.VIDEOS_MULTIMEDIA,
            Category.NEWS_BLOG,
            Category.VARIOUS_RESOURCES,
        ]

    def test_keyword_groups_need_two_records(self, make_record):
        first = make_record(keywords=("python", "tips"))
        second = make_record(keywords=("python",))
        groups = group_by_keyword([first, second])
        assert list(groups) == ["python"]
        assert groups["python"] == [first, second]

    def test_repeated_keyword_counts_once(self, make_record):
        record = make_record(keywords=("python", "python"))
        other = make_record(keywords=("rust",))
        assert group_by_keyword([record, other]) == {}


class TestHierarchyBuilder:
    """Test tree construction"""

    def test_end_to_end_scenario(self, end_to_end_records):
        """Two records in two categories give two single-leaf folders"""
        params = HierarchyParams(vertical_complexity=4, horizontal_complexity=8)
        root = create_hierarchy(end_to_end_records, params)

        assert root.label == "Bookmarks"
        assert labels(root) == ["Development & Code (1)", "Documentation & Help (1)"]

        for folder, record in zip(root.children, end_to_end_records):
            assert isinstance(folder, FolderNode)
            assert len(folder.children) == 1
            leaf = folder.children[0]
            assert isinstance(leaf, LeafNode)
            assert leaf.label == record.title
            assert leaf.record == record

    def test_empty_input_rejected(self, default_params):
        with pytest.raises(NothingToClassifyError):
            HierarchyBuilder(default_params).build([])

    def test_child_counts(self, mixed_records, default_params):
        root = create_hierarchy(mixed_records, default_params)

        assert root.child_count == len(mixed_records)
        for folder in iter_folders(root):
            assert folder.child_count == sum(1 for _ in iter_leaves(folder))

    def test_too_many_categories_are_merged(self, make_record):
        """Smallest categories go to a catch-all branch, ties by category order"""
        records = (
            [make_record(category=Category.VIDEOS_MULTIMEDIA, domain=f"v{i}.com") for i in range(2)]
            + [make_record(category=Category.DEVELOPMENT_CODE, domain=f"d{i}.com") for i in range(3)]
            + [make_record(category=Category.DOCUMENTATION_HELP, domain=f"h{i}.com") for i in range(2)]
            + [make_record(category=Category.NEWS_BLOG, domain="n.com")]
        )
        params = HierarchyParams(vertical_complexity=4, horizontal_complexity=3)
        root = create_hierarchy(records, params)

        assert labels(root) == [
            "Development & Code (3)",
            "Videos & Multimedia (2)",
            f"{OTHER_RESOURCES_LABEL} (3)",
        ]
        other = root.children[2]
        assert [leaf.record.category for leaf in other.children] == [
            Category.DOCUMENTATION_HELP,
            Category.DOCUMENTATION_HELP,
            Category.NEWS_BLOG,
        ]

    def test_categories_within_limit_keep_category_order(self, make_record):
        records = [
            make_record(category=Category.VARIOUS_RESOURCES),
            make_record(category=Category.CLOUD_STORAGE),
            make_record(category=Category.CLOUD_STORAGE),
            make_record(category=Category.VIDEOS_MULTIMEDIA),
        ]
        params = HierarchyParams(vertical_complexity=3, horizontal_complexity=3)
        root = create_hierarchy(records, params)

        assert labels(root) == [
            "Videos & Multimedia (1)",
            "Cloud & Storage (2)",
            "Various Resources (1)",
        ]

    def test_minimum_depth_keeps_branches_flat(self, make_record):
        records = [
            make_record(category=Category.DEVELOPMENT_CODE, domain="github.com")
            for _ in range(20)
        ]
        params = HierarchyParams(vertical_complexity=2, horizontal_complexity=3)
        root = create_hierarchy(records, params)

        branch = root.children[0]
        assert branch.label == "Development & Code (20)"
        assert all(isinstance(child, LeafNode) for child in branch.children)
        assert max_depth(root) == 2

    def test_single_domain_uses_whole_depth_budget(self, make_record):
        records = [
            make_record(category=Category.DEVELOPMENT_CODE, domain="github.com")
            for _ in range(30)
        ]
        params = HierarchyParams(vertical_complexity=8, horizontal_complexity=3)
        root = create_hierarchy(records, params)

        assert max_depth(root) == 8
        assert sum(1 for _ in iter_leaves(root)) == 30


class TestSubGrouping:
    """Test domain and keyword sub-folders"""

    @pytest.fixture
    def branch_records(self, make_record):
        dev = Category.DEVELOPMENT_CODE
        return [
            make_record(domain="github.com", category=dev, keywords=("python",)),
            make_record(domain="github.com", category=dev),
            make_record(domain="github.com", category=dev),
            make_record(domain="www.gitlab.com", category=dev),
            make_record(domain="www.gitlab.com", category=dev),
            make_record(domain="a.com", category=dev, keywords=("python", "tools")),
            make_record(domain="b.com", category=dev, keywords=("python",)),
            make_record(domain="c.com", category=dev, keywords=("tools",)),
            make_record(domain="d.com", category=dev, keywords=("misc",)),
        ]

    def test_domain_keyword_and_misc_groups(self, branch_records):
        params = HierarchyParams(vertical_complexity=3, horizontal_complexity=3)
        root = create_hierarchy(branch_records, params)

        branch = root.children[0]
        assert branch.label == "Development & Code (9)"
        # Only floor(3 * 0.6) = 1 domain folder fits
        assert labels(branch) == [
            "Github - 3 liens (3)",
            "Python (2) (2)",
            "Divers (4) (4)",
        ]

        github, python, misc = branch.children
        assert [leaf.record for leaf in github.children] == branch_records[:3]
        assert [leaf.record for leaf in python.children] == branch_records[5:7]
        # "tools" lost a.com to "Python" and was dropped
        assert [leaf.record for leaf in misc.children] == [
            branch_records[3],
            branch_records[4],
            branch_records[7],
            branch_records[8],
        ]

    def test_www_prefix_stripped_from_domain_folder(self, branch_records):
        params = HierarchyParams(vertical_complexity=3, horizontal_complexity=4)
        root = create_hierarchy(branch_records, params)

        assert labels(root.children[0]) == [
            "Github - 3 liens (3)",
            "Gitlab - 2 liens (2)",
            "Python (2) (2)",
            "Divers (2) (2)",
        ]

    def test_relative_dominance_mode(self, branch_records):
        params = HierarchyParams(vertical_complexity=3, horizontal_complexity=3)
        grouping = GroupingConfig(dominance_mode="relative", dominance_ratio=0.5)
        root = HierarchyBuilder(params, grouping).build(branch_records)

        # ceil(9 * 0.5) = 5, no domain is large enough
        assert labels(root.children[0]) == ["Python (3) (3)", "Divers (6) (6)"]


class TestTreeInvariants:
    """Properties that hold for any input and parameters"""

    @pytest.mark.parametrize(
        "vertical, horizontal",
        [(2, 3), (3, 3), (3, 15), (4, 8), (5, 4), (6, 5), (8, 3), (8, 15)],
    )
    def test_bounds_and_bijection(self, mixed_records, vertical, horizontal):
        params = HierarchyParams(
            vertical_complexity=vertical, horizontal_complexity=horizontal
        )
        root = create_hierarchy(mixed_records, params)

        leaf_ids = Counter(leaf.record.record_id for leaf in iter_leaves(root))
        assert all(count == 1 for count in leaf_ids.values())
        assert set(leaf_ids) == {record.record_id for record in mixed_records}
        for leaf in iter_leaves(root):
            assert leaf.record == mixed_records[leaf.record.record_id]

        assert max_depth(root) <= vertical
        assert len(root.children) <= horizontal
        assert all(folder.children for folder in iter_folders(root))

    def test_build_is_deterministic(self, mixed_records):
        params = HierarchyParams(vertical_complexity=5, horizontal_complexity=3)
        first = create_hierarchy(mixed_records, params)
        second = create_hierarchy(list(mixed_records), params)
        assert first == second
