"""
Hierarchy Builder

Organizes classified bookmarks into a balanced topical tree: first by
category, then by dominant domain, then by shared keyword, within the
depth and breadth limits given by HierarchyParams.
"""

import logging
import math
from collections import defaultdict
from typing import Callable, Dict, Hashable, List, Optional, Sequence, Set, Tuple

from ..config.pydantic_config import GroupingConfig, HierarchyParams
from .classifier import NothingToClassifyError
from .data_models import Category, FolderNode, LeafNode, Node, Record

ROOT_LABEL = "Bookmarks"
OTHER_RESOURCES_LABEL = "Other resources"
MISC_LABEL = "Divers"

# Share of a branch's group budget that may go to domain folders
DOMAIN_GROUP_SHARE = 0.6
MAX_KEYWORD_GROUPS = 3
MIN_GROUP_SIZE = 2

Group = Tuple[str, List[Record]]

logger = logging.getLogger(__name__)


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def folder_name(identifier: str, records: Sequence[Record]) -> str:
    """
    Generate a folder name from a domain or keyword.

    Example:
        >>> folder_name("github.com", records)  # 15 records
        'Github - 15 liens'
    """
    count = len(records)

    if "." in identifier:
        site_name = identifier.split(".")[0]
        return f"{_capitalize_first(site_name)} - {count} liens"

    return f"{_capitalize_first(identifier)} - {count} ressources"


def _group_by(
    records: Sequence[Record], key: Callable[[Record], Hashable]
) -> Dict[Hashable, List[Record]]:
    """Group records by key, keeping first-appearance order"""
    groups: Dict[Hashable, List[Record]] = defaultdict(list)
    for record in records:
        groups[key(record)].append(record)
    return dict(groups)


def group_by_category(records: Sequence[Record]) -> List[Tuple[Category, List[Record]]]:
    """Non-empty category groups in category order"""
    groups = _group_by(records, lambda record: record.category)
    return [(category, groups[category]) for category in Category if category in groups]


def group_by_keyword(records: Sequence[Record]) -> Dict[str, List[Record]]:
    """
    Group records by keyword.

    A record joins each of its keyword groups once. Keywords shared by fewer
    than two records form no group.
    """
    groups: Dict[str, List[Record]] = defaultdict(list)
    for record in records:
        for keyword in dict.fromkeys(record.keywords):
            groups[keyword].append(record)

    return {
        keyword: members
        for keyword, members in groups.items()
        if len(members) >= MIN_GROUP_SIZE
    }


class HierarchyBuilder:
    """
    Builds a bounded folder tree from classified records.

    Every record ends up in exactly one leaf. No node sits deeper than
    ``vertical_complexity`` below the root, and the root never has more than
    ``horizontal_complexity`` children.
    """

    def __init__(
        self,
        params: HierarchyParams,
        grouping: Optional[GroupingConfig] = None,
        root_label: str = ROOT_LABEL,
    ):
        """
        Initialize the builder.

        Args:
            params: Depth and breadth limits
            grouping: Sub-grouping settings (dominant domain policy)
            root_label: Label of the root folder
        """
        self.params = params
        self.grouping = grouping or GroupingConfig()
        self.root_label = root_label

    def build(self, records: Sequence[Record]) -> FolderNode:
        """
        Build the tree for a set of records.

        Args:
            records: Classified records

        Returns:
            Root folder of the generated tree

        Raises:
            NothingToClassifyError: If records is empty
        """
        if not records:
            raise NothingToClassifyError("Cannot build a hierarchy without bookmarks")

        horizontal = self.params.horizontal_complexity
        category_groups = group_by_category(records)

        if len(category_groups) <= horizontal:
            branches: List[Group] = [
                (category.label, members) for category, members in category_groups
            ]
        else:
            ranked = sorted(category_groups, key=lambda group: -len(group[1]))
            branches = [
                (category.label, members) for category, members in ranked[: horizontal - 1]
            ]
            others = [
                record for _, members in ranked[horizontal - 1 :] for record in members
            ]
            branches.append((OTHER_RESOURCES_LABEL, others))

        # Top-level branches sit at depth 1 and their leaves need one more level
        remaining_depth = self.params.vertical_complexity - 2

        root = FolderNode(
            label=self.root_label,
            children=tuple(
                self._build_branch(label, members, remaining_depth)
                for label, members in branches
            ),
            child_count=len(records),
        )

        logger.info(
            f"Built hierarchy for {len(records)} bookmarks with "
            f"{len(root.children)} top-level branches"
        )
        return root

    def _build_branch(
        self, label: str, records: List[Record], remaining_depth: int
    ) -> FolderNode:
        """
        Recursively build one branch.

        ``remaining_depth`` is the number of folder levels still allowed
        below this branch.
        """
        horizontal = self.params.horizontal_complexity
        name = f"{label} ({len(records)})"

        if remaining_depth <= 0 or len(records) <= horizontal:
            children: Tuple[Node, ...] = tuple(
                LeafNode(label=record.title, record=record) for record in records
            )
        else:
            subgroups = self._create_subgroups(records, horizontal)
            logger.debug(f"Split '{name}' into {len(subgroups)} sub-groups")
            children = tuple(
                self._build_branch(sub_label, members, remaining_depth - 1)
                for sub_label, members in subgroups
            )

        return FolderNode(label=name, children=children, child_count=len(records))

    def _create_subgroups(self, records: List[Record], max_groups: int) -> List[Group]:
        """
        Split records into domain groups, keyword groups and a catch-all.

        Args:
            records: Records of the branch being split
            max_groups: Maximum number of named groups

        Returns:
            Ordered (label, records) groups covering every record once
        """
        groups: List[Group] = []
        used: Set[int] = set()

        domain_groups = _group_by(records, lambda record: record.domain)
        dominant = [
            (domain, members)
            for domain, members in domain_groups.items()
            if len(members) >= self._dominance_threshold(len(members), len(records))
        ]
        dominant.sort(key=lambda group: -len(group[1]))
        dominant = dominant[: math.floor(max_groups * DOMAIN_GROUP_SHARE)]

        for domain, members in dominant:
            clean_domain = domain[4:] if domain.startswith("www.") else domain
            groups.append((folder_name(clean_domain, members), members))
            used.update(record.record_id for record in members)

        has_unused = any(record.record_id not in used for record in records)
        if has_unused and len(groups) < max_groups:
            slots = min(max_groups - len(groups), MAX_KEYWORD_GROUPS)
            candidates = [
                (keyword, members)
                for keyword, members in group_by_keyword(records).items()
                if any(record.record_id not in used for record in members)
            ]
            candidates.sort(key=lambda group: -len(group[1]))

            for keyword, members in candidates[:slots]:
                unused_members = [
                    record for record in members if record.record_id not in used
                ]
                if len(unused_members) < MIN_GROUP_SIZE:
                    continue
                groups.append(
                    (
                        f"{_capitalize_first(keyword)} ({len(unused_members)})",
                        unused_members,
                    )
                )
                used.update(record.record_id for record in unused_members)

        leftovers = [record for record in records if record.record_id not in used]
        if leftovers:
            groups.append((f"{MISC_LABEL} ({len(leftovers)})", leftovers))

        return groups

    def _dominance_threshold(self, group_size: int, parent_size: int) -> int:
        """
        Minimum size for a domain group to get its own folder.

        In "literal" mode the ratio applies to the domain group itself, which
        makes every domain with two or more bookmarks dominant. In "relative"
        mode it applies to the set being split.
        """
        ratio = self.grouping.dominance_ratio
        if self.grouping.dominance_mode == "relative":
            return max(MIN_GROUP_SIZE, math.ceil(parent_size * ratio))
        return max(MIN_GROUP_SIZE, math.ceil(group_size * ratio))


def create_hierarchy(
    records: Sequence[Record],
    params: HierarchyParams,
    grouping: Optional[GroupingConfig] = None,
) -> FolderNode:
    """
    Build a hierarchy with default settings.

    Example:
        >>> root = create_hierarchy(records, HierarchyParams(
        ...     vertical_complexity=4, horizontal_complexity=8))
    """
    return HierarchyBuilder(params, grouping).build(records)
