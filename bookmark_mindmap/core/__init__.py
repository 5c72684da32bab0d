"""
Core bookmark organizing modules.

This package contains the core functionality: Chrome HTML link extraction,
rule-based classification, hierarchy building, export filtering and
FreeMind rendering.
"""

from .chrome_html_parser import ChromeHTMLParser, ChromeHTMLError, ChromeHTMLStructureError
from .classifier import (
    InvalidURLError,
    NothingToClassifyError,
    build_records,
    classify,
    domain_of,
    extract_keywords,
)
from .data_models import Category, FolderNode, LeafNode, Node, Record
from .hierarchy_builder import HierarchyBuilder, create_hierarchy, folder_name
from .tree_filter import filter_tree

__all__ = [
    'ChromeHTMLParser',
    'ChromeHTMLError',
    'ChromeHTMLStructureError',
    'InvalidURLError',
    'NothingToClassifyError',
    'build_records',
    'classify',
    'domain_of',
    'extract_keywords',
    'Category',
    'FolderNode',
    'LeafNode',
    'Node',
    'Record',
    'HierarchyBuilder',
    'create_hierarchy',
    'folder_name',
    'filter_tree',
]
