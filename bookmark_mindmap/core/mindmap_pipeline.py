"""
Mind-map pipeline

Runs the full conversion: link pairs are classified into records, organized
into a tree, filtered for export and rendered as a FreeMind document.
Every run rebuilds the tree from scratch.
"""

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from ..config.pydantic_config import MindMapConfig
from .classifier import build_records
from .data_models import BookmarkStats, FolderNode, Node, Record
from .exporters import ExportResult, FreeMindExporter
from .hierarchy_builder import HierarchyBuilder
from .reporting import compute_stats
from .tree_filter import filter_tree


@dataclass
class PipelineResults:
    """Results of pipeline execution"""

    records: List[Record]
    stats: BookmarkStats
    hierarchy: FolderNode
    export_tree: Node
    document: str
    processing_time: float
    skipped_links: int = 0
    warnings: List[str] = field(default_factory=list)


class MindMapPipeline:
    """
    Converts raw bookmark links into a FreeMind document.

    Example:
        >>> pipeline = MindMapPipeline(MindMapConfig())
        >>> results = pipeline.run([("GitHub - my repo", "https://github.com/x")])
        >>> pipeline.export(results, Path("bookmarks.mm"))
    """

    def __init__(self, config: Optional[MindMapConfig] = None):
        self.config = config or MindMapConfig()
        self.exporter = FreeMindExporter()
        self.exporter.filename_prefix = self.config.output.filename_prefix
        self.logger = logging.getLogger(__name__)

    def run(self, links: Iterable[Tuple[str, str]]) -> PipelineResults:
        """
        Run the pipeline on (title, url) pairs.

        Raises:
            NothingToClassifyError: If no valid bookmark remains
        """
        start_time = time.time()
        links = list(links)

        records = build_records(links)
        stats = compute_stats(records)

        builder = HierarchyBuilder(
            self.config.hierarchy,
            grouping=self.config.grouping,
            root_label=self.config.output.root_label,
        )
        hierarchy = builder.build(records)

        warnings = []
        export_tree = filter_tree(hierarchy, self.config.export)
        if export_tree is None:
            warnings.append(
                f"Export options left nothing to export "
                f"({self.config.export.variant_tag})"
            )
            self.logger.warning(warnings[-1])
            export_tree = FolderNode(label=hierarchy.label)

        document = self.exporter.render(export_tree)
        processing_time = time.time() - start_time

        self.logger.info(
            f"Generated mind map for {len(records)} bookmarks in {processing_time:.2f}s"
        )

        return PipelineResults(
            records=records,
            stats=stats,
            hierarchy=hierarchy,
            export_tree=export_tree,
            document=document,
            processing_time=processing_time,
            skipped_links=len(links) - len(records),
            warnings=warnings,
        )

    def default_output_path(self, directory: Union[str, Path] = ".") -> Path:
        """Output path following the dated filename convention"""
        return Path(directory) / self.exporter.default_filename(self.config.export)

    def export(
        self, results: PipelineResults, output_path: Union[str, Path, None] = None
    ) -> ExportResult:
        """
        Write the rendered document of a pipeline run.

        Raises:
            ExportError: If the file cannot be written
        """
        path = Path(output_path) if output_path else self.default_output_path()
        result = self.exporter.export(results.export_tree, path)
        result.warnings.extend(results.warnings)
        return result
