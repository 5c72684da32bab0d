"""
Base classes for mind-map exporters.

This module provides the abstract base class and common utilities
for all tree export formats.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging

from ...config.pydantic_config import ExportOptions
from ..data_models import FolderNode, iter_folders, iter_leaves


@dataclass
class ExportResult:
    """
    Result of an export operation.

    Attributes:
        path: Path to the exported file
        count: Number of bookmarks exported
        format_name: Name of the export format used
        exported_at: Timestamp of the export
        additional_info: Any format-specific additional information
        warnings: List of non-fatal warnings during export
    """

    path: Path
    count: int
    format_name: str
    exported_at: datetime = field(default_factory=datetime.now)
    additional_info: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        return (
            f"ExportResult(format={self.format_name}, "
            f"count={self.count}, path={self.path})"
        )


class ExportError(Exception):
    """
    Exception raised when export fails.

    Attributes:
        message: Error description
        format_name: Name of the export format
        path: Target path if available
        original_error: Underlying exception if any
    """

    def __init__(
        self,
        message: str,
        format_name: Optional[str] = None,
        path: Optional[Path] = None,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.format_name = format_name
        self.path = path
        self.original_error = original_error
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        parts = []
        if self.format_name:
            parts.append(f"[{self.format_name}]")
        parts.append(self.message)
        if self.path:
            parts.append(f"(path: {self.path})")
        if self.original_error:
            parts.append(f"Caused by: {type(self.original_error).__name__}: {self.original_error}")
        return " ".join(parts)


class TreeExporter(ABC):
    """
    Abstract base class for tree exporters.

    Exporters render an already filtered tree; they do not apply
    ExportOptions themselves.
    """

    filename_prefix = "bookmarks_reorganized"

    def __init__(self):
        """Initialize the exporter."""
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def render(self, root: FolderNode) -> str:
        """
        Render a tree to the export format.

        Args:
            root: Root folder of the tree

        Returns:
            Document text
        """
        pass

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Human-readable name of the export format."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Default file extension for this format, without leading dot."""
        pass

    def export(self, root: FolderNode, output_path: Union[str, Path]) -> ExportResult:
        """
        Render a tree and write it as UTF-8.

        Args:
            root: Root folder of the tree
            output_path: Target file

        Returns:
            ExportResult with export details

        Raises:
            ExportError: If export fails
        """
        path = self.prepare_output_path(output_path)

        if path.suffix.lower() != f".{self.file_extension}":
            path = path.with_suffix(f".{self.file_extension}")

        warnings = []
        bookmark_count = sum(1 for _ in iter_leaves(root))
        if bookmark_count == 0:
            warnings.append("No bookmarks in exported tree")

        try:
            document = self.render(root)
            with open(path, "w", encoding="utf-8") as f:
                f.write(document)
        except OSError as e:
            raise ExportError(
                f"Failed to write {self.format_name} file: {e}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )

        self.logger.info(f"{self.format_name} file \"{path}\" generated successfully")

        return ExportResult(
            path=path,
            count=bookmark_count,
            format_name=self.format_name,
            additional_info={
                "folders": sum(1 for _ in iter_folders(root)),
                "file_size": path.stat().st_size
            },
            warnings=warnings
        )

    def prepare_output_path(self, output_path: Union[str, Path]) -> Path:
        """
        Ensure the parent directory of the output path exists.

        Raises:
            ExportError: If the directory cannot be created
        """
        path = Path(output_path)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except PermissionError as e:
            raise ExportError(
                f"Permission denied creating path: {path}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )
        except OSError as e:
            raise ExportError(
                f"Failed to prepare output path: {path}",
                format_name=self.format_name,
                path=path,
                original_error=e
            )

        return path

    def default_filename(
        self, options: Optional[ExportOptions] = None, export_date: Optional[date] = None
    ) -> str:
        """
        Suggested filename for an export.

        Example:
            >>> FreeMindExporter().default_filename(ExportOptions(), date(2024, 1, 15))
            'bookmarks_reorganized_2024-01-15_full.mm'
        """
        options = options or ExportOptions()
        export_date = export_date or date.today()
        return (
            f"{self.filename_prefix}_{export_date.isoformat()}_"
            f"{options.variant_tag}.{self.file_extension}"
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(format={self.format_name})"
