"""
Input validation utilities for the Bookmark Mind-Map Organizer.

This module provides validation functions for command-line arguments
and other user inputs.
"""

import os
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError as PydanticValidationError

from bookmark_mindmap.config.pydantic_config import HierarchyParams, field_error_hint


class ValidationError(Exception):
    """Custom exception for validation errors."""

    pass


def validate_input_file(file_path: Union[str, Path, None]) -> Path:
    """
    Validate that the input bookmark export exists and is readable.

    Raises:
        ValidationError: If file doesn't exist, isn't readable or isn't HTML
    """
    if not file_path:
        raise ValidationError("Input file is required (use --input/-i)")

    path = Path(file_path)

    if not path.exists():
        raise ValidationError(f"Input file does not exist: {file_path}")

    if not path.is_file():
        raise ValidationError(f"Input path is not a file: {file_path}")

    if not os.access(path, os.R_OK):
        raise ValidationError(f"Input file is not readable: {file_path}")

    allowed_extensions = [".html", ".htm"]
    if path.suffix.lower() not in allowed_extensions:
        raise ValidationError(f"Input file must be an HTML bookmark export, got: {path.suffix}")

    return path.absolute()


def validate_output_file(file_path: Union[str, Path, None]) -> Optional[Path]:
    """
    Validate that the output file path is writable.

    Returns:
        Validated Path object, or None to use the generated filename

    Raises:
        ValidationError: If path isn't writable
    """
    if not file_path:
        return None

    path = Path(file_path)

    parent = path.parent
    if not parent.exists():
        try:
            parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ValidationError(f"Cannot create output directory: {parent}: {e}")

    if not os.access(parent, os.W_OK):
        raise ValidationError(f"Output directory is not writable: {parent}")

    if path.exists() and not os.access(path, os.W_OK):
        raise ValidationError(f"Output file exists and is not writable: {file_path}")

    return path


def validate_complexity(value: Optional[int], name: str) -> Optional[int]:
    """
    Check a complexity argument against the HierarchyParams bounds.

    Args:
        value: Value from the command line, None if not given
        name: Field name on HierarchyParams

    Raises:
        ValidationError: If the value is out of range
    """
    if value is None:
        return None

    try:
        HierarchyParams(**{name: value})
    except PydanticValidationError as e:
        hint = field_error_hint((name,), HierarchyParams)
        if not hint:
            hint = f"{name.replace('_', ' ').capitalize()}: {e.errors()[0]['msg']}."
        raise ValidationError(f"{hint} Got: {value}")

    return value
