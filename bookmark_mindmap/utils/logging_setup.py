"""
Logging configuration for the Bookmark Mind-Map Organizer.

This module sets up file and console logging.
"""

import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional


def setup_logging(
    verbose: bool = False,
    log_file: Optional[str] = None,
    console_output: bool = True,
) -> Path:
    """
    Set up logging configuration.

    Args:
        verbose: Log at DEBUG level instead of INFO
        log_file: Optional log file name override
        console_output: Also log to stdout

    Returns:
        Path of the log file
    """
    log_level = "DEBUG" if verbose else "INFO"

    if log_file is None:
        log_file = "bookmark_mindmap.log"

    # Create logs directory if needed
    if getattr(sys, "frozen", False):
        app_dir = Path(sys.executable).parent
    else:
        app_dir = Path.cwd()

    log_dir = app_dir / "logs"
    log_dir.mkdir(exist_ok=True)

    # Create timestamped log file
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = log_dir / f"{Path(log_file).stem}_{timestamp}.log"

    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"

    handlers = []

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(log_format, date_format))
    handlers.append(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(logging.Formatter(log_format, date_format))
        handlers.append(console_handler)

    logging.basicConfig(
        level=getattr(logging, log_level), handlers=handlers, force=True
    )

    logger = logging.getLogger(__name__)
    logger.info(f"Bookmark Mind-Map Organizer starting - Log file: {log_path}")
    logger.info(f"Log level: {log_level}")

    # Reduce noise from the HTML parser
    logging.getLogger("bs4").setLevel(logging.WARNING)

    return log_path
