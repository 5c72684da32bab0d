"""
Command-line interface for the Bookmark Mind-Map Organizer.

This module provides the CLI for turning a Chrome HTML bookmark export
into a FreeMind mind map organized by topic, domain and keyword.
"""

import argparse
import logging
import sys
from pathlib import Path

from bookmark_mindmap.config.pydantic_config import ConfigurationManager
from bookmark_mindmap.core.chrome_html_parser import ChromeHTMLError, ChromeHTMLParser
from bookmark_mindmap.core.classifier import NothingToClassifyError
from bookmark_mindmap.core.exporters import ExportError
from bookmark_mindmap.core.mindmap_pipeline import MindMapPipeline
from bookmark_mindmap.core.reporting import format_stats, format_tree_preview
from bookmark_mindmap.utils.logging_setup import setup_logging
from bookmark_mindmap.utils.validation import (
    ValidationError,
    validate_complexity,
    validate_input_file,
    validate_output_file,
)


class CLIInterface:
    """Command line interface for the mind-map organizer."""

    def __init__(self):
        self.parser = self._create_parser()

    def _create_parser(self) -> argparse.ArgumentParser:
        """Create argument parser."""
        parser = argparse.ArgumentParser(
            prog="bookmark-mindmap",
            description=(
                "Bookmark Mind-Map Organizer - "
                "Convert Chrome bookmark exports into FreeMind mind maps"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  bookmark-mindmap --input bookmarks.html
  bookmark-mindmap --input bookmarks.html --output my_bookmarks.mm
  bookmark-mindmap --input bookmarks.html --vertical 6 --horizontal 12
  bookmark-mindmap --input bookmarks.html --no-bookmarks --preview
  bookmark-mindmap --input bookmarks.html --config mindmap_config.toml
  bookmark-mindmap --create-config mindmap_config.toml

Hierarchy:
  --vertical sets the maximum depth of the tree (2-8 levels).
  --horizontal sets the maximum number of branches per level (3-15).
  Bookmarks are grouped by category, then by dominant domain, then by
  shared keyword.

Configuration:
  Settings can be provided via TOML or JSON files (--config) or the
  environment variables MINDMAP_VERTICAL_COMPLEXITY,
  MINDMAP_HORIZONTAL_COMPLEXITY and MINDMAP_DOMINANCE_MODE.
  Command-line arguments take precedence.
            """,
        )

        parser.add_argument(
            "--version", "-V", action="version", version="%(prog)s 1.0.0"
        )

        parser.add_argument(
            "--input",
            "-i",
            help="Chrome HTML bookmark export",
        )
        parser.add_argument(
            "--output",
            "-o",
            help="Output FreeMind file "
            "(default: bookmarks_reorganized_<date>_<variant>.mm)",
        )
        parser.add_argument(
            "--config",
            "-c",
            help="Custom configuration file path (TOML or JSON format)",
        )
        parser.add_argument(
            "--vertical",
            type=int,
            help="Maximum tree depth, 2-8 (default: 4)",
        )
        parser.add_argument(
            "--horizontal",
            type=int,
            help="Maximum branches per level, 3-15 (default: 8)",
        )
        parser.add_argument(
            "--no-bookmarks",
            action="store_true",
            help="Export folders only",
        )
        parser.add_argument(
            "--no-folders",
            action="store_true",
            help="Flatten folders in the export",
        )
        parser.add_argument(
            "--dominance",
            choices=["literal", "relative"],
            help="Dominant domain threshold: 'literal' (any domain with 2+ "
            "bookmarks) or 'relative' (share of the branch being split)",
        )
        parser.add_argument(
            "--preview",
            action="store_true",
            help="Print the generated hierarchy",
        )
        parser.add_argument(
            "--create-config",
            metavar="PATH",
            help="Write a sample configuration file (TOML, or JSON for a .json "
            "path) and exit",
        )
        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Enable verbose output with debug logging and statistics",
        )

        return parser

    def parse_args(self, args=None) -> argparse.Namespace:
        """Parse command line arguments."""
        return self.parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> dict:
        """
        Validate all arguments and return processed values.

        Raises:
            ValidationError: If any validation fails
        """
        return {
            "input_path": validate_input_file(args.input),
            "output_path": validate_output_file(args.output),
            "config_path": args.config,
            "vertical_complexity": validate_complexity(args.vertical, "vertical_complexity"),
            "horizontal_complexity": validate_complexity(
                args.horizontal, "horizontal_complexity"
            ),
            "no_bookmarks": args.no_bookmarks,
            "no_folders": args.no_folders,
            "dominance_mode": args.dominance,
            "preview": args.preview,
            "verbose": args.verbose,
        }

    def run(self, args=None) -> int:
        """Execute CLI interface."""
        try:
            parsed_args = self.parse_args(args)

            if parsed_args.create_config:
                return self._create_config(parsed_args.create_config, parsed_args.config)

            validated_args = self.validate_args(parsed_args)

            manager = ConfigurationManager(validated_args["config_path"])
            manager.update_from_cli_args(validated_args)
            config = manager.config

            setup_logging(verbose=validated_args["verbose"])
            logger = logging.getLogger(__name__)
            logger.info(f"Input file: {validated_args['input_path']}")
            logger.info(
                f"Complexity: vertical={config.hierarchy.vertical_complexity}, "
                f"horizontal={config.hierarchy.horizontal_complexity}"
            )

            html_parser = ChromeHTMLParser()
            file_info = html_parser.get_file_info(validated_args["input_path"])
            logger.info(
                f"Input size: {file_info['size_bytes']} bytes, "
                f"about {file_info['estimated_bookmark_count']} links"
            )
            if not file_info["is_chrome_bookmarks"]:
                logger.warning(
                    "Input does not look like a Chrome bookmark export, "
                    "extracting links anyway"
                )

            links = html_parser.parse_file(validated_args["input_path"])

            pipeline = MindMapPipeline(config)
            results = pipeline.run(links)

            if validated_args["verbose"]:
                print(format_stats(results.stats))
                if results.skipped_links:
                    print(f"Skipped links: {results.skipped_links}")

            if validated_args["preview"]:
                print(format_tree_preview(results.export_tree))

            export_result = pipeline.export(results, validated_args["output_path"])
            for warning in export_result.warnings:
                print(f"Warning: {warning}", file=sys.stderr)

            print(f"Exported {export_result.count} bookmarks to {export_result.path}")
            return 0

        except ValidationError as e:
            print(f"Validation Error: {e}", file=sys.stderr)
            return 1
        except NothingToClassifyError as e:
            print(f"No bookmarks found: {e}", file=sys.stderr)
            return 1
        except (ChromeHTMLError, ExportError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    def _create_config(self, output_path: str, config_path=None) -> int:
        """Write a sample configuration file."""
        path = Path(output_path)
        fmt = "json" if path.suffix.lower() == ".json" else "toml"

        manager = ConfigurationManager(config_path)
        try:
            manager.create_sample_config(path, format=fmt)
        except OSError as e:
            print(f"Error: Cannot write configuration file {path}: {e}", file=sys.stderr)
            return 1

        print(f"Sample configuration written to {path}")
        return 0


def main(args=None):
    """Main entry point for the CLI."""
    cli = CLIInterface()
    return cli.run(args)


if __name__ == "__main__":
    sys.exit(main())
