"""
Chrome HTML bookmark parser module.

Extracts (title, url) link pairs from Chrome HTML bookmark exports
(Netscape bookmark file format). Folder structure of the export is
ignored; the organizer rebuilds its own.
"""

import logging
import re
from pathlib import Path
from typing import Dict, List, NamedTuple, Union

from bs4 import BeautifulSoup


class ChromeHTMLError(Exception):
    """Base exception for Chrome HTML parsing errors."""

    pass


class ChromeHTMLStructureError(ChromeHTMLError):
    """Raised when HTML content cannot be parsed."""

    pass


class RawLink(NamedTuple):
    """An extracted anchor, before classification."""

    title: str
    url: str


class ChromeHTMLParser:
    """
    Parser for Chrome HTML bookmark exports.

    Every anchor with an http(s) ``href`` and a non-empty text becomes a
    link pair, in document order.
    """

    DOCTYPE_PATTERN = r"<!DOCTYPE\s+NETSCAPE-Bookmark-file-1>"
    SUPPORTED_ENCODINGS = ["utf-8", "utf-16", "iso-8859-1"]

    def __init__(self):
        """Initialize the Chrome HTML parser."""
        self.logger = logging.getLogger(__name__)

    def parse_file(self, file_path: Union[str, Path]) -> List[RawLink]:
        """
        Parse a Chrome HTML bookmark export file.

        Args:
            file_path: Path to the Chrome HTML bookmark file

        Returns:
            List of extracted links

        Raises:
            ChromeHTMLError: If the file cannot be read
        """
        file_path = Path(file_path)

        if not file_path.exists():
            raise ChromeHTMLError(f"File not found: {file_path}")

        html_content = self._read_html_file(file_path)
        links = self.parse_string(html_content)

        self.logger.info(f"Successfully parsed {len(links)} links from {file_path}")
        return links

    def parse_string(self, html_content: str) -> List[RawLink]:
        """
        Extract links from HTML content.

        Args:
            html_content: Raw HTML content

        Returns:
            List of extracted links
        """
        try:
            soup = BeautifulSoup(html_content, "html.parser")
        except Exception as e:
            raise ChromeHTMLStructureError(f"Invalid HTML structure: {str(e)}") from e

        if not re.search(self.DOCTYPE_PATTERN, html_content, re.IGNORECASE):
            self.logger.warning("Expected NETSCAPE-Bookmark-file-1 DOCTYPE not found")

        links = []
        for a_tag in soup.find_all("a", href=True):
            url = a_tag["href"].strip()
            title = a_tag.get_text().strip()

            if not title or not url.lower().startswith("http"):
                self.logger.debug(f"Skipping anchor without title or web URL: {url}")
                continue

            links.append(RawLink(title=title, url=url))

        return links

    def _read_html_file(self, file_path: Path) -> str:
        """
        Read HTML file trying the supported encodings in order.

        Raises:
            ChromeHTMLError: If file cannot be read
        """
        for encoding in self.SUPPORTED_ENCODINGS:
            try:
                with open(file_path, "r", encoding=encoding) as f:
                    return f.read()
            except UnicodeError:
                continue
            except OSError as e:
                raise ChromeHTMLError(f"Error reading file: {str(e)}") from e

        raise ChromeHTMLError(f"Unable to read file with supported encodings: {file_path}")

    def validate_file(self, file_path: Union[str, Path]) -> bool:
        """
        Validate if a file is a Chrome HTML bookmark export.

        Args:
            file_path: Path to the file to validate

        Returns:
            True if file appears to be a Chrome bookmark export
        """
        file_path = Path(file_path)

        if not file_path.exists() or file_path.suffix.lower() not in (".html", ".htm"):
            return False

        try:
            with open(file_path, "r", encoding="utf-8", errors="ignore") as f:
                header = f.read(1024)
        except OSError:
            return False

        return bool(re.search(self.DOCTYPE_PATTERN, header, re.IGNORECASE))

    def get_file_info(self, file_path: Union[str, Path]) -> Dict[str, object]:
        """
        Get information about a Chrome HTML bookmark file.

        Args:
            file_path: Path to the file

        Returns:
            Dictionary with file information
        """
        file_path = Path(file_path)

        info = {
            "path": str(file_path),
            "exists": file_path.exists(),
            "size_bytes": 0,
            "is_chrome_bookmarks": False,
            "estimated_bookmark_count": 0,
        }

        if not file_path.exists():
            return info

        info["size_bytes"] = file_path.stat().st_size
        info["is_chrome_bookmarks"] = self.validate_file(file_path)

        try:
            with open(file_path, "r", encoding="utf-8", errors="ignore") as f:
                content = f.read()
        except OSError as e:
            self.logger.warning(f"Error getting file info for {file_path}: {str(e)}")
            return info

        info["estimated_bookmark_count"] = len(
            re.findall(r"<A\s+HREF=", content, re.IGNORECASE)
        )
        return info
