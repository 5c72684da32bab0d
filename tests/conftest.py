"""
Pytest configuration and shared fixtures for bookmark mind-map tests.

This module provides common fixtures and record factories shared across
multiple test modules.
"""

import shutil
import tempfile
from pathlib import Path
from typing import Callable, Generator, List, Tuple

import pytest

from bookmark_mindmap.config.pydantic_config import HierarchyParams
from bookmark_mindmap.core.classifier import build_records
from bookmark_mindmap.core.data_models import Category, Record

# ============================================================================
# Temporary Directory and File Fixtures
# ============================================================================


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    temp_path = Path(tempfile.mkdtemp(prefix="mindmap_test_"))
    try:
        yield temp_path
    finally:
        if temp_path.exists():
            shutil.rmtree(temp_path)


@pytest.fixture
def sample_chrome_html() -> str:
    """Sample Chrome bookmark HTML content."""
    return '''<!DOCTYPE NETSCAPE-Bookmark-file-1>
<!-- This is an automatically generated file.
     It will be read and overwritten.
     DO NOT EDIT! -->
<META HTTP-EQUIV="Content-Type" CONTENT="text/html; charset=UTF-8">
<TITLE>Bookmarks</TITLE>
<H1>Bookmarks</H1>
<DL><p>
    <DT><H3 ADD_DATE="1715434444" PERSONAL_TOOLBAR_FOLDER="true">Bookmarks bar</H3>
    <DL><p>
        <DT><A HREF="https://github.com/x" ADD_DATE="1717175221">GitHub - my repo</A>
        <DT><A HREF="https://stackoverflow.com/q/1" ADD_DATE="1717175261">Stack Overflow answer</A>
        <DT><A HREF="javascript:void(0)" ADD_DATE="1717175273">Bookmarklet</A>
    </DL><p>
    <DT><H3 ADD_DATE="1634868593">Other Folder</H3>
    <DL><p>
        <DT><A HREF="https://www.youtube.com/watch?v=1" ADD_DATE="1634868593">Conference talk</A>
        <DT><A HREF="https://example.com/empty" ADD_DATE="1634868593"></A>
    </DL><p>
</DL><p>'''


@pytest.fixture
def chrome_html_file(temp_dir: Path, sample_chrome_html: str) -> Path:
    """Write the sample Chrome export to disk."""
    path = temp_dir / "bookmarks.html"
    path.write_text(sample_chrome_html, encoding="utf-8")
    return path


# ============================================================================
# Record Fixtures
# ============================================================================


@pytest.fixture
def make_record() -> Callable[..., Record]:
    """Factory building records directly, bypassing classification."""
    counter = iter(range(100000))

    def _make(
        title: str = "Example",
        domain: str = "example.com",
        category: Category = Category.VARIOUS_RESOURCES,
        keywords: Tuple[str, ...] = (),
        url: str = "",
    ) -> Record:
        record_id = next(counter)
        return Record(
            record_id=record_id,
            title=title,
            url=url or f"https://{domain}/{record_id}",
            category=category,
            keywords=tuple(keywords),
            domain=domain,
        )

    return _make


@pytest.fixture
def end_to_end_records() -> List[Record]:
    """The two-record reference scenario."""
    return build_records(
        [
            ("GitHub - my repo", "https://github.com/x"),
            ("Stack Overflow answer", "https://stackoverflow.com/q/1"),
        ]
    )


@pytest.fixture
def mixed_records() -> List[Record]:
    """A realistic collection spread over several categories and domains."""
    links = []
    for i in range(12):
        links.append((f"Project {i} source", f"https://github.com/user/project{i}"))
    for i in range(5):
        links.append((f"Python question {i}", f"https://stackoverflow.com/q/{i}"))
    for i in range(4):
        links.append((f"Python reference page {i}", f"https://docs.python.org/3/p{i}"))
    for i in range(3):
        links.append((f"Music video {i}", f"https://www.youtube.com/watch?v={i}"))
    for i in range(6):
        links.append((f"Recipe collection {i}", f"https://recipes{i}.example.org/"))
    links.append(("Cheap shoes", "https://www.amazon.fr/shoes"))
    links.append(("Weekly newsletter", "https://substack.com/weekly"))
    return build_records(links)


@pytest.fixture
def default_params() -> HierarchyParams:
    """Default hierarchy parameters."""
    return HierarchyParams(vertical_complexity=4, horizontal_complexity=8)
