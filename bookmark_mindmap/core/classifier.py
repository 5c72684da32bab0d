"""
Rule-based bookmark classifier.

Assigns each bookmark one category from the ordered rule table, extracts up
to three keywords from its title, and builds immutable Records from raw
(title, url) pairs.
"""

import logging
import re
from typing import Iterable, List, Sequence, Tuple
from urllib.parse import urlparse

from .classification_rules import CATEGORY_RULES, STOP_WORDS, CategoryRule
from .data_models import FALLBACK_CATEGORY, Category, Record

logger = logging.getLogger(__name__)

MAX_KEYWORDS = 3
MIN_KEYWORD_LENGTH = 4
ALLOWED_SCHEMES = ("http", "https")

# ASCII word characters only, accented letters split words
_NON_WORD_RE = re.compile(r"\W+", re.ASCII)


class InvalidURLError(ValueError):
    """Raised when a URL cannot be turned into a domain."""

    pass


class NothingToClassifyError(Exception):
    """Raised when no valid bookmark is left to organize."""

    pass


def classify(
    title: str, domain: str, rules: Sequence[CategoryRule] = CATEGORY_RULES
) -> Category:
    """
    Determine the category of a bookmark.

    Args:
        title: Bookmark title
        domain: Hostname of the bookmark URL
        rules: Ordered rule table, first match wins

    Returns:
        Matching category, or the fallback category when no rule matches
    """
    title_lower = title.lower()
    domain_lower = domain.lower()

    for rule in rules:
        domain_match = any(pattern.lower() in domain_lower for pattern in rule.domains)
        keyword_match = any(keyword.lower() in title_lower for keyword in rule.keywords)
        if domain_match or keyword_match:
            return rule.category

    return FALLBACK_CATEGORY


def extract_keywords(title: str) -> List[str]:
    """
    Extract significant keywords from a title.

    Keeps the first three words longer than three characters that are not
    stop words, in their original order.

    Example:
        >>> extract_keywords("React Tutorial for Beginners")
        ['react', 'tutorial', 'beginners']
    """
    words = _NON_WORD_RE.sub(" ", title.lower()).split()
    keywords = [
        word
        for word in words
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS
    ]
    return keywords[:MAX_KEYWORDS]


def domain_of(url: str) -> str:
    """
    Extract the lowercased hostname of a URL.

    Raises:
        InvalidURLError: If the URL is not an absolute http(s) URL
    """
    try:
        parsed = urlparse(url.strip())
        hostname = parsed.hostname
    except ValueError as e:
        raise InvalidURLError(f"Invalid URL: {url} ({e})") from e

    if parsed.scheme.lower() not in ALLOWED_SCHEMES:
        raise InvalidURLError(f"Unsupported URL scheme: {url}")
    if not hostname:
        raise InvalidURLError(f"URL has no hostname: {url}")

    return hostname.lower()


def build_records(links: Iterable[Tuple[str, str]]) -> List[Record]:
    """
    Classify raw (title, url) pairs into Records.

    Pairs with an empty title or an invalid URL are skipped with a warning.

    Args:
        links: Iterable of (title, url) pairs

    Returns:
        Records in input order, with sequential ``record_id`` values

    Raises:
        NothingToClassifyError: If no pair produced a record
    """
    records: List[Record] = []
    skipped = 0

    for title, url in links:
        title = (title or "").strip()
        if not title:
            logger.warning(f"Bookmark without title skipped: {url}")
            skipped += 1
            continue

        try:
            domain = domain_of(url)
        except InvalidURLError as e:
            logger.warning(f"Invalid URL: {url} - {e}")
            skipped += 1
            continue

        records.append(
            Record(
                record_id=len(records),
                title=title,
                url=url,
                category=classify(title, domain),
                keywords=tuple(extract_keywords(title)),
                domain=domain,
            )
        )

    if skipped:
        logger.info(f"Skipped {skipped} invalid bookmark(s)")

    if not records:
        raise NothingToClassifyError("No valid bookmark found to classify")

    logger.info(f"Classified {len(records)} bookmarks")
    return records
