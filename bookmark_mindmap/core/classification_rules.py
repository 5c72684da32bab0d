"""
Classification rule table.

Ordered (category, domain substrings, title keyword substrings) entries
consumed by the classifier. The first matching entry wins, so the order of
``CATEGORY_RULES`` is part of the classification contract. Categories not
listed here fall through to ``FALLBACK_CATEGORY``.
"""

from dataclasses import dataclass
from typing import FrozenSet, Tuple

from .data_models import Category

RULES_VERSION = "1.0.0"


@dataclass(frozen=True)
class CategoryRule:
    """One entry of the rule table"""

    category: Category
    domains: Tuple[str, ...]
    keywords: Tuple[str, ...]


CATEGORY_RULES: Tuple[CategoryRule, ...] = (
    CategoryRule(
        category=Category.VIDEOS_MULTIMEDIA,
        domains=(
            "youtube.com",
            "vimeo.com",
            "dailymotion.com",
            "twitch.tv",
            "netflix.com",
            "amazon.com/prime",
        ),
        keywords=(
            "video",
            "film",
            "movie",
            "streaming",
            "watch",
            "multimedia",
            "cinema",
        ),
    ),
    CategoryRule(
        category=Category.DEVELOPMENT_CODE,
        domains=(
            "github.com",
            "gitlab.com",
            "bitbucket.org",
            "codepen.io",
            "jsfiddle.net",
            "replit.com",
        ),
        keywords=(
            "code",
            "programming",
            "development",
            "git",
            "api",
            "framework",
            "library",
            "dev",
        ),
    ),
    CategoryRule(
        category=Category.DOCUMENTATION_HELP,
        domains=("stackoverflow.com", "docs.", "documentation", "help.", "support.", "wiki"),
        keywords=(
            "documentation",
            "docs",
            "help",
            "tutorial",
            "guide",
            "reference",
            "manual",
            "how-to",
        ),
    ),
    CategoryRule(
        category=Category.ECOMMERCE_SHOPPING,
        domains=("amazon.", "ebay.", "shopify.", "etsy.com", "alibaba.", "aliexpress."),
        keywords=(
            "shop",
            "store",
            "buy",
            "sell",
            "price",
            "product",
            "cart",
            "commerce",
            "shopping",
        ),
    ),
    CategoryRule(
        category=Category.NEWS_BLOG,
        domains=("news", "blog", "medium.com", "wordpress.", "blogger.", "substack."),
        keywords=(
            "news",
            "blog",
            "article",
            "post",
            "actualité",
            "information",
            "journal",
            "magazine",
        ),
    ),
    CategoryRule(
        category=Category.SOCIAL_NETWORKS,
        domains=(
            "facebook.com",
            "twitter.com",
            "linkedin.com",
            "instagram.com",
            "tiktok.com",
            "reddit.com",
        ),
        keywords=(
            "social",
            "network",
            "share",
            "post",
            "follow",
            "friend",
            "community",
            "réseau",
        ),
    ),
    CategoryRule(
        category=Category.CLOUD_STORAGE,
        domains=("drive.google.com", "dropbox.com", "onedrive.", "icloud.com", "box.com"),
        keywords=(
            "cloud",
            "storage",
            "drive",
            "sync",
            "backup",
            "file",
            "share",
            "stockage",
        ),
    ),
    CategoryRule(
        category=Category.TOOLS_UTILITIES,
        domains=("tools.", "util", "app.", "chrome.google.com/webstore"),
        keywords=(
            "tool",
            "utility",
            "app",
            "service",
            "generator",
            "converter",
            "calculator",
            "outil",
        ),
    ),
    CategoryRule(
        category=Category.FORMATION_LEARNING,
        domains=("udemy.com", "coursera.org", "edx.org", "khan", "pluralsight.com", "lynda.com"),
        keywords=(
            "course",
            "learn",
            "education",
            "training",
            "tutorial",
            "formation",
            "cours",
            "école",
        ),
    ),
)

# Common French and English function words
STOP_WORDS: FrozenSet[str] = frozenset(
    [
        # French
        "le", "la", "les", "un", "une", "des", "du", "de", "et", "ou", "mais",
        "donc", "car", "ni", "or",
        # English
        "the", "a", "an", "and", "but", "in", "on", "at", "to", "for", "of",
        "with", "by", "from", "is", "are", "was", "were", "be", "been",
        "being", "have", "has", "had", "do", "does", "did", "will", "would",
        "could", "should", "may", "might", "can", "must", "shall", "this",
        "that", "these", "those", "it", "its", "they", "them", "their", "you",
        "your", "we", "our", "us",
    ]
)
