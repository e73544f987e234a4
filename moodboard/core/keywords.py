"""
Static keyword tables used by the analysis pipeline.

Column role detection and fashion relevance filtering both run off
these tables. They are never modified at runtime.
"""

from types import MappingProxyType


class ColumnRole:
    """Logical roles a CSV column can play."""
    TREND = "trend"
    PLATFORM = "platform"
    ENGAGEMENT = "engagement"
    CATEGORY = "category"
    HASHTAGS = "hashtags"

    ALL = (TREND, PLATFORM, ENGAGEMENT, CATEGORY, HASHTAGS)


# Header substrings per role, matched case-insensitively in header order
ROLE_PATTERNS = MappingProxyType({
    ColumnRole.TREND: ("trend", "title", "content", "description", "name", "topic", "text"),
    ColumnRole.PLATFORM: ("platform",),
    ColumnRole.ENGAGEMENT: ("engagement", "rate", "score", "likes", "views", "shares", "count"),
    ColumnRole.CATEGORY: ("category",),
    ColumnRole.HASHTAGS: ("hashtag", "tag", "tags"),
})

FASHION_KEYWORDS = (
    "fashion", "style", "outfit", "clothing", "dress", "shirt", "pants",
    "shoes", "accessories", "jewelry", "handbag", "makeup", "beauty",
    "skincare", "hair", "nails", "aesthetic", "ootd", "lookbook",
    "thrift", "vintage", "designer", "brand", "trendy", "chic",
    "minimalist", "maximalist", "streetwear", "formal", "casual",
    "cottagecore", "y2k", "grunge", "preppy", "bohemian", "gothic",
    "sustainable", "ethical", "slow fashion", "fast fashion",
)

UNKNOWN_PLATFORM = "Unknown"
NOT_AVAILABLE = "N/A"
