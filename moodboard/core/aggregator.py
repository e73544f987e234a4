"""
Aggregator

Computes the platform distribution, hashtag frequencies and engagement
statistics of the relevant subset. The three computations are
independent of each other and of the trend ranking.
"""

from collections import Counter
from typing import List, Tuple
import logging
import re

from moodboard.core.analysis_store import (
    ColumnRoles,
    EngagementStats,
    HashtagCount,
    PlatformShare,
    RawRecord,
)
from moodboard.core.keywords import UNKNOWN_PLATFORM
from moodboard.core.values import parse_number, platform_label, to_fixed

logger = logging.getLogger(__name__)

_TAG_SEPARATOR = re.compile(r"[,\s]+")


def platform_distribution(
    records: List[RawRecord],
    roles: ColumnRoles,
    limit: int = 5,
) -> Tuple[PlatformShare, ...]:
    """
    Count rows per platform and return the most frequent ones.

    Percentages are relative to the number of records given (the
    relevant subset), formatted with one decimal and a "%" suffix.
    Platforms with equal counts keep first-seen order.
    """
    if not records:
        return ()

    counts: Counter = Counter()
    for record in records:
        platform = platform_label(record.get(roles.platform)) if roles.platform else UNKNOWN_PLATFORM
        counts[platform] += 1

    total = len(records)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:limit]

    return tuple(
        PlatformShare(
            platform=platform,
            count=count,
            percentage=f"{to_fixed(count / total * 100, 1)}%",
        )
        for platform, count in ranked
    )


def tokenize_hashtags(raw: str, min_length: int = 3) -> List[str]:
    """
    Split a hashtag cell into normalized tags.

    "#" characters are removed, the text is split on commas and
    whitespace, tokens are lowercased and anything shorter than
    ``min_length`` is discarded.
    """
    tokens = _TAG_SEPARATOR.split(raw.replace("#", ""))
    tags = []
    for token in tokens:
        clean = token.strip().lower()
        if clean and len(clean) >= min_length:
            tags.append(clean)
    return tags


def hashtag_distribution(
    records: List[RawRecord],
    roles: ColumnRoles,
    limit: int = 10,
    min_length: int = 3,
) -> Tuple[HashtagCount, ...]:
    """
    Count normalized hashtags across the hashtag column.

    Only text cells are read; numeric or boolean cells are skipped.
    Returns an empty tuple when there is no hashtag column.
    """
    if not roles.hashtags:
        return ()

    counts: Counter = Counter()
    for record in records:
        raw = record.get(roles.hashtags)
        if isinstance(raw, str) and raw:
            counts.update(tokenize_hashtags(raw, min_length))

    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)[:limit]
    return tuple(HashtagCount(hashtag=f"#{tag}", count=count) for tag, count in ranked)


def engagement_statistics(records: List[RawRecord], roles: ColumnRoles) -> EngagementStats:
    """
    Average, highest and lowest engagement.

    Only finite values strictly greater than zero count. This is
    stricter than the trend ranking, which keeps zero and negative
    values. All three figures are 0 when nothing qualifies.
    """
    if not roles.engagement:
        return EngagementStats()

    values = []
    for record in records:
        value = parse_number(record.get(roles.engagement))
        if value is not None and value > 0:
            values.append(value)

    if not values:
        return EngagementStats()

    return EngagementStats(
        average=sum(values) / len(values),
        highest=max(values),
        lowest=min(values),
    )
