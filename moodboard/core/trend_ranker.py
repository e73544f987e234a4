"""
Trend Ranker

Turns the relevant subset into at most ``max_trends`` display-ready
trend entries, highest engagement first.
"""

from typing import List, Tuple
import logging

from moodboard.core.analysis_store import ColumnRoles, RawRecord, TrendEntry
from moodboard.core.keywords import NOT_AVAILABLE, UNKNOWN_PLATFORM
from moodboard.core.values import is_blank, parse_number, platform_label, to_fixed, to_text

logger = logging.getLogger(__name__)


def truncate_text(text: str, limit: int = 80) -> str:
    """Cut text to ``limit`` characters, appending "..." when cut."""
    if len(text) > limit:
        return text[:limit] + "..."
    return text


def rank_trends(
    records: List[RawRecord],
    roles: ColumnRoles,
    max_trends: int = 10,
    text_limit: int = 80,
) -> Tuple[TrendEntry, ...]:
    """
    Rank records by engagement and map them to trend entries.

    Rows with a blank trend cell are dropped. When an engagement column
    exists, rows whose engagement is not a finite number are dropped too
    (zero and negative values are kept) and the rest are sorted
    descending; ties keep their input order. Without an engagement
    column the input order is kept.

    Args:
        records: Relevant subset
        roles: Column role assignment
        max_trends: Maximum number of entries
        text_limit: Maximum trend text length before "..." is added

    Returns:
        Ranked trend entries
    """
    candidates = [
        record for record in records
        if roles.trend is not None and not is_blank(record.get(roles.trend))
    ]

    if roles.engagement:
        scored = []
        for record in candidates:
            value = parse_number(record.get(roles.engagement))
            if value is not None:
                scored.append((value, record))
        # sorted() is stable, reverse=True keeps ties in input order
        scored.sort(key=lambda pair: pair[0], reverse=True)
        ranked = scored[:max_trends]
    else:
        ranked = [(None, record) for record in candidates[:max_trends]]

    logger.debug(f"Ranked {len(ranked)} of {len(records)} relevant rows")

    return tuple(_to_entry(record, value, roles, text_limit) for value, record in ranked)


def _to_entry(record: RawRecord, engagement, roles: ColumnRoles, text_limit: int) -> TrendEntry:
    trend_text = to_text(record.get(roles.trend))

    return TrendEntry(
        trend=truncate_text(trend_text, text_limit),
        platform=platform_label(record.get(roles.platform)) if roles.platform else UNKNOWN_PLATFORM,
        engagement=to_fixed(engagement, 1) if engagement is not None else NOT_AVAILABLE,
        category=to_text(record.get(roles.category)) if roles.category else None,
        hashtags=to_text(record.get(roles.hashtags)) if roles.hashtags else None,
    )
