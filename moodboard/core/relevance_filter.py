"""
Relevance Filter

Keeps the rows that mention fashion. Every cell of a row is joined
into one lowercase string and checked for keyword substrings.
"""

from typing import List, Sequence, Tuple
import logging

from moodboard.core.analysis_store import RawRecord
from moodboard.core.keywords import FASHION_KEYWORDS
from moodboard.core.values import to_text

logger = logging.getLogger(__name__)


def row_text(record: RawRecord) -> str:
    """Space-joined, lowercased text of all cells in a row."""
    return " ".join(to_text(value) for value in record.values()).lower()


def is_relevant(record: RawRecord, keywords: Sequence[str] = FASHION_KEYWORDS) -> bool:
    """Check whether any keyword occurs in the row's text."""
    text = row_text(record)
    return any(keyword in text for keyword in keywords)


def select_relevant(
    records: List[RawRecord],
    keywords: Sequence[str] = FASHION_KEYWORDS,
) -> Tuple[List[RawRecord], bool]:
    """
    Select the relevant subset of records.

    Callers must reject empty input first.

    Returns:
        (subset, used_fallback). When no row matches, the subset is the
        full input and used_fallback is True.
    """
    matched = [record for record in records if is_relevant(record, keywords)]

    if matched:
        logger.info(f"{len(matched)} of {len(records)} rows matched fashion keywords")
        return matched, False

    logger.info("No rows matched fashion keywords, analyzing the full dataset")
    return list(records), True
