"""
Trend Analyzer

Runs the full CSV analysis: parse, classify columns, filter for
fashion relevance, rank trends, aggregate, and assemble the result.
"""

from typing import List, Optional
import logging
import time

from moodboard.config import AnalysisConfig
from moodboard.core.aggregator import (
    engagement_statistics,
    hashtag_distribution,
    platform_distribution,
)
from moodboard.core.analysis_store import AnalysisResult, RawRecord
from moodboard.core.column_classifier import ColumnClassifier
from moodboard.core.csv_loader import CSVAnalysisError, parse_csv
from moodboard.core.relevance_filter import select_relevant
from moodboard.core.trend_ranker import rank_trends

logger = logging.getLogger(__name__)


class TrendAnalyzer:
    """
    Analyzes a fashion/social-media CSV dataset.

    The analyzer holds no per-run state, so one instance can serve any
    number of files. Running it twice on the same text gives identical
    results.
    """

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        classifier: Optional[ColumnClassifier] = None,
    ):
        """
        Initialize the analyzer.

        Args:
            config: Analysis limits (defaults apply when omitted)
            classifier: Column classifier to use
        """
        self.config = config or AnalysisConfig()
        self.classifier = classifier or ColumnClassifier()

    def analyze_csv(self, csv_text: str) -> AnalysisResult:
        """
        Analyze CSV text.

        Args:
            csv_text: Full CSV content, header row first

        Returns:
            Analysis result

        Raises:
            CSVAnalysisError: when the input has no data rows or cannot
                be parsed
        """
        if self.config.processing_delay_seconds > 0:
            time.sleep(self.config.processing_delay_seconds)

        try:
            records = parse_csv(csv_text)
            if not records:
                raise CSVAnalysisError("No data found in CSV file")
            return self.analyze_records(records)
        except Exception as e:
            logger.error(f"Error analyzing fashion dataset: {e}")
            raise CSVAnalysisError(f"Failed to analyze CSV data: {e}") from e

    def analyze_records(self, records: List[RawRecord]) -> AnalysisResult:
        """
        Analyze already parsed records.

        Args:
            records: Non-empty list of raw records

        Returns:
            Analysis result
        """
        if not records:
            raise CSVAnalysisError("No data found in CSV file")

        roles = self.classifier.classify_records(records)
        relevant, used_fallback = select_relevant(records)

        trends = rank_trends(
            relevant,
            roles,
            max_trends=self.config.max_trends,
            text_limit=self.config.trend_text_limit,
        )
        top_platforms = platform_distribution(relevant, roles, limit=self.config.max_platforms)
        top_hashtags = hashtag_distribution(
            relevant,
            roles,
            limit=self.config.max_hashtags,
            min_length=self.config.min_hashtag_length,
        )
        stats = engagement_statistics(relevant, roles)

        logger.info(
            f"Analyzed {len(relevant)} relevant records from {len(records)} total "
            f"({len(trends)} trends, {len(top_hashtags)} hashtags)"
        )

        return AnalysisResult(
            trends=trends,
            total_records=len(records),
            fashion_records=len(relevant),
            top_platforms=top_platforms,
            top_hashtags=top_hashtags,
            engagement_stats=stats,
            column_roles=roles,
            used_fallback=used_fallback,
        )


def analyze_fashion_dataset(csv_text: str, config: Optional[AnalysisConfig] = None) -> AnalysisResult:
    """Analyze CSV text with a one-off analyzer."""
    return TrendAnalyzer(config).analyze_csv(csv_text)
