"""
Column Classifier

Infers which CSV column holds the trend text, platform, engagement
metric, category and hashtags from header names alone.
"""

from typing import Dict, List, Optional, Sequence
import logging

from moodboard.core.analysis_store import ColumnRoles, RawRecord
from moodboard.core.keywords import ColumnRole, ROLE_PATTERNS

logger = logging.getLogger(__name__)


class ColumnClassifier:
    """
    Assigns logical roles to CSV columns.

    Matching is case-insensitive substring containment against
    ``ROLE_PATTERNS``. Columns are scanned in header order and the first
    match wins; there is no scoring. A column may serve several roles.
    """

    def __init__(self, role_patterns=ROLE_PATTERNS):
        self.role_patterns = role_patterns

    def classify(self, columns: Sequence[str]) -> ColumnRoles:
        """
        Build the role assignment for a header.

        Args:
            columns: Column names in header order

        Returns:
            Role assignment; ``trend`` falls back to the first column
        """
        assignment: Dict[str, Optional[str]] = {
            role: self._find_column(columns, self.role_patterns[role])
            for role in ColumnRole.ALL
        }

        if assignment[ColumnRole.TREND] is None and columns:
            assignment[ColumnRole.TREND] = columns[0]

        roles = ColumnRoles(**assignment)
        logger.debug(f"Column roles: {roles.to_dict()}")
        return roles

    def classify_records(self, records: List[RawRecord]) -> ColumnRoles:
        """Classify using the header of the first record."""
        columns = list(records[0].keys()) if records else []
        return self.classify(columns)

    @staticmethod
    def _find_column(columns: Sequence[str], patterns: Sequence[str]) -> Optional[str]:
        for column in columns:
            col_lower = column.lower()
            if any(pattern in col_lower for pattern in patterns):
                return column
        return None


def classify_columns(columns: Sequence[str]) -> ColumnRoles:
    """Classify a header with the default keyword tables."""
    return ColumnClassifier().classify(columns)
