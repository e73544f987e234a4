"""Core modules for Moodboard AI."""

from moodboard.core.column_classifier import ColumnClassifier
from moodboard.core.csv_loader import CSVAnalysisError, UploadValidationError, parse_csv
from moodboard.core.analysis_store import AnalysisResult
from moodboard.core.trend_analyzer import TrendAnalyzer

__all__ = [
    "ColumnClassifier",
    "CSVAnalysisError",
    "UploadValidationError",
    "parse_csv",
    "AnalysisResult",
    "TrendAnalyzer",
]
