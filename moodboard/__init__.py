"""
Moodboard AI - Fashion Trend Dataset Analyzer

Upload a social-media CSV export and get the top fashion trends,
platform and hashtag distributions, engagement statistics and
AI-written market insights.
"""

__version__ = "1.0.0"
__author__ = "Moodboard AI Team"

from moodboard.config import MoodboardConfig
from moodboard.core.trend_analyzer import TrendAnalyzer

__all__ = ["MoodboardConfig", "TrendAnalyzer", "__version__"]
