"""
Analysis Store

Data structures produced by the trend analysis pipeline: the column
role assignment, ranked trend entries, distributions and the final
analysis result handed to report generators and the web API.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional, Any, Tuple
import json

from moodboard.core.keywords import ColumnRole


# A parsed CSV row: column name -> str | int | float | bool | None
RawRecord = Dict[str, Any]


@dataclass(frozen=True)
class ColumnRoles:
    """Which CSV column plays each logical role. None means absent."""
    trend: Optional[str] = None
    platform: Optional[str] = None
    engagement: Optional[str] = None
    category: Optional[str] = None
    hashtags: Optional[str] = None

    def get(self, role: str) -> Optional[str]:
        """Get the column assigned to a role."""
        if role not in ColumnRole.ALL:
            raise KeyError(role)
        return getattr(self, role)

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {role: self.get(role) for role in ColumnRole.ALL}


@dataclass(frozen=True)
class TrendEntry:
    """One ranked, display-ready row."""
    trend: str
    platform: str
    engagement: str  # Fixed-point string or "N/A"
    category: Optional[str] = None
    hashtags: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "trend": self.trend,
            "platform": self.platform,
            "engagement": self.engagement,
        }
        if self.category is not None:
            data["category"] = self.category
        if self.hashtags is not None:
            data["hashtags"] = self.hashtags
        return data


@dataclass(frozen=True)
class PlatformShare:
    """Platform frequency within the relevant subset."""
    platform: str
    count: int
    percentage: str  # e.g. "33.3%"

    def to_dict(self) -> Dict[str, Any]:
        return {"platform": self.platform, "count": self.count, "percentage": self.percentage}


@dataclass(frozen=True)
class HashtagCount:
    """Normalized hashtag frequency."""
    hashtag: str  # Always "#"-prefixed
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"hashtag": self.hashtag, "count": self.count}


@dataclass(frozen=True)
class EngagementStats:
    """Engagement statistics over strictly positive values."""
    average: float = 0.0
    highest: float = 0.0
    lowest: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {"average": self.average, "highest": self.highest, "lowest": self.lowest}


@dataclass(frozen=True)
class AnalysisResult:
    """
    Complete result of one CSV analysis.

    This is the only artifact consumers see. ``to_dict`` uses the
    camelCase keys expected by the web frontend.
    """
    trends: Tuple[TrendEntry, ...] = field(default_factory=tuple)
    total_records: int = 0
    fashion_records: int = 0
    top_platforms: Tuple[PlatformShare, ...] = field(default_factory=tuple)
    top_hashtags: Tuple[HashtagCount, ...] = field(default_factory=tuple)
    engagement_stats: EngagementStats = field(default_factory=EngagementStats)
    column_roles: ColumnRoles = field(default_factory=ColumnRoles)
    used_fallback: bool = False  # No row matched a fashion keyword

    def to_dict(self) -> Dict[str, Any]:
        """Convert result to dictionary for serialization."""
        return {
            "trends": [t.to_dict() for t in self.trends],
            "totalRecords": self.total_records,
            "fashionRecords": self.fashion_records,
            "topPlatforms": [p.to_dict() for p in self.top_platforms],
            "topHashtags": [h.to_dict() for h in self.top_hashtags],
            "engagementStats": self.engagement_stats.to_dict(),
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert result to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def get_statistics(self) -> Dict[str, Any]:
        """Get summary statistics."""
        return {
            "total_records": self.total_records,
            "fashion_records": self.fashion_records,
            "trend_count": len(self.trends),
            "platform_count": len(self.top_platforms),
            "hashtag_count": len(self.top_hashtags),
            "average_engagement": self.engagement_stats.average,
            "column_roles": self.column_roles.to_dict(),
        }
