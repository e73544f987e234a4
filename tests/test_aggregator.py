import pytest

from moodboard.core.aggregator import (
    engagement_statistics,
    hashtag_distribution,
    platform_distribution,
    tokenize_hashtags,
)
from moodboard.core.analysis_store import ColumnRoles, EngagementStats, HashtagCount, PlatformShare
from moodboard.core.values import to_fixed

ROLES = ColumnRoles(trend="title", platform="platform", engagement="engagement", hashtags="hashtags")


class TestPlatformDistribution:

    def test_counts_and_percentages(self):
        records = [{"platform": p} for p in ["TikTok", "Instagram", "TikTok", "X"]]

        shares = platform_distribution(records, ROLES)

        assert shares == (
            PlatformShare("TikTok", 2, "50.0%"),
            PlatformShare("Instagram", 1, "25.0%"),
            PlatformShare("X", 1, "25.0%"),
        )

    def test_top_five_of_many(self):
        platforms = ["A"] * 4 + ["B"] * 3 + ["C"] * 3 + ["D", "E", "F", "G"]
        records = [{"platform": p} for p in platforms]

        shares = platform_distribution(records, ROLES)

        assert [s.platform for s in shares] == ["A", "B", "C", "D", "E"]
        total = sum(float(s.percentage.rstrip("%")) for s in shares)
        assert total < 100
        for share in shares:
            assert share.percentage == f"{to_fixed(share.count / len(records) * 100, 1)}%"

    def test_unknown_without_platform_column(self):
        records = [{"title": "a"}, {"title": "b"}]

        shares = platform_distribution(records, ColumnRoles(trend="title"))

        assert shares == (PlatformShare("Unknown", 2, "100.0%"),)

    def test_blank_platform_cells_count_as_unknown(self):
        records = [{"platform": "TikTok"}, {"platform": None}, {"platform": "  "}, {"platform": "TikTok"}]

        shares = platform_distribution(records, ROLES)

        assert shares == (
            PlatformShare("TikTok", 2, "50.0%"),
            PlatformShare("Unknown", 2, "50.0%"),
        )

    def test_empty_input(self):
        assert platform_distribution([], ROLES) == ()


class TestHashtagDistribution:

    def test_tokenize_strips_hash_splits_and_drops_short_tags(self):
        assert tokenize_hashtags("#OOTD, #vintage  #y2k #ab,,#a") == ["ootd", "vintage", "y2k"]

    def test_counts_across_rows(self):
        records = [
            {"hashtags": "#ootd #vintage"},
            {"hashtags": "#OOTD,#thrift"},
            {"hashtags": "ootd"},
        ]

        tags = hashtag_distribution(records, ROLES)

        assert tags == (
            HashtagCount("#ootd", 3),
            HashtagCount("#vintage", 1),
            HashtagCount("#thrift", 1),
        )

    def test_short_tokens_never_reported(self):
        records = [{"hashtags": "#ab #cd #ab #xyz"}]

        tags = hashtag_distribution(records, ROLES)

        assert [t.hashtag for t in tags] == ["#xyz"]

    def test_non_text_cells_skipped(self):
        records = [{"hashtags": 12345}, {"hashtags": True}, {"hashtags": None}, {"hashtags": "#boho"}]

        tags = hashtag_distribution(records, ROLES)

        assert tags == (HashtagCount("#boho", 1),)

    def test_top_ten(self):
        records = [{"hashtags": " ".join(f"#tag{i}" for i in range(15))}]

        assert len(hashtag_distribution(records, ROLES)) == 10

    def test_no_hashtag_column(self):
        records = [{"hashtags": "#ootd"}]

        assert hashtag_distribution(records, ColumnRoles(trend="title")) == ()


class TestEngagementStatistics:

    def test_only_positive_numeric_values_count(self):
        records = [{"engagement": v} for v in [0, -5, "abc", None, 10, "30", 20.0]]

        stats = engagement_statistics(records, ROLES)

        assert stats == EngagementStats(average=20.0, highest=30.0, lowest=10.0)

    def test_zero_when_nothing_positive(self):
        records = [{"engagement": v} for v in [0, -1, "n/a"]]

        assert engagement_statistics(records, ROLES) == EngagementStats(0.0, 0.0, 0.0)

    def test_zero_without_engagement_column(self):
        records = [{"engagement": 100}]

        stats = engagement_statistics(records, ColumnRoles(trend="title"))

        assert stats.average == 0
        assert stats.highest == 0
        assert stats.lowest == 0

    def test_average(self):
        records = [{"engagement": v} for v in [120, 340, 5]]

        assert engagement_statistics(records, ROLES).average == pytest.approx(155.0)
