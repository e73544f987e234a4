from moodboard.core.analysis_store import ColumnRoles, TrendEntry
from moodboard.core.trend_ranker import rank_trends, truncate_text

ROLES = ColumnRoles(trend="title", platform="platform", engagement="engagement")


def test_sorted_descending_by_engagement():
    records = [
        {"title": "a", "platform": "X", "engagement": 5},
        {"title": "b", "platform": "X", "engagement": 340},
        {"title": "c", "platform": "X", "engagement": 120},
    ]

    trends = rank_trends(records, ROLES)

    assert [t.trend for t in trends] == ["b", "c", "a"]
    assert [t.engagement for t in trends] == ["340.0", "120.0", "5.0"]


def test_ties_keep_input_order():
    records = [
        {"title": "first", "platform": "X", "engagement": 10},
        {"title": "top", "platform": "X", "engagement": 50},
        {"title": "second", "platform": "X", "engagement": 10},
        {"title": "third", "platform": "X", "engagement": "10"},
    ]

    trends = rank_trends(records, ROLES)

    assert [t.trend for t in trends] == ["top", "first", "second", "third"]


def test_non_numeric_engagement_dropped_but_zero_and_negative_kept():
    records = [
        {"title": "broken", "platform": "X", "engagement": "n/a"},
        {"title": "missing", "platform": "X", "engagement": None},
        {"title": "zero", "platform": "X", "engagement": 0},
        {"title": "negative", "platform": "X", "engagement": -3},
        {"title": "suffix", "platform": "X", "engagement": "12k"},
    ]

    trends = rank_trends(records, ROLES)

    assert [t.trend for t in trends] == ["suffix", "zero", "negative"]
    assert [t.engagement for t in trends] == ["12.0", "0.0", "-3.0"]


def test_blank_trend_text_dropped():
    records = [
        {"title": "   ", "platform": "X", "engagement": 1},
        {"title": None, "platform": "X", "engagement": 2},
        {"title": 0, "platform": "X", "engagement": 3},
    ]

    trends = rank_trends(records, ROLES)

    assert [t.trend for t in trends] == ["0"]


def test_without_engagement_column_order_is_kept():
    roles = ColumnRoles(trend="title")
    records = [{"title": "z"}, {"title": "a"}, {"title": "m"}]

    trends = rank_trends(records, roles)

    assert trends == (
        TrendEntry(trend="z", platform="Unknown", engagement="N/A"),
        TrendEntry(trend="a", platform="Unknown", engagement="N/A"),
        TrendEntry(trend="m", platform="Unknown", engagement="N/A"),
    )


def test_at_most_ten_entries():
    records = [{"title": f"look {i}", "platform": "X", "engagement": i} for i in range(25)]

    trends = rank_trends(records, ROLES)

    assert len(trends) == 10
    assert trends[0].trend == "look 24"
    assert trends[-1].trend == "look 15"


def test_text_truncated_to_80_characters_plus_ellipsis():
    long_text = "x" * 100
    exact_text = "y" * 80
    records = [
        {"title": long_text, "platform": "X", "engagement": 2},
        {"title": exact_text, "platform": "X", "engagement": 1},
    ]

    trends = rank_trends(records, ROLES)

    assert trends[0].trend == "x" * 80 + "..."
    assert len(trends[0].trend) == 83
    assert trends[1].trend == exact_text


def test_truncate_text_custom_limit():
    assert truncate_text("boho dress", 4) == "boho..."
    assert truncate_text("boho", 4) == "boho"


def test_category_and_hashtags_copied_as_text():
    roles = ColumnRoles(trend="title", engagement="likes", category="category", hashtags="tags")
    records = [{"title": "y2k", "likes": 9, "category": 2024, "tags": "#y2k #ootd"}]

    (entry,) = rank_trends(records, roles)

    assert entry.platform == "Unknown"
    assert entry.category == "2024"
    assert entry.hashtags == "#y2k #ootd"
    assert entry.to_dict() == {
        "trend": "y2k",
        "platform": "Unknown",
        "engagement": "9.0",
        "category": "2024",
        "hashtags": "#y2k #ootd",
    }


def test_absent_optional_roles_are_omitted():
    (entry,) = rank_trends([{"title": "y2k", "platform": "X", "engagement": 1}], ROLES)

    assert entry.category is None
    assert entry.hashtags is None
    assert "category" not in entry.to_dict()


def test_blank_platform_cell_renders_unknown():
    records = [{"title": "boho dress", "platform": None, "engagement": 1}]

    (entry,) = rank_trends(records, ROLES)

    assert entry.platform == "Unknown"
