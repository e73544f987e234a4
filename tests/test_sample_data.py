from moodboard.core.trend_analyzer import analyze_fashion_dataset
from moodboard.demo.sample_data import FIELDNAMES, generate_rows, generate_sample_csv


def test_rows_are_reproducible():
    assert generate_rows(20, seed=1) == generate_rows(20, seed=1)
    assert generate_rows(20, seed=1) != generate_rows(20, seed=2)


def test_sample_csv_analyzes(tmp_path):
    path = generate_sample_csv(str(tmp_path / "nested" / "sample.csv"), rows=40)

    with open(path, encoding="utf-8") as f:
        text = f.read()

    assert text.splitlines()[0] == ",".join(FIELDNAMES)

    result = analyze_fashion_dataset(text)

    assert result.total_records == 40
    assert 0 < result.fashion_records <= 40
    assert result.column_roles.platform == "platform"
    assert result.column_roles.hashtags == "hashtags"
    assert result.top_hashtags
    assert result.engagement_stats.highest > 0
