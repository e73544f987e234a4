import json
from pathlib import Path

import pytest

from moodboard.config import OutputFormat
from moodboard.core.trend_analyzer import analyze_fashion_dataset
from moodboard.generators.report_generator import ReportGenerator
from moodboard.inference.llm_engine import AiInsights


@pytest.fixture
def result(keyword_csv):
    return analyze_fashion_dataset(keyword_csv)


@pytest.fixture
def insights(insights_payload):
    return AiInsights.from_dict(insights_payload)


class TestMarkdown:

    def test_sections_and_rows(self, config, result):
        document = ReportGenerator(config).generate_markdown(result)

        assert document.startswith("# Trend Analysis Report")
        assert "Analyzed 2 relevant records from 3 total." in document
        assert "| 1 | boho dress | TikTok | 120.0 |  |  |" in document
        assert "| TikTok | 1 | 50.0% |" in document
        assert "| Average | 62.5 |" in document
        assert "AI-Powered Insights" not in document
        assert "No fashion keywords were found" not in document

    def test_hashtag_section_only_when_present(self, config, result):
        document = ReportGenerator(config).generate_markdown(result)

        assert "### Top Tags/Keywords" not in document

        tagged = analyze_fashion_dataset("title,hashtags\nboho dress,#boho #ootd\n")
        document = ReportGenerator(config).generate_markdown(tagged)

        assert "### Top Tags/Keywords" in document
        assert "| #boho | 1 |" in document

    def test_insights_section(self, config, result, insights, insights_payload):
        document = ReportGenerator(config).generate_markdown(result, insights)

        assert "## AI-Powered Insights" in document
        assert insights_payload["analysisSummary"] in document
        assert "- Boho revival" in document
        assert "- Seed creators" in document

    def test_fallback_note(self, config, no_keyword_csv):
        result = analyze_fashion_dataset(no_keyword_csv)

        document = ReportGenerator(config).generate_markdown(result)

        assert "No fashion keywords were found" in document

    def test_pipes_in_cells_are_escaped(self, config):
        result = analyze_fashion_dataset('title,platform\n"dress | skirt",TikTok\n')

        document = ReportGenerator(config).generate_markdown(result)

        assert "dress \\| skirt" in document

    def test_no_rankable_trends(self, config):
        result = analyze_fashion_dataset("title,engagement\nboho dress,n/a\n")

        document = ReportGenerator(config).generate_markdown(result)

        assert "*No rankable trends found.*" in document


class TestJson:

    def test_json_includes_insights(self, config, result, insights, insights_payload):
        config.output.format = OutputFormat.JSON

        data = json.loads(ReportGenerator(config).generate(result, insights))

        assert data["fashionRecords"] == 2
        assert data["aiInsights"] == insights_payload

    def test_json_without_insights(self, config, result):
        config.output.format = OutputFormat.JSON

        data = json.loads(ReportGenerator(config).generate(result))

        assert data["aiInsights"] is None


@pytest.mark.parametrize("fmt, suffix", [
    (OutputFormat.MARKDOWN, ".md"),
    (OutputFormat.JSON, ".json"),
])
def test_save_writes_into_output_dir(config, fmt, suffix):
    config.output.format = fmt

    path = ReportGenerator(config).save("content", "trends_trend_report")

    assert Path(path) == Path(config.output.output_dir) / f"trends_trend_report{suffix}"
    assert Path(path).read_text(encoding="utf-8") == "content"
