"""
Report Generator

Renders an analysis result (and optional AI insights) as a Markdown or
JSON report and writes it to the output directory.
"""

from typing import Optional
from pathlib import Path
from datetime import datetime
import json
import logging

from moodboard.config import MoodboardConfig, OutputFormat
from moodboard.core.analysis_store import AnalysisResult
from moodboard.inference.llm_engine import AiInsights

logger = logging.getLogger(__name__)

_EXTENSIONS = {
    OutputFormat.MARKDOWN: ".md",
    OutputFormat.JSON: ".json",
}


def _cell(value: str) -> str:
    """Escape a value for a Markdown table cell."""
    return value.replace("|", "\\|").replace("\n", " ")


class ReportGenerator:
    """Builds trend analysis reports."""

    def __init__(self, config: MoodboardConfig):
        self.config = config
        self.output_config = config.output

    def generate(
        self,
        result: AnalysisResult,
        insights: Optional[AiInsights] = None,
        title: str = "Trend Analysis Report",
    ) -> str:
        """Render the report in the configured format."""
        if self.output_config.format == OutputFormat.JSON:
            return self.generate_json(result, insights)
        return self.generate_markdown(result, insights, title)

    def generate_json(self, result: AnalysisResult, insights: Optional[AiInsights] = None) -> str:
        """Render the report as JSON."""
        data = result.to_dict()
        data["aiInsights"] = insights.to_dict() if insights else None
        return json.dumps(data, indent=2)

    def generate_markdown(
        self,
        result: AnalysisResult,
        insights: Optional[AiInsights] = None,
        title: str = "Trend Analysis Report",
    ) -> str:
        """Render the report as Markdown."""
        md = []

        # Header
        md.append(f"# {title}")
        md.append(f"\n*Generated by Moodboard AI on {datetime.now():%Y-%m-%d}*\n")
        md.append(
            f"Analyzed {result.fashion_records} relevant records "
            f"from {result.total_records} total.\n"
        )
        if result.used_fallback:
            md.append("> No fashion keywords were found, so every record was analyzed.\n")

        # AI insights
        if insights:
            md.append("## AI-Powered Insights\n")
            md.append("### Executive Summary\n")
            md.append(f"{insights.analysis_summary}\n")
            md.append("### Future Predictions\n")
            for prediction in insights.future_predictions:
                md.append(f"- {prediction}")
            md.append("")
            md.append("### Strategic Recommendations\n")
            for recommendation in insights.strategic_recommendations:
                md.append(f"- {recommendation}")
            md.append("")

        md.append("---\n## Detailed Data Breakdown\n")

        # Top trends
        md.append("### Top Content/Trends\n")
        if result.trends:
            md.append("| # | Content | Source | Engagement | Category | Hashtags |")
            md.append("|---|---------|--------|------------|----------|----------|")
            for i, trend in enumerate(result.trends, 1):
                md.append(
                    f"| {i} | {_cell(trend.trend)} | {_cell(trend.platform)} | {trend.engagement} "
                    f"| {_cell(trend.category or '')} | {_cell(trend.hashtags or '')} |"
                )
        else:
            md.append("*No rankable trends found.*")
        md.append("")

        # Platforms
        md.append("### Data Source Distribution\n")
        md.append("| Source | Count | Percentage |")
        md.append("|--------|-------|------------|")
        for share in result.top_platforms:
            md.append(f"| {_cell(share.platform)} | {share.count} | {share.percentage} |")
        md.append("")

        # Hashtags
        if result.top_hashtags:
            md.append("### Top Tags/Keywords\n")
            md.append("| Tag | Frequency |")
            md.append("|-----|-----------|")
            for tag in result.top_hashtags:
                md.append(f"| {tag.hashtag} | {tag.count} |")
            md.append("")

        # Engagement
        stats = result.engagement_stats
        md.append("### Engagement Statistics\n")
        md.append("| Metric | Value |")
        md.append("|--------|-------|")
        md.append(f"| Average | {stats.average:,.1f} |")
        md.append(f"| Highest | {stats.highest:,.1f} |")
        md.append(f"| Lowest | {stats.lowest:,.1f} |")
        md.append("")

        md.append("---\n*Generated by Moodboard AI*")

        return "\n".join(md)

    def save(self, document: str, filename: str) -> str:
        """
        Write a report to the output directory.

        Args:
            document: Rendered report
            filename: File name without extension

        Returns:
            Path of the written file
        """
        output_dir = Path(self.output_config.output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        path = output_dir / f"{filename}{_EXTENSIONS[self.output_config.format]}"
        path.write_text(document, encoding="utf-8")

        logger.info(f"Report saved to {path}")
        return str(path)
