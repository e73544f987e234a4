"""
Prompt Templates for LLM Inference

Contains the prompts used to turn an analysis result into market insights.
"""

from typing import Dict, Any
from dataclasses import dataclass
import json


@dataclass
class PromptTemplates:
    """Collection of prompt templates for insight generation."""

    # System prompt establishing the AI's role
    SYSTEM_PROMPT = """You are a senior fashion market analyst.

Your task is to read summarized social media trend data and explain what it means for fashion brands.

Guidelines:
1. Base all statements ONLY on the provided data summary
2. Be concise and specific; name the trends, platforms and hashtags you refer to
3. Predictions must follow from the data, not from general fashion knowledge
4. Recommendations must be actionable for a marketing or content team

Never invent numbers that are not in the data."""

    INSIGHTS_PROMPT = """Based on the following data summary from a social media dataset, provide a concise and insightful analysis.

Data:
{data}

Your tasks:
1. Write a brief executive summary of the key findings.
2. List three data-driven predictions for future trends.
3. Provide three actionable strategic recommendations for a fashion brand.

Respond in JSON format:
{{
    "analysisSummary": "...",
    "futurePredictions": ["...", "...", "..."],
    "strategicRecommendations": ["...", "...", "..."]
}}"""

    @classmethod
    def build_data_summary(cls, analysis: Dict[str, Any]) -> Dict[str, Any]:
        """
        Reduce a serialized analysis result to what the prompt needs.

        Args:
            analysis: ``AnalysisResult.to_dict()`` output
        """
        return {
            "topTrends": analysis["trends"],
            "topPlatforms": analysis["topPlatforms"],
            "topHashtags": analysis["topHashtags"],
            "avgEngagement": f"{analysis['engagementStats']['average']:.1f}",
        }

    @classmethod
    def format_insights(cls, analysis: Dict[str, Any]) -> str:
        """Format the insights prompt for an analysis result."""
        summary = cls.build_data_summary(analysis)
        return cls.INSIGHTS_PROMPT.format(data=json.dumps(summary, indent=2))
