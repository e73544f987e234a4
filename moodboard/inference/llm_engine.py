"""
LLM Inference Engine

Coordinates LLM calls that turn a trend analysis into an executive
summary, trend predictions and strategic recommendations.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any
import time

import openai

from moodboard.config import LLMConfig, MoodboardConfig
from moodboard.core.analysis_store import AnalysisResult
from moodboard.inference.prompts import PromptTemplates

logger = logging.getLogger(__name__)


@dataclass
class AiInsights:
    """Qualitative insights generated for one analysis."""
    analysis_summary: str
    future_predictions: List[str] = field(default_factory=list)
    strategic_recommendations: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AiInsights":
        """
        Build insights from the model's JSON answer.

        Raises:
            ValueError: if a field is missing or has the wrong type
        """
        summary = data.get("analysisSummary")
        predictions = data.get("futurePredictions")
        recommendations = data.get("strategicRecommendations")

        if not isinstance(summary, str) or not summary.strip():
            raise ValueError("analysisSummary must be a non-empty string")
        for name, items in (
            ("futurePredictions", predictions),
            ("strategicRecommendations", recommendations),
        ):
            if not isinstance(items, list) or not all(isinstance(i, str) for i in items):
                raise ValueError(f"{name} must be a list of strings")

        return cls(
            analysis_summary=summary.strip(),
            future_predictions=[p.strip() for p in predictions],
            strategic_recommendations=[r.strip() for r in recommendations],
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "analysisSummary": self.analysis_summary,
            "futurePredictions": list(self.future_predictions),
            "strategicRecommendations": list(self.strategic_recommendations),
        }


class InsightEngine:
    """
    LLM-based insight generator for trend analyses.

    Failures never propagate: after the configured retries the engine
    logs a warning and returns None so reports can still be produced.
    """

    def __init__(self, config: MoodboardConfig, client: Optional[Any] = None):
        """
        Initialize the insight engine.

        Args:
            config: Moodboard configuration
            client: Pre-built OpenAI-compatible client (mainly for tests)
        """
        self.config = config
        self.llm_config: LLMConfig = config.llm
        self._client = client
        if self._client is None:
            self._initialize_client()

    @property
    def available(self) -> bool:
        """Whether an LLM client is configured."""
        return self._client is not None

    def _initialize_client(self):
        """Initialize the LLM client."""
        if self.llm_config.provider != "openai":
            logger.warning(f"Unsupported LLM provider: {self.llm_config.provider}")
            return
        if not self.llm_config.api_key:
            logger.warning("No OpenAI API key configured. AI insights will be disabled.")
            return

        try:
            self._client = openai.OpenAI(
                api_key=self.llm_config.api_key,
                timeout=self.llm_config.timeout,
            )
            logger.info(f"Initialized OpenAI client with model: {self.llm_config.model}")
        except openai.OpenAIError as e:
            logger.error(f"Failed to initialize OpenAI client: {e}")

    def generate_insights(self, result: AnalysisResult) -> Optional[AiInsights]:
        """
        Generate insights for an analysis result.

        Args:
            result: Completed trend analysis

        Returns:
            Insights, or None if the LLM is unavailable or keeps failing
        """
        if not self._client:
            logger.warning("LLM client not available. Skipping insights.")
            return None

        logger.info("Generating AI insights...")
        prompt = PromptTemplates.format_insights(result.to_dict())

        insights = self._call_llm(prompt)
        if insights:
            logger.info("AI insights complete.")
        return insights

    def _call_llm(self, prompt: str, system_prompt: str = None) -> Optional[AiInsights]:
        """
        Make a call to the LLM and parse the structured answer.

        Args:
            prompt: User prompt
            system_prompt: Optional system prompt override

        Returns:
            Parsed insights or None on failure
        """
        system = system_prompt or PromptTemplates.SYSTEM_PROMPT

        for attempt in range(self.llm_config.retry_attempts):
            try:
                response = self._client.chat.completions.create(
                    model=self.llm_config.model,
                    messages=[
                        {"role": "system", "content": system},
                        {"role": "user", "content": prompt}
                    ],
                    temperature=self.llm_config.temperature,
                    max_tokens=self.llm_config.max_tokens,
                    response_format={"type": "json_object"},
                )

                content = response.choices[0].message.content
                return AiInsights.from_dict(json.loads(content))

            except (ValueError, TypeError, AttributeError) as e:
                logger.warning(f"Invalid insights response (attempt {attempt + 1}): {e}")
                if attempt < self.llm_config.retry_attempts - 1:
                    time.sleep(1)
            except openai.OpenAIError as e:
                logger.warning(f"LLM call failed (attempt {attempt + 1}): {e}")
                if attempt < self.llm_config.retry_attempts - 1:
                    time.sleep(2 ** attempt)  # Exponential backoff

        return None
