"""Inference modules for LLM-based insights."""

from moodboard.inference.llm_engine import AiInsights, InsightEngine
from moodboard.inference.prompts import PromptTemplates

__all__ = ["AiInsights", "InsightEngine", "PromptTemplates"]
