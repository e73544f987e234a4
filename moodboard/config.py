"""
Configuration management for Moodboard AI.

Handles all configuration options including LLM settings,
analysis limits, and output preferences.
"""

from dataclasses import dataclass, field
from typing import Optional, Dict, Any
from enum import Enum
import os
import yaml


class OutputFormat(Enum):
    """Supported report formats."""
    MARKDOWN = "markdown"
    JSON = "json"


@dataclass
class LLMConfig:
    """LLM configuration for the insight engine."""
    provider: str = "openai"
    model: str = "gpt-4o"
    api_key: Optional[str] = None
    temperature: float = 0.4
    max_tokens: int = 1024
    timeout: int = 60
    retry_attempts: int = 3

    def __post_init__(self):
        if not self.api_key:
            self.api_key = os.environ.get("OPENAI_API_KEY")


@dataclass
class AnalysisConfig:
    """Limits applied by the trend analysis pipeline."""
    max_trends: int = 10
    max_platforms: int = 5
    max_hashtags: int = 10
    trend_text_limit: int = 80
    min_hashtag_length: int = 3  # Shorter tokens are noise ("a", "of")
    max_file_size_bytes: int = 5 * 1024 * 1024
    processing_delay_seconds: float = 0.0


@dataclass
class OutputConfig:
    """Output configuration."""
    format: OutputFormat = OutputFormat.MARKDOWN
    output_dir: str = "./output"


@dataclass
class MoodboardConfig:
    """Main configuration container."""
    llm: LLMConfig = field(default_factory=LLMConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    verbose: bool = False

    @classmethod
    def from_yaml(cls, path: str) -> "MoodboardConfig":
        """Load configuration from YAML file."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        return cls._from_dict(data)

    @classmethod
    def _from_dict(cls, data: Dict[str, Any]) -> "MoodboardConfig":
        """Create config from dictionary."""
        llm_data = data.get("llm", {})
        llm_config = LLMConfig(
            provider=llm_data.get("provider", "openai"),
            model=llm_data.get("model", "gpt-4o"),
            api_key=llm_data.get("api_key"),
            temperature=llm_data.get("temperature", 0.4),
            max_tokens=llm_data.get("max_tokens", 1024),
            timeout=llm_data.get("timeout", 60),
            retry_attempts=llm_data.get("retry_attempts", 3),
        )

        analysis_data = data.get("analysis", {})
        defaults = AnalysisConfig()
        analysis_config = AnalysisConfig(
            max_trends=analysis_data.get("max_trends", defaults.max_trends),
            max_platforms=analysis_data.get("max_platforms", defaults.max_platforms),
            max_hashtags=analysis_data.get("max_hashtags", defaults.max_hashtags),
            trend_text_limit=analysis_data.get("trend_text_limit", defaults.trend_text_limit),
            min_hashtag_length=analysis_data.get("min_hashtag_length", defaults.min_hashtag_length),
            max_file_size_bytes=analysis_data.get("max_file_size_bytes", defaults.max_file_size_bytes),
            processing_delay_seconds=analysis_data.get(
                "processing_delay_seconds", defaults.processing_delay_seconds
            ),
        )

        output_data = data.get("output", {})
        output_config = OutputConfig(
            format=OutputFormat(output_data.get("format", "markdown")),
            output_dir=output_data.get("output_dir", "./output"),
        )

        return cls(
            llm=llm_config,
            analysis=analysis_config,
            output=output_config,
            verbose=data.get("verbose", False),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary. The API key is never included."""
        return {
            "llm": {
                "provider": self.llm.provider,
                "model": self.llm.model,
                "temperature": self.llm.temperature,
            },
            "analysis": {
                "max_trends": self.analysis.max_trends,
                "max_platforms": self.analysis.max_platforms,
                "max_hashtags": self.analysis.max_hashtags,
                "trend_text_limit": self.analysis.trend_text_limit,
                "max_file_size_bytes": self.analysis.max_file_size_bytes,
            },
            "output": {
                "format": self.output.format.value,
                "output_dir": self.output.output_dir,
            },
        }


def create_default_config(
    output_dir: str = "./output",
    output_format: str = "markdown",
    api_key: Optional[str] = None,
    verbose: bool = False,
) -> MoodboardConfig:
    """Factory function to create a default configuration."""
    return MoodboardConfig(
        llm=LLMConfig(api_key=api_key),
        analysis=AnalysisConfig(),
        output=OutputConfig(format=OutputFormat(output_format), output_dir=output_dir),
        verbose=verbose,
    )
