"""Report generators."""

from moodboard.generators.report_generator import ReportGenerator

__all__ = ["ReportGenerator"]
