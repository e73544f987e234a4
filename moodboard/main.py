"""
Moodboard AI - Main Entry Point

Command-line interface and orchestration for the fashion trend analyzer.
"""

import sys
import logging
from typing import Optional, Tuple
from pathlib import Path
import time

import click
from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.panel import Panel
from rich.table import Table

from moodboard import __version__
from moodboard.config import MoodboardConfig, OutputFormat, create_default_config
from moodboard.core.analysis_store import AnalysisResult
from moodboard.core.csv_loader import CSVAnalysisError, UploadValidationError, read_csv_file
from moodboard.core.trend_analyzer import TrendAnalyzer
from moodboard.generators.report_generator import ReportGenerator
from moodboard.inference.llm_engine import AiInsights, InsightEngine

logger = logging.getLogger(__name__)

console = Console()


class MoodboardAgent:
    """
    Main orchestrator for the trend analysis workflow.

    This class coordinates all modules to:
    1. Read and validate the CSV file
    2. Run the trend analysis pipeline
    3. Generate AI insights (optional)
    4. Render and save the report
    """

    def __init__(self, config: MoodboardConfig):
        """
        Initialize the agent.

        Args:
            config: Complete configuration object
        """
        self.config = config
        self.analyzer = TrendAnalyzer(config.analysis)
        self.report_generator = ReportGenerator(config)
        self.insight_engine: Optional[InsightEngine] = None

        self.result: Optional[AnalysisResult] = None
        self.insights: Optional[AiInsights] = None

    def run(self, csv_path: str, skip_llm: bool = False) -> str:
        """
        Execute the complete analysis for one file.

        Args:
            csv_path: Path to the CSV file
            skip_llm: Skip AI insight generation

        Returns:
            Path to the generated report
        """
        start_time = time.time()

        with Progress(
            SpinnerColumn(),
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
        ) as progress:

            task1 = progress.add_task("Reading CSV file...", total=1)
            csv_text = read_csv_file(csv_path, self.config.analysis.max_file_size_bytes)
            progress.update(task1, completed=1)

            task2 = progress.add_task("Analyzing trends...", total=1)
            self.result = self.analyzer.analyze_csv(csv_text)
            progress.update(task2, completed=1)

            if not skip_llm:
                task3 = progress.add_task("Generating AI insights...", total=1)
                self.insights = self._run_inference(self.result)
                progress.update(task3, completed=1)

            task4 = progress.add_task("Writing report...", total=1)
            report_path = self._generate_report(csv_path)
            progress.update(task4, completed=1)

        elapsed = time.time() - start_time
        self._print_summary(elapsed, report_path)

        return report_path

    def analyze_text(
        self, csv_text: str, skip_llm: bool = False
    ) -> Tuple[AnalysisResult, Optional[AiInsights]]:
        """Analyze CSV text without touching the filesystem."""
        result = self.analyzer.analyze_csv(csv_text)
        insights = None if skip_llm else self._run_inference(result)
        return result, insights

    def _run_inference(self, result: AnalysisResult) -> Optional[AiInsights]:
        """Run LLM inference."""
        if self.insight_engine is None:
            self.insight_engine = InsightEngine(self.config)
        return self.insight_engine.generate_insights(result)

    def _generate_report(self, csv_path: str) -> str:
        """Generate and save the report."""
        document = self.report_generator.generate(self.result, self.insights)
        filename = f"{Path(csv_path).stem}_trend_report"
        return self.report_generator.save(document, filename)

    def _print_summary(self, elapsed: float, report_path: str):
        """Print execution summary."""
        console.print()

        table = Table(title="Trend Analysis Summary", show_header=True)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        stats = self.result.get_statistics()
        table.add_row("Total Records", f"{stats['total_records']:,}")
        table.add_row("Relevant Records", f"{stats['fashion_records']:,}")
        table.add_row("Top Trends", str(stats["trend_count"]))
        table.add_row("Platforms", str(stats["platform_count"]))
        table.add_row("Hashtags", str(stats["hashtag_count"]))
        table.add_row("Average Engagement", f"{stats['average_engagement']:,.1f}")
        table.add_row("AI Insights", "yes" if self.insights else "no")
        table.add_row("Processing Time", f"{elapsed:.1f}s")

        console.print(table)

        if self.result.trends:
            trends_table = Table(title="Top Trends", show_header=True)
            trends_table.add_column("#", style="dim")
            trends_table.add_column("Content")
            trends_table.add_column("Platform", style="cyan")
            trends_table.add_column("Engagement", style="green", justify="right")
            for i, trend in enumerate(self.result.trends, 1):
                trends_table.add_row(str(i), trend.trend, trend.platform, trend.engagement)
            console.print(trends_table)

        console.print()
        console.print(Panel(
            f"Report saved to:\n[bold green]{report_path}[/bold green]",
            title="Output",
            border_style="green"
        ))


def _load_config(config_path: Optional[str], output: Optional[str], fmt: Optional[str]) -> MoodboardConfig:
    """Build configuration from an optional YAML file and CLI overrides."""
    config = MoodboardConfig.from_yaml(config_path) if config_path else create_default_config()
    if output:
        config.output.output_dir = output
    if fmt:
        config.output.format = OutputFormat(fmt)
    return config


# CLI Commands
@click.group()
@click.version_option(version=__version__, prog_name="Moodboard AI")
def cli():
    """Moodboard AI - Fashion Trend Dataset Analyzer"""
    pass


@cli.command()
@click.argument('csv_file', type=click.Path(dir_okay=False))
@click.option('--output', '-o', default=None, help='Output directory')
@click.option('--format', '-f', 'fmt', type=click.Choice(['markdown', 'json']),
              default=None, help='Report format')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='YAML configuration file')
@click.option('--skip-llm', is_flag=True, help='Skip AI insight generation')
@click.option('--verbose', '-v', is_flag=True, help='Verbose output')
def analyze(csv_file, output, fmt, config_path, skip_llm, verbose):
    """
    Analyze a CSV dataset and write a trend report.

    Examples:

        moodboard analyze ./data/tiktok_trends.csv

        moodboard analyze trends.csv -f json -o ./reports --skip-llm
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    console.print(Panel(
        "[bold magenta]Moodboard AI[/bold magenta]\n"
        "[dim]Fashion Trend Dataset Analyzer[/dim]",
        border_style="magenta"
    ))

    try:
        config = _load_config(config_path, output, fmt)
        agent = MoodboardAgent(config)
        agent.run(csv_file, skip_llm=skip_llm)

        console.print("\n[bold green]✓ Report generated successfully![/bold green]")

    except (UploadValidationError, CSVAnalysisError) as e:
        console.print(f"\n[bold red]✗ Error: {e}[/bold red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"\n[bold red]✗ Error: {e}[/bold red]")
        if verbose:
            console.print_exception()
        sys.exit(1)


@cli.command()
@click.option('--host', default='127.0.0.1', help='Bind address')
@click.option('--port', '-p', default=5000, type=int, help='Port')
@click.option('--config', '-c', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='YAML configuration file')
@click.option('--debug', is_flag=True, help='Run Flask in debug mode')
def serve(host, port, config_path, debug):
    """Start the upload API server."""
    from moodboard.webapp.app import create_app

    config = _load_config(config_path, None, None)
    app = create_app(config)
    app.run(host=host, port=port, debug=debug)


@cli.command()
@click.option('--with-llm', is_flag=True, help='Enable AI insights (requires OPENAI_API_KEY)')
@click.option('--output', '-o', default='./output', help='Output directory')
def demo(with_llm, output):
    """Generate a sample dataset and analyze it."""
    from moodboard.demo.run_demo import run_demo

    run_demo(skip_llm=not with_llm, output_dir=output)


@cli.command()
def version():
    """Show version information."""
    console.print(Panel(
        f"[bold]Moodboard AI[/bold] v{__version__}\n\n"
        "Turns social media CSV exports into fashion trend reports.\n\n"
        "Components:\n"
        "  • Column Classifier\n"
        "  • Relevance Filter\n"
        "  • Trend Ranker\n"
        "  • Aggregator\n"
        "  • LLM Insight Engine\n"
        "  • Report Generator",
        title="About",
        border_style="blue"
    ))


def main():
    """Main entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    cli()


if __name__ == "__main__":
    main()
