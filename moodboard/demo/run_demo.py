"""
Moodboard AI Demo Runner

Generates a sample fashion trend dataset and runs the full analysis on it.
"""

import os

from rich.console import Console
from rich.panel import Panel

from moodboard.config import create_default_config
from moodboard.demo.sample_data import generate_sample_csv
from moodboard.main import MoodboardAgent

console = Console()


def run_demo(skip_llm: bool = True, output_dir: str = "./output", csv_path: str = "./data/fashion_trends.csv"):
    """
    Run the complete Moodboard AI demonstration.

    Args:
        skip_llm: Skip AI insights (set to False if you have an API key)
        output_dir: Where the report is written
        csv_path: Where the sample dataset is written
    """
    console.print(Panel(
        "[bold magenta]Moodboard AI Demo[/bold magenta]\n\n"
        "This demo will:\n"
        "1. Create a sample social media trend dataset\n"
        "2. Detect columns and filter fashion content\n"
        "3. Write a trend report",
        title="Welcome",
        border_style="magenta"
    ))

    console.print("[bold cyan]Step 1: Creating sample dataset[/bold cyan]")
    generate_sample_csv(csv_path)
    console.print(f"[dim]Wrote {csv_path}[/dim]\n")

    console.print("[bold cyan]Step 2: Running analysis[/bold cyan]")
    config = create_default_config(output_dir=output_dir)

    if os.environ.get("OPENAI_API_KEY") and not skip_llm:
        console.print("[green]OpenAI API key detected - AI insights enabled[/green]")
        use_llm = True
    else:
        console.print("[yellow]Running without AI insights[/yellow]")
        console.print("[dim]Set OPENAI_API_KEY and pass --with-llm for full AI features[/dim]")
        use_llm = False

    agent = MoodboardAgent(config)
    report_path = agent.run(csv_path, skip_llm=not use_llm)

    console.print("[bold green]✓ Demo completed successfully![/bold green]")
    return report_path
