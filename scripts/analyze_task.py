#!/usr/bin/env python3
"""
Analyze a single task text for its automation potential.

Usage:
    python scripts/analyze_task.py "Rechnungen in DATEV erfassen und buchen"
    python scripts/analyze_task.py "Kundendaten im CRM pflegen" --context "Sales Assistant"
    python scripts/analyze_task.py "Reports in Excel erstellen" --json
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from autoscope.contexts.analysis import AnalysisEngine, ScoringConfigError, load_scoring_config
from autoscope.contexts.analysis.logger import setup_analysis_logger
from autoscope.utils.timestamp import now

load_dotenv()

LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Analyze one task text for automation potential.")


@app.command()
def main(
    text: str = typer.Argument(..., help="Task text to analyze"),
    context: Optional[str] = typer.Option(None, "--context", "-c", help="Job context, e.g. the posting title"),
    as_json: bool = typer.Option(False, "--json", help="Print the full result as JSON"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML file overriding scoring weights"),
    log: bool = typer.Option(False, "--log", help="Write a debug log to LOGS_PATH/analyze_TIMESTAMP"),
):
    """Analyze TEXT and print label, scores, reasoning and subtasks."""
    if log:
        log_file = setup_analysis_logger(LOGS_PATH / f"analyze_{now()}", source="cli")
        typer.echo(f"Log file: {log_file}", err=True)

    try:
        engine = AnalysisEngine(config=load_scoring_config(config))
    except (FileNotFoundError, ScoringConfigError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    result = engine.analyze_task(text, context)

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2, ensure_ascii=False))
        return

    typer.echo("\n=== Result ===")
    typer.secho(f"  {result.label.value}", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  automation potential: {result.automation_potential}%")
    typer.echo(f"  confidence: {result.confidence}%")
    typer.echo(f"  pattern: {result.pattern} ({result.category})")
    typer.echo(f"  complexity: {result.complexity}")
    typer.echo(f"  trend: {result.trend}")
    typer.echo(f"  industry: {result.industry}")
    typer.echo(f"  systems: {', '.join(result.systems) if result.systems else '(none detected)'}")
    typer.echo(f"  reasoning: {result.reasoning}")

    typer.echo(f"\n=== Subtasks ({len(result.subtasks)}) ===")
    for subtask in result.subtasks:
        typer.echo(
            f"  [{subtask.index + 1}] {subtask.title} "
            f"({subtask.automation_potential}%, {subtask.estimated_time} min, {subtask.priority})"
        )
        if subtask.dependencies:
            typer.echo(f"      depends on: {', '.join(subtask.dependencies)}")

    typer.echo(f"\nAnalyzed in {result.analysis_time_ms:.2f} ms")


if __name__ == "__main__":
    app()
