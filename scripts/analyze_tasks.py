#!/usr/bin/env python3
"""
Analyze a file of task texts (one task per line) and print a summary table.

Usage:
    python scripts/analyze_tasks.py tasks.txt
    python scripts/analyze_tasks.py tasks.txt --context "Buchhalter (m/w/d)"
    python scripts/analyze_tasks.py tasks.txt --json > results.json
"""

import json
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from autoscope.contexts.analysis import AnalysisEngine, ScoringConfigError, load_scoring_config
from autoscope.contexts.analysis.logger import log_batch_summary, setup_analysis_logger
from autoscope.utils.report_formatter import format_results_report, format_stats_report
from autoscope.utils.timestamp import now

load_dotenv()

LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(help="Analyze a file of task texts, one per line.")


@app.command()
def main(
    task_file: Path = typer.Argument(..., help="Text file with one task per line"),
    context: Optional[str] = typer.Option(None, "--context", "-c", help="Job context shared by all tasks"),
    as_json: bool = typer.Option(False, "--json", help="Print results and statistics as JSON"),
    config: Optional[Path] = typer.Option(None, "--config", help="YAML file overriding scoring weights"),
    log: bool = typer.Option(False, "--log", help="Write a debug log to LOGS_PATH/analyze_TIMESTAMP"),
):
    """Analyze every non-empty line of TASK_FILE in order."""
    if not task_file.exists():
        typer.echo(f"ERROR: File not found: {task_file}", err=True)
        raise typer.Exit(1)

    if log:
        log_file = setup_analysis_logger(LOGS_PATH / f"analyze_{now()}", source=task_file.name)
        typer.echo(f"Log file: {log_file}", err=True)

    try:
        engine = AnalysisEngine(config=load_scoring_config(config))
    except (FileNotFoundError, ScoringConfigError) as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(1)

    lines = [line.strip() for line in task_file.read_text(encoding="utf-8").splitlines()]
    tasks = [line for line in lines if line]

    if not tasks:
        typer.echo(f"ERROR: No tasks in {task_file}", err=True)
        raise typer.Exit(1)

    results = engine.analyze_tasks(tasks, context)
    stats = engine.get_analysis_stats(results)
    log_batch_summary(stats)

    if as_json:
        payload = {
            "results": [result.to_dict() for result in results],
            "stats": {
                "total_tasks": stats.total_tasks,
                "distribution": stats.distribution,
                "averages": stats.averages,
                "category_counts": stats.category_counts,
            },
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    typer.echo(format_results_report(results, title=f"Task Analysis: {task_file.name}"))
    typer.echo()
    typer.echo(format_stats_report(stats))


if __name__ == "__main__":
    app()
